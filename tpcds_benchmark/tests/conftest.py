# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import pytest

from tpcds_benchmark import queries as queries_module


@pytest.fixture
def query_root(tmp_path_factory, monkeypatch):
    root = tmp_path_factory.mktemp("queries")
    monkeypatch.setenv(queries_module.QUERIES_DIR_ENV, str(root))
    return root


@pytest.fixture
def write_query(query_root):
    def write(location, name, text):
        query_dir = query_root / location
        query_dir.mkdir(parents=True, exist_ok=True)
        (query_dir / f"{name}.sql").write_text(text)

    return write


@pytest.fixture
def no_warmup(monkeypatch):
    from tpcds_benchmark import runner

    class FastBenchmark(runner.Benchmark):
        def __init__(self, name, values_per_iteration, **kwargs):
            super().__init__(name, values_per_iteration, warmup_time=0, min_time=0, **kwargs)

    monkeypatch.setattr(runner, "Benchmark", FastBenchmark)
    return FastBenchmark
