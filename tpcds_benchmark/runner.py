# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import logging
import os
import re
from contextlib import contextmanager

from .benchmark import Benchmark
from .plan import analyzed_plan, estimate_query_size
from .queries import load_query_text

logger = logging.getLogger(__name__)

BENCHMARK_NAME = "TPCDS Snappy"
MIN_NUM_ITERS = 1
PREVIEW_ROWS_COUNT = 100

INVALID_COLUMN_CHARS = re.compile("[^a-zA-Z0-9]")


def sanitize_column_name(name):
    # Parquet rejects some of the generated output column names, e.g. "sum(ss_net_profit)".
    return INVALID_COLUMN_CHARS.sub("_", name)


def sanitize_columns(df):
    return df.toDF(*[sanitize_column_name(name) for name in df.columns])


@contextmanager
def cached(df):
    df.cache()
    try:
        yield df
    finally:
        df.unpersist()


def query_output_path(out_data_location, name, name_suffix=""):
    return os.path.join(out_data_location or os.curdir, f"{name}{name_suffix}")


def write_query_output(df, output_path):
    # "ignore" leaves an existing output directory as it is.
    df.write.mode("ignore").parquet(output_path)


def banner(message):
    text = f"\n\n===== {message} =====\n"
    print(text)
    logger.info(text)


def run_query(spark_session, query_set, name, table_sizes, out_data_location=""):
    query_string = load_query_text(query_set.location, name)
    case_name = f"{name}{query_set.name_suffix}"

    query_df = spark_session.sql(query_string)
    num_rows = estimate_query_size(analyzed_plan(query_df), table_sizes)
    final_df = sanitize_columns(query_df)
    final_df.printSchema()

    benchmark = Benchmark(BENCHMARK_NAME, num_rows, min_num_iters=MIN_NUM_ITERS)
    benchmark.add_case(case_name, lambda _: final_df.take(PREVIEW_ROWS_COUNT))

    with cached(final_df):
        banner(f"TPCDS QUERY BENCHMARK OUTPUT FOR {name}")
        benchmark.run()
        banner(f"FINISHED {name}")
        banner(f"TPCDS QUERY WRITING OUTPUT  : {out_data_location} / {case_name}")
        write_query_output(final_df, query_output_path(out_data_location, name, query_set.name_suffix))


def run_tpcds_queries(spark_session, query_set, table_sizes, out_data_location=""):
    for name in query_set.queries:
        run_query(spark_session, query_set, name, table_sizes, out_data_location)
