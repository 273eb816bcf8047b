# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import pytest

from tpcds_benchmark.arguments import (
    BenchmarkArguments,
    MissingArgumentError,
    UnknownArgumentError,
    parse_args,
    parse_query_filter,
)


def test_parse_all_options():
    arguments = parse_args([
        "--tpcds-data-location", "/data/tpcds",
        "--out-data-location", "/tmp/out",
        "--query-filter", "q3,q5,q13",
    ])
    assert arguments == BenchmarkArguments("/data/tpcds", "/tmp/out", frozenset({"q3", "q5", "q13"}))

    arguments = parse_args(["--QUERY-FILTER", "-q3", "--tpcds-data-location", "-/data/tpcds"])
    assert arguments == BenchmarkArguments("-/data/tpcds", "", frozenset({"-q3"}))


def test_values_starting_with_a_dash_are_bound_to_their_option():
    arguments = parse_args(["--out-data-location", "-results", "--TPCDS-DATA-LOCATION", "--data"])
    assert arguments.out_data_location == "-results"
    assert arguments.tpcds_data_location == "--data"


def test_defaults():
    arguments = parse_args(["--tpcds-data-location", "/data/tpcds"])
    assert arguments.out_data_location == ""
    assert arguments.query_filter == frozenset()


def test_option_names_are_case_insensitive():
    arguments = parse_args(["--TPCDS-Data-Location", "/Data/TPCDS", "--QUERY-FILTER", "Q1"])
    assert arguments.tpcds_data_location == "/Data/TPCDS"
    assert arguments.query_filter == frozenset({"q1"})


def test_parsing_is_order_independent_and_idempotent():
    tokens = ["--tpcds-data-location", "/data", "--out-data-location", "/out", "--query-filter", "q1,q2"]
    reordered = tokens[4:] + tokens[:2] + tokens[2:4]
    assert parse_args(tokens) == parse_args(reordered)
    assert parse_args(tokens) == parse_args(tokens)


def test_later_option_overrides_earlier_one():
    arguments = parse_args(["--tpcds-data-location", "/first", "--tpcds-data-location", "/second"])
    assert arguments.tpcds_data_location == "/second"


@pytest.mark.parametrize("value,expected", [
    ("q1,Q5, q9", {"q1", "q5", "q9"}),
    ("q14a", {"q14a"}),
    ("", set()),
    (None, set()),
    ("q1,,q2,", {"q1", "q2"}),
])
def test_parse_query_filter(value, expected):
    assert parse_query_filter(value) == frozenset(expected)


@pytest.mark.parametrize("tokens", [
    ["--unknown", "value"],
    ["--tpcds-data-location", "/data", "stray"],
    ["--tpcds-data-location"],
    ["--tpcds-data-location", "/data", "--query-filter"],
    ["--tpcds", "/data"],
    ["--tpcds-data-location=/data"],
    ["--TPCDS-DATA-LOCATION=/data"],
    ["--tpcds-data-location", "/data", "--query-filter=q1"],
])
def test_unknown_or_incomplete_arguments(tokens):
    with pytest.raises(UnknownArgumentError) as excinfo:
        parse_args(tokens)
    assert excinfo.value.exit_code == 1


@pytest.mark.parametrize("tokens", [
    [],
    ["--out-data-location", "/out"],
    ["--query-filter", "q1"],
])
def test_missing_data_location(tokens):
    with pytest.raises(MissingArgumentError) as excinfo:
        parse_args(tokens)
    assert excinfo.value.exit_code == -1
