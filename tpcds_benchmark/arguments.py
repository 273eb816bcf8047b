# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import argparse
from dataclasses import dataclass, field

TPCDS_DATA_LOCATION_OPTION = "--tpcds-data-location"
OUT_DATA_LOCATION_OPTION = "--out-data-location"
QUERY_FILTER_OPTION = "--query-filter"

OPTIONS = (TPCDS_DATA_LOCATION_OPTION, OUT_DATA_LOCATION_OPTION, QUERY_FILTER_OPTION)

USAGE = """
Usage: tpcds-query-benchmark [Options]
Options:
  --tpcds-data-location      Path to TPCDS data
  --query-filter             Queries to filter, e.g., q3,q5,q13
  --out-data-location        Path to store query results

------------------------------------------------------------------------------------------------------------------
In order to run this benchmark, please follow the instructions at
https://github.com/databricks/spark-sql-perf/blob/master/README.md
to generate the TPCDS data locally (preferably with a scale factor of 5 for benchmarking).
Thereafter, the value of <TPCDS data location> needs to be set to the location where the generated data is stored.
"""


class ArgumentError(Exception):
    exit_code = 1


class UnknownArgumentError(ArgumentError):
    exit_code = 1


class MissingArgumentError(ArgumentError):
    exit_code = -1


@dataclass(frozen=True)
class BenchmarkArguments:
    tpcds_data_location: str
    out_data_location: str = ""
    query_filter: frozenset = field(default_factory=frozenset)


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UnknownArgumentError(f"Unknown/unsupported param: {message}")


def _build_parser():
    parser = _RaisingArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument(TPCDS_DATA_LOCATION_OPTION, dest="tpcds_data_location")
    parser.add_argument(OUT_DATA_LOCATION_OPTION, dest="out_data_location", default="")
    parser.add_argument(QUERY_FILTER_OPTION, dest="query_filter", default="")
    return parser


def normalize_option_names(tokens):
    """Pair each flag with the token that follows it as `<flag>=<value>`, lower-casing the flag name.

    Any other token, including an already joined `--flag=value`, is rejected.
    """
    tokens = list(tokens)
    normalized = []
    i = 0
    while i < len(tokens):
        option = tokens[i].lower()
        if option not in OPTIONS or i + 1 >= len(tokens):
            raise UnknownArgumentError(f"Unknown/unsupported param {tokens[i:]}")
        normalized.append(f"{option}={tokens[i + 1]}")
        i += 2
    return normalized


def parse_query_filter(value):
    if not value:
        return frozenset()
    return frozenset(token.strip() for token in value.lower().split(",") if token.strip())


def parse_args(tokens):
    """Parse the benchmark flags into a BenchmarkArguments instance.

    Raises UnknownArgumentError for unrecognized tokens or flags without a value, and
    MissingArgumentError when the data location is not given.
    """
    namespace = _build_parser().parse_args(normalize_option_names(tokens))

    if namespace.tpcds_data_location is None or namespace.out_data_location is None:
        raise MissingArgumentError("Must specify data location")

    return BenchmarkArguments(
        tpcds_data_location=namespace.tpcds_data_location,
        out_data_location=namespace.out_data_location,
        query_filter=parse_query_filter(namespace.query_filter),
    )
