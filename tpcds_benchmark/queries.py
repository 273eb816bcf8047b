# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import os
from dataclasses import dataclass

QUERIES_DIR_ENV = "TPCDS_QUERIES_DIR"

TPCDS_V1_4_LOCATION = "tpcds"
TPCDS_V2_7_LOCATION = "tpcds-v2.7.0"
TPCDS_V2_7_SUFFIX = "-v2.7"

# List of all TPC-DS v1.4 queries
TPCDS_QUERIES = (
    "q1", "q2", "q3", "q4", "q5", "q6", "q7", "q8", "q9", "q10", "q11",
    "q12", "q13", "q14a", "q14b", "q15", "q16", "q17", "q18", "q19", "q20",
    "q21", "q22", "q23a", "q23b", "q24a", "q24b", "q25", "q26", "q27", "q28", "q29", "q30",
    "q31", "q32", "q33", "q34", "q35", "q36", "q37", "q38", "q39a", "q39b", "q40",
    "q41", "q42", "q43", "q44", "q45", "q46", "q47", "q48", "q49", "q50",
    "q51", "q52", "q53", "q54", "q55", "q56", "q57", "q58", "q59", "q60",
    "q61", "q62", "q63", "q64", "q65", "q66", "q67", "q68", "q69", "q70",
    "q71", "q72", "q73", "q74", "q75", "q76", "q77", "q78", "q79", "q80",
    "q81", "q82", "q83", "q84", "q85", "q86", "q87", "q88", "q89", "q90",
    "q91", "q92", "q93", "q94", "q95", "q96", "q97", "q98", "q99",
)

# Only the TPC-DS v2.7 queries that differ from the v1.4 ones
TPCDS_QUERIES_V2_7 = (
    "q11",
)


class EmptyQuerySetError(RuntimeError):
    pass


@dataclass(frozen=True)
class QuerySet:
    location: str
    queries: tuple
    name_suffix: str = ""


def filter_queries(queries, query_filter):
    if query_filter:
        return tuple(query for query in queries if query in query_filter)
    return tuple(queries)


def select_query_sets(query_filter):
    """Filter the v1.4 and v2.7 query lists, keeping their original order.

    Raises EmptyQuerySetError if the filter excludes every known query.
    """
    query_sets = [
        QuerySet(TPCDS_V1_4_LOCATION, filter_queries(TPCDS_QUERIES, query_filter)),
        QuerySet(TPCDS_V2_7_LOCATION, filter_queries(TPCDS_QUERIES_V2_7, query_filter), TPCDS_V2_7_SUFFIX),
    ]
    if not any(query_set.queries for query_set in query_sets):
        raise EmptyQuerySetError(f"Empty queries to run. Bad query name filter: {sorted(query_filter)}")
    return query_sets


def get_query_root():
    if QUERIES_DIR_ENV in os.environ:
        return os.environ[QUERIES_DIR_ENV]
    return get_abs_file_path(__file__, "./sql")


def get_query_path(query_location, name):
    return os.path.join(get_query_root(), query_location, f"{name}.sql")


def load_query_text(query_location, name):
    query_path = get_query_path(query_location, name)
    if not os.path.isfile(query_path):
        raise FileNotFoundError(
            f"Query file '{query_path}' does not exist. Run 'tpcds-fetch-queries' to download the query sets "
            f"or point the '{QUERIES_DIR_ENV}' environment variable at a directory containing them."
        )
    with open(query_path, "r") as file:
        return file.read()


def get_abs_file_path(file_path, relative_path):
    return os.path.abspath(os.path.join(os.path.dirname(file_path), relative_path))
