# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

"""
Benchmark to measure TPCDS query performance.

To run this:
    tpcds-query-benchmark --tpcds-data-location <TPCDS data location> --out-data-location <output dir>

Spark settings such as the master URL are passed through PYSPARK_SUBMIT_ARGS or SPARK_CONF_DIR.
"""

import logging
import os
import sys

from .arguments import USAGE, ArgumentError, parse_args
from .queries import select_query_sets
from .runner import run_tpcds_queries
from .session import create_spark_session
from .tables import setup_tables

LOG_LEVEL_ENV = "TPCDS_BENCHMARK_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level=None):
    level = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
    valid_level = isinstance(logging.getLevelName(level), int)
    logging.basicConfig(level=level if valid_level else logging.INFO, format=LOG_FORMAT)
    if not valid_level:
        logger.warning("Unknown log level '%s' in %s, using INFO", level, LOG_LEVEL_ENV)


def run(spark_session, arguments):
    # If `--query-filter` is defined, only the queries that it selects are run.
    query_sets = select_query_sets(arguments.query_filter)

    table_sizes = setup_tables(spark_session, arguments.tpcds_data_location)

    for query_set in query_sets:
        logger.info("Running %d queries from '%s'", len(query_set.queries), query_set.location)
        run_tpcds_queries(spark_session, query_set, table_sizes, arguments.out_data_location)


def main(argv=None):
    configure_logging()
    try:
        arguments = parse_args(sys.argv[1:] if argv is None else argv)
    except ArgumentError as e:
        print(e, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return e.exit_code

    spark_session = create_spark_session()
    try:
        run(spark_session, arguments)
    finally:
        spark_session.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
