# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
from pathlib import Path

import requests

from .arguments import parse_query_filter
from .queries import (
    TPCDS_QUERIES,
    TPCDS_QUERIES_V2_7,
    TPCDS_V1_4_LOCATION,
    TPCDS_V2_7_LOCATION,
    filter_queries,
    get_query_root,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/apache/spark/master/sql/core/src/test/resources"
REQUEST_TIMEOUT_SECS = 30


def fetch_query_set(location, queries, queries_dir, base_url=DEFAULT_BASE_URL, overwrite=False):
    """Download `<base_url>/<location>/<query>.sql` for each query into `<queries_dir>/<location>`.

    Returns the paths of the files that were written.
    """
    out_dir = Path(queries_dir) / location
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for query in queries:
        query_path = out_dir / f"{query}.sql"
        if query_path.exists() and not overwrite:
            logger.info("Skipping existing %s (use --overwrite to refresh)", query_path)
            continue
        url = f"{base_url}/{location}/{query}.sql"
        response = requests.get(url, timeout=REQUEST_TIMEOUT_SECS)
        response.raise_for_status()
        query_path.write_text(response.text)
        logger.info("Wrote %s", query_path)
        written.append(query_path)
    return written


def fetch_all(queries_dir, base_url=DEFAULT_BASE_URL, overwrite=False, query_filter=frozenset()):
    written = []
    for location, queries in [(TPCDS_V1_4_LOCATION, TPCDS_QUERIES), (TPCDS_V2_7_LOCATION, TPCDS_QUERIES_V2_7)]:
        written += fetch_query_set(location, filter_queries(queries, query_filter), queries_dir, base_url, overwrite)
    return written


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Download the TPC-DS v1.4 and v2.7 query files used by the TPC-DS query benchmark.")
    parser.add_argument("--queries-dir", type=str, default=get_query_root(),
                        help="The directory that will contain the 'tpcds' and 'tpcds-v2.7.0' query directories. "
                             "Defaults to the TPCDS_QUERIES_DIR environment variable or the bundled sql "
                             "directory.")
    parser.add_argument("--base-url", type=str, default=DEFAULT_BASE_URL,
                        help="The URL that the query set directories are downloaded from.")
    parser.add_argument("--overwrite", action="store_true", default=False,
                        help="Overwrite existing query files.")
    parser.add_argument("--query-filter", type=str, default="",
                        help="Queries to download, e.g., q3,q5,q13. All queries are downloaded by default.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    written = fetch_all(args.queries_dir, args.base_url, args.overwrite, parse_query_filter(args.query_filter))
    print(f"Downloaded {len(written)} query file(s) to {args.queries_dir}")


if __name__ == "__main__":
    main()
