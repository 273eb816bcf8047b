# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

import logging

logger = logging.getLogger(__name__)

TPCDS_TABLES = (
    "catalog_page", "catalog_returns", "customer", "customer_address",
    "customer_demographics", "date_dim", "household_demographics", "inventory", "item",
    "promotion", "store", "store_returns", "catalog_sales", "web_sales", "store_sales",
    "web_returns", "web_site", "reason", "call_center", "warehouse", "ship_mode", "income_band",
    "time_dim", "web_page",
)


def setup_tables(spark_session, data_location, tables=TPCDS_TABLES):
    """Register each table's Parquet directory as a temporary view and return its row count by name."""
    table_sizes = {}
    for table in tables:
        table_data_dir = f"{data_location}/{table}"
        df = spark_session.read.parquet(table_data_dir)
        df.createOrReplaceTempView(table)
        table_sizes[table] = spark_session.table(table).count()
        logger.info("Registered table '%s' from '%s' (%d rows)", table, table_data_dir, table_sizes[table])
    return table_sizes
