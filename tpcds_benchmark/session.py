# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

from pyspark.sql import SparkSession

DEFAULT_APP_NAME = "TPCDS Query Benchmark"


def create_spark_session(app_name=DEFAULT_APP_NAME, log_level="ERROR"):
    # Master, memory and plugin settings come from PYSPARK_SUBMIT_ARGS or SPARK_CONF_DIR.
    spark = SparkSession.builder.appName(app_name).getOrCreate()
    spark.sparkContext.setLogLevel(log_level)
    return spark
