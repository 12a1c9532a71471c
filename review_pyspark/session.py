# connecting to spark
## in sparklyr everything starts with spark_connect(master = "local")
## in python the entry point is the SparkSession, it wraps the spark context, sql context and so on (since spark 2.0)
## the master tells the driver where to get executors from
import logging
import sys

import pandas as pd
from pyspark.sql import DataFrame, SparkSession

from review_pyspark.config import SessionConfig
from review_pyspark.errors import TableExistsError, TableNotFoundError

logger = logging.getLogger(__name__)


def connect(config: SessionConfig = None) -> SparkSession:
    config = config or SessionConfig.from_env()
    builder = SparkSession.builder.master(config.master).appName(config.app_name)
    for key, value in config.spark_options().items():
        builder = builder.config(key, value)
    spark = builder.getOrCreate()
    spark.sparkContext.setLogLevel(config.log_level)
    logger.info("connected to %s (spark %s, application %s)",
                config.master, spark.version, spark.sparkContext.applicationId)
    return spark


def disconnect(spark: SparkSession) -> None:
    logger.info("stopping application %s", spark.sparkContext.applicationId)
    spark.stop()


def spark_version(spark: SparkSession) -> str:
    return spark.version


def copy_to(spark: SparkSession, frame: pd.DataFrame, name: str, overwrite: bool = False) -> DataFrame:
    """Copy a local pandas DataFrame into spark and register it as a temporary view.

    The returned DataFrame is only a handle: the rows live in spark, the python
    object just knows how to reach them.
    """
    if not overwrite and spark.catalog.tableExists(name):
        raise TableExistsError(f"table {name!r} already exists, pass overwrite=True to replace it")
    sdf = spark.createDataFrame(frame)
    sdf.createOrReplaceTempView(name)
    logger.debug("copied %d rows into %s", len(frame), name)
    return spark.table(name)


def list_tables(spark: SparkSession) -> list:
    return sorted(table.name for table in spark.catalog.listTables())


def tbl(spark: SparkSession, name: str) -> DataFrame:
    if not spark.catalog.tableExists(name):
        raise TableNotFoundError(f"no table or view named {name!r}, registered: {list_tables(spark)}")
    return spark.table(name)


def object_sizes(local: pd.DataFrame, remote: DataFrame) -> dict:
    ## the local frame holds every value, the remote one is a reference to a JVM object
    return {
        "local_bytes": int(local.memory_usage(deep=True).sum()),
        "remote_bytes": sys.getsizeof(remote),
    }
