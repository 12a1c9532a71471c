# SparkSQL
## any registered table or temporary view can be queried with plain sql
## sparklyr goes through DBI::dbGetQuery(), which returns a local data frame
## spark.sql() returns a lazy DataFrame, toPandas() brings it local
import contextlib
import io

import pandas as pd
from pyspark.sql import DataFrame, SparkSession

EXPLAIN_MODES = ("simple", "extended", "codegen", "cost", "formatted")


def sql(spark: SparkSession, query: str) -> DataFrame:
    return spark.sql(query)


def query(spark: SparkSession, query: str) -> pd.DataFrame:
    return spark.sql(query).toPandas()


def show_query(sdf: DataFrame, mode: str = "formatted") -> str:
    """Return the plan spark built for ``sdf`` (dplyr::show_query / explain).

    Unresolved logical plan => analyzed => optimized => physical plan,
    ``extended`` prints all of them, ``formatted`` only the physical one.
    """
    if mode not in EXPLAIN_MODES:
        raise ValueError(f"unknown explain mode {mode!r}, expected one of {EXPLAIN_MODES}")
    buffer = io.StringIO()
    ## explain() prints instead of returning
    with contextlib.redirect_stdout(buffer):
        sdf.explain(mode=mode)
    return buffer.getvalue()
