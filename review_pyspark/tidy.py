# dplyr style helpers
## sparklyr lets dplyr verbs run against spark, they are translated to spark sql
## the DataFrame API already has most verbs: select(), filter(), orderBy(), withColumn(), groupBy().agg()
## what follows are the handful of dplyr idioms without a one-to-one method
import logging
import re

import pandas as pd
from pyspark.sql import DataFrame, Window
from pyspark.sql import functions as F

from review_pyspark.errors import UnsupportedSubsetError

logger = logging.getLogger(__name__)


# select helpers
## starts_with("artist") etc. return column names, pass them to select(*names)
def starts_with(sdf: DataFrame, prefix: str) -> list:
    return [c for c in sdf.columns if c.startswith(prefix)]


def ends_with(sdf: DataFrame, suffix: str) -> list:
    return [c for c in sdf.columns if c.endswith(suffix)]


def contains(sdf: DataFrame, text: str) -> list:
    return [c for c in sdf.columns if text in c]


def matches(sdf: DataFrame, pattern: str) -> list:
    regex = re.compile(pattern)
    return [c for c in sdf.columns if regex.search(c)]


def count_by(sdf: DataFrame, *cols) -> DataFrame:
    """dplyr::count(..., sort = TRUE)"""
    return sdf.groupBy(*cols).count().orderBy(F.desc("count"), *cols)


def top_n(sdf: DataFrame, n: int, by: str) -> DataFrame:
    return sdf.orderBy(F.desc(by)).limit(n)


def top_n_per_group(sdf: DataFrame, group, by: str, n: int) -> DataFrame:
    """Rows ranked in the top ``n`` of their group by ``by``, ties kept.

    The batting example from the sparklyr readme:
    ``group_by(playerID) %>% filter(min_rank(desc(H)) <= 2 & H > 0)``
    """
    group = [group] if isinstance(group, str) else list(group)
    window = Window.partitionBy(*group).orderBy(F.desc(by))
    return (
        sdf.withColumn("_rank", F.rank().over(window))
        .where((F.col("_rank") <= n) & (F.col(by) > 0))
        .drop("_rank")
    )


def with_group_mean(sdf: DataFrame, group, column: str, output: str) -> DataFrame:
    ## grouped mutate: keeps every row, unlike groupBy().agg()
    group = [group] if isinstance(group, str) else list(group)
    return sdf.withColumn(output, F.avg(column).over(Window.partitionBy(*group)))


def compute(sdf: DataFrame, name: str) -> DataFrame:
    """Cache a result in spark memory under ``name`` (dplyr::compute)."""
    cached = sdf.cache()
    cached.createOrReplaceTempView(name)
    ## cache() is lazy, an action is needed to fill it
    rows = cached.count()
    logger.debug("computed %s with %d rows", name, rows)
    return cached


def collect(sdf: DataFrame) -> pd.DataFrame:
    ## moves every row to the driver, only do it on small results
    return sdf.toPandas()


def positional_subset(sdf: DataFrame, rows) -> DataFrame:
    """R's ``tbl[1:5, ]`` or pandas' ``df[0:5]`` on a spark handle.

    A spark DataFrame has no row order and no row index, so this never works.
    A slice makes spark raise a TypeError; an int or a list of ints is read by
    spark as a column position, which is not a row subset either.
    """
    message = "spark DataFrames cannot be subset by row position, use filter(), limit() or collect() first"
    try:
        picked = sdf[rows]
    except (TypeError, IndexError) as exc:
        raise UnsupportedSubsetError(message) from exc
    raise UnsupportedSubsetError(f"{message} ({rows!r} would pick {picked!r}, not rows)")
