# in-memory versus spark timing
## pandas only works on a single machine, everything must fit in memory of the driver
## spark scales across machines but every job pays for planning, scheduling and shuffling
## on small data pandas wins easily, the crossover only comes when data no longer fits in memory
## pandas api on spark sits in between: pandas syntax, spark execution
import logging
import time
from dataclasses import dataclass

import pandas as pd
from pyspark.sql import DataFrame
from pyspark.sql import functions as F
from tabulate import tabulate

logger = logging.getLogger(__name__)


@dataclass
class Timing:
    label: str
    seconds: float
    rows: int = None


def _row_count(result):
    if isinstance(result, (pd.DataFrame, pd.Series, list, tuple)):
        return len(result)
    return None


def time_call(label: str, func, repeat: int = 1) -> Timing:
    """Best wall time of ``repeat`` calls of ``func()``.

    Spark is lazy, so ``func`` has to end with an action (collect, count,
    toPandas...) or only the planning gets measured.
    """
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    best, result = None, None
    for _ in range(repeat):
        start = time.perf_counter()
        result = func()
        elapsed = time.perf_counter() - start
        best = elapsed if best is None else min(best, elapsed)
    timing = Timing(label, best, _row_count(result))
    logger.debug("%s took %.4fs", label, best)
    return timing


def compare_group_mean(frame: pd.DataFrame, sdf: DataFrame, group: str, column: str, repeat: int = 1) -> list:
    """Time the same grouped mean with pandas, pandas api on spark and spark."""
    import pyspark.pandas as ps

    psdf = ps.from_pandas(frame[[group, column]])
    return [
        time_call("pandas", lambda: frame.groupby(group)[column].mean().reset_index(), repeat),
        time_call("pandas api on spark", lambda: psdf.groupby(group)[column].mean().to_pandas(), repeat),
        time_call("spark DataFrame",
                  lambda: sdf.groupBy(group).agg(F.avg(column).alias(column)).toPandas(), repeat),
    ]


def format_timings(timings) -> str:
    rows = [(t.label, f"{t.seconds:.4f}", "" if t.rows is None else t.rows) for t in timings]
    return tabulate(rows, headers=["operation", "seconds", "rows"], tablefmt="simple")
