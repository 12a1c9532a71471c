# parquet files
## columnar, compressed, self describing (the schema travels with the data)
## spark writes a directory: one part-*.parquet file per partition plus a _SUCCESS marker
## reading only the needed columns means only those column chunks are read from disk
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

from pyspark.errors import AnalysisException
from pyspark.sql import DataFrame, SparkSession

logger = logging.getLogger(__name__)


def write_parquet(sdf: DataFrame, path, mode: str = "overwrite", partition_by=None) -> str:
    writer = sdf.write.mode(mode)
    if partition_by:
        partition_by = [partition_by] if isinstance(partition_by, str) else list(partition_by)
        ## one sub directory per value, e.g. year=1990/
        writer = writer.partitionBy(*partition_by)
    writer.parquet(str(path))
    logger.info("wrote parquet to %s", path)
    return str(path)


def _local_path(path) -> Path:
    text = str(path)
    if text.startswith("file:"):
        return Path(unquote(urlparse(text).path))
    return Path(text)


def list_parquet_files(path, spark: SparkSession = None) -> list:
    """Data files under ``path``.

    Without ``spark`` only local paths and ``file://`` URIs can be listed; with
    it the files are the ones spark's reader resolves, on any filesystem.
    """
    if spark is not None:
        return sorted(read_parquet(spark, path).inputFiles())
    return sorted(str(p) for p in _local_path(path).rglob("*.parquet"))


def read_parquet(spark: SparkSession, path, name: str = None, columns=None) -> DataFrame:
    """spark_read_parquet(): read a file or a directory of parquet files.

    ``path`` is anything spark accepts: a local path or a ``file://``,
    ``hdfs://``, ``s3a://`` URI. With ``name`` the result is also registered
    as a temporary view.
    """
    try:
        sdf = spark.read.parquet(str(path))
    except AnalysisException as exc:
        if "Path does not exist" not in str(exc):
            raise
        raise FileNotFoundError(f"no parquet file or directory at {path}") from exc
    if columns:
        sdf = sdf.select(*columns)
    if name:
        sdf.createOrReplaceTempView(name)
    return sdf
