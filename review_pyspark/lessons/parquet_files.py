# reading parquet files
## sparklyr: spark_read_parquet(sc, "timbre", "path/to/timbre_parquet")
## in the course the timbre features came as a directory of parquet files, one per chunk
## here we write that directory ourselves first, then read it back
import tempfile
from pathlib import Path

from pyspark.sql import SparkSession

from review_pyspark import datasets, parquet, session


def write_timbre(spark: SparkSession, directory, n: int = 1000, files: int = 4) -> str:
    timbre_tbl = session.copy_to(spark, datasets.timbre(n), "timbre", overwrite=True)
    ## one part file per partition
    return parquet.write_parquet(timbre_tbl.repartition(files), directory)


def run(spark: SparkSession, workdir=None) -> None:
    if workdir is None:
        with tempfile.TemporaryDirectory(prefix="review-pyspark-") as tmp:
            return run(spark, tmp)

    directory = Path(workdir) / "timbre_parquet"
    write_timbre(spark, directory)

    print("-------------------------------------------- parquet files --------------------")
    for path in parquet.list_parquet_files(directory):
        print(Path(path).name)

    print("-------------------------------------------- read back --------------------")
    ## no inferSchema needed, parquet stores the schema
    timbre_parquet = parquet.read_parquet(spark, directory, name="timbre_parquet")
    timbre_parquet.printSchema()
    print("rows", timbre_parquet.count())
    print(session.list_tables(spark))

    print("-------------------------------------------- column pruning --------------------")
    ## only the selected column chunks are read, look for ReadSchema in the plan
    pruned = parquet.read_parquet(spark, directory, columns=["track_id", "year"])
    pruned.explain()
