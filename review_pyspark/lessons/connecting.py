# connecting to spark and copying data
## sparklyr: spark_connect(master = "local"), copy_to(sc, df), src_tbls(sc), tbl(sc, "name")
## pyspark: SparkSession.builder...getOrCreate(), spark.createDataFrame(df), spark.catalog.listTables(), spark.table("name")

# spark runtime in a nutshell
## driver => runs our python code, plans the jobs
## executors => run the tasks, hold the cached data
## cluster manager => hands executors to the driver (local, standalone, yarn, kubernetes)
## with master "local[*]" the driver and the executors all live in this one process
from pyspark.sql import DataFrame, SparkSession
from pyspark.sql.functions import col, sum

from review_pyspark import datasets, session


def first_calculation(spark: SparkSession) -> DataFrame:
    # this will create a dataframe with column id and values from 0 to 999
    df = spark.range(0, 1_000)
    df = df.withColumn("square", col("id") * col("id"))
    ## beware groupBy triggers a shuffle, rows with the same key must end up on the same partition
    grouped_data = df.groupBy((col("id") % 10).alias("id_modulo_10"))
    return grouped_data.agg(sum("square").alias("sum_square")).orderBy("id_modulo_10")


"""
+------------+----------+
|id_modulo_10|sum_square|
+------------+----------+
|           0|  32835000|
|           1|  32934100|
|           2|  33033400|
"""


def copy_tracks(spark: SparkSession, n: int = 1000):
    track_metadata = datasets.track_metadata(n)
    track_metadata_tbl = session.copy_to(spark, track_metadata, "track_metadata", overwrite=True)
    return track_metadata, track_metadata_tbl


def run(spark: SparkSession, workdir=None) -> None:
    print("-------------------------------------------- spark version --------------------")
    print(session.spark_version(spark))
    print("application id", spark.sparkContext.applicationId)

    track_metadata, track_metadata_tbl = copy_tracks(spark)
    print("-------------------------------------------- tables in spark --------------------")
    print(session.list_tables(spark))

    ## dim() in R, here count() is an action: it runs a job
    print("rows", track_metadata_tbl.count(), "columns", len(track_metadata_tbl.columns))
    track_metadata_tbl.printSchema()

    print("-------------------------------------------- local vs remote size --------------------")
    ## the pandas frame holds all the values, the spark DataFrame is only a reference to them
    print(session.object_sizes(track_metadata, track_metadata_tbl))

    print("-------------------------------------------- first distributed calculation --------------------")
    ## lazy evaluation: nothing has run until show()
    ## stage 0 : range + withColumn (narrow, pipelined together)
    ## stage 1 : groupBy + agg after the shuffle (wide)
    first_calculation(spark).show()
