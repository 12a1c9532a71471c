# manipulating data with the five main verbs
## dplyr            pyspark DataFrame
## select()    =>   select()
## filter()    =>   filter() / where()
## arrange()   =>   orderBy() / sort()
## mutate()    =>   withColumn()
## summarise() =>   agg()
## all of them are transformations: they build a new DataFrame (DataFrames are immutable) and run nothing
## the job only starts with an action: show(), count(), collect(), toPandas(), write...
from pyspark.sql import DataFrame, SparkSession
from pyspark.sql import functions as F

from review_pyspark.lessons.connecting import copy_tracks


def select_columns(track_metadata_tbl: DataFrame) -> DataFrame:
    return track_metadata_tbl.select("artist_name", "release", "title", "year")


def tracks_from_the_sixties(track_metadata_tbl: DataFrame) -> DataFrame:
    ## & | ~ instead of and or not, and parentheses around each condition
    return select_columns(track_metadata_tbl).filter((F.col("year") >= 1960) & (F.col("year") < 1970))


def arrange_by_artist_and_year(track_metadata_tbl: DataFrame) -> DataFrame:
    return select_columns(track_metadata_tbl).orderBy("artist_name", F.desc("year"), "title")


def with_duration_minutes(track_metadata_tbl: DataFrame) -> DataFrame:
    return (
        track_metadata_tbl
        .select("title", "duration")
        .withColumn("duration_minutes", F.col("duration") / 60)
    )


def mean_duration_minutes(track_metadata_tbl: DataFrame) -> DataFrame:
    return with_duration_minutes(track_metadata_tbl).agg(
        F.avg("duration_minutes").alias("mean_duration_minutes")
    )


def run(spark: SparkSession, workdir=None) -> None:
    _, track_metadata_tbl = copy_tracks(spark)

    print("-------------------------------------------- select --------------------")
    ## default of show is 20 rows
    select_columns(track_metadata_tbl).show(5, truncate=False)

    print("-------------------------------------------- filter --------------------")
    sixties = tracks_from_the_sixties(track_metadata_tbl)
    sixties.show(5, truncate=False)
    print("tracks from the sixties", sixties.count())

    print("-------------------------------------------- arrange --------------------")
    arrange_by_artist_and_year(track_metadata_tbl).show(5, truncate=False)

    print("-------------------------------------------- mutate --------------------")
    with_duration_minutes(track_metadata_tbl).show(5, truncate=False)

    print("-------------------------------------------- summarise --------------------")
    mean_duration_minutes(track_metadata_tbl).show()
