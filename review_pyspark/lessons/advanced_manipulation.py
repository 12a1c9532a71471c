# advanced manipulation
## select helpers, distinct values, counting, top n, grouped mutate, joins
## then the sql side: the same table queried with plain sql, and the plan spark built for a dplyr style chain
from pyspark.sql import DataFrame, SparkSession
from pyspark.sql import functions as F

from review_pyspark import datasets, session, sql, tidy
from review_pyspark.errors import UnsupportedSubsetError
from review_pyspark.lessons.connecting import copy_tracks

LONG_EARLY_TRACKS = """
SELECT title, artist_name, year, duration
FROM track_metadata
WHERE year < 1935 AND duration > 300
ORDER BY year, title
"""


def artist_columns(track_metadata_tbl: DataFrame) -> DataFrame:
    return track_metadata_tbl.select(*tidy.starts_with(track_metadata_tbl, "artist"))


def distinct_artists(track_metadata_tbl: DataFrame) -> DataFrame:
    return track_metadata_tbl.select("artist_name").distinct()


def most_prolific_artists(track_metadata_tbl: DataFrame, n: int = 10) -> DataFrame:
    return tidy.count_by(track_metadata_tbl, "artist_name").limit(n)


def hottest_tracks(track_metadata_tbl: DataFrame, n: int = 10) -> DataFrame:
    columns = track_metadata_tbl.select("title", "artist_name", "artist_hotttnesss")
    return tidy.top_n(columns, n, "artist_hotttnesss")


def duration_vs_artist_mean(track_metadata_tbl: DataFrame) -> DataFrame:
    ## how much longer than the artist's average is each track
    return (
        tidy.with_group_mean(track_metadata_tbl, "artist_name", "duration", "artist_mean_duration")
        .select("artist_name", "title", "duration", "artist_mean_duration")
        .withColumn("duration_diff", F.col("duration") - F.col("artist_mean_duration"))
    )


# joins
## left => every track, timbre columns null when missing
## semi => tracks that have a timbre row, only track columns kept
## anti => tracks without a timbre row
def join_timbre(track_metadata_tbl: DataFrame, timbre_tbl: DataFrame, how: str = "left") -> DataFrame:
    return track_metadata_tbl.join(timbre_tbl.drop("year"), on="track_id", how=how)


def run(spark: SparkSession, workdir=None) -> None:
    _, track_metadata_tbl = copy_tracks(spark)
    ## only half the tracks have timbre data, so the joins have something to show
    timbre_tbl = session.copy_to(spark, datasets.timbre(500), "timbre", overwrite=True)

    print("-------------------------------------------- select helpers --------------------")
    print("starts_with artist", tidy.starts_with(track_metadata_tbl, "artist"))
    print("ends_with id", tidy.ends_with(track_metadata_tbl, "id"))
    print("contains ti", tidy.contains(track_metadata_tbl, "ti"))
    print("matches ^[a-z]+_id$", tidy.matches(track_metadata_tbl, r"^[a-z]+_id$"))
    artist_columns(track_metadata_tbl).show(5)

    print("-------------------------------------------- distinct and count --------------------")
    print("distinct artists", distinct_artists(track_metadata_tbl).count())
    most_prolific_artists(track_metadata_tbl).show(truncate=False)

    print("-------------------------------------------- top n --------------------")
    hottest_tracks(track_metadata_tbl).show(truncate=False)

    print("-------------------------------------------- grouped mutate --------------------")
    duration_vs_artist_mean(track_metadata_tbl).show(5, truncate=False)

    print("-------------------------------------------- joins --------------------")
    for how in ("left", "left_semi", "left_anti"):
        print(how, join_timbre(track_metadata_tbl, timbre_tbl, how).count())

    print("-------------------------------------------- compute and collect --------------------")
    ## compute() keeps the result in spark memory under a name, collect() brings it to the driver
    hottest = tidy.compute(hottest_tracks(track_metadata_tbl), "hottest_tracks")
    print(session.list_tables(spark))
    local = tidy.collect(hottest)
    print(type(local))  # pandas.core.frame.DataFrame
    print(local.head(3).to_string())

    print("-------------------------------------------- sql --------------------")
    print(sql.query(spark, LONG_EARLY_TRACKS).to_string())

    print("-------------------------------------------- show query --------------------")
    print(sql.show_query(most_prolific_artists(track_metadata_tbl)))

    print("-------------------------------------------- positional subset --------------------")
    ## R: track_metadata_tbl[1:5, ] fails on a remote table, same in python
    try:
        tidy.positional_subset(track_metadata_tbl, slice(0, 5))
    except UnsupportedSubsetError as exc:
        print("error:", exc)
        print("caused by:", repr(exc.__cause__))
