# flights and batting
## the two dplyr examples from the sparklyr readme, plus a timing comparison
## flights: average delay per plane, only planes with enough flights
## batting: the two best seasons (by hits) of every player, a window function under the hood
from pyspark.sql import DataFrame, SparkSession
from pyspark.sql import functions as F

from review_pyspark import benchmark, datasets, session, tidy


def delay_by_tailnum(flights_tbl: DataFrame, min_flights: int = 20) -> DataFrame:
    return (
        flights_tbl.groupBy("tailnum")
        .agg(
            F.count("*").alias("count"),
            F.avg("distance").alias("dist"),
            F.avg("arr_delay").alias("delay"),
        )
        .where((F.col("count") > min_flights) & (F.col("dist") < 2000) & F.col("delay").isNotNull())
        .orderBy("tailnum")
    )


def top_hitters(batting_tbl: DataFrame, n: int = 2) -> DataFrame:
    seasons = batting_tbl.select("playerID", "yearID", "teamID", "G", "AB", "H")
    return tidy.top_n_per_group(seasons, "playerID", "H", n).orderBy("playerID", "yearID", "teamID")


def run(spark: SparkSession, workdir=None) -> None:
    flights = datasets.flights()
    flights_tbl = session.copy_to(spark, flights, "flights", overwrite=True)
    batting_tbl = session.copy_to(spark, datasets.batting(), "batting", overwrite=True)

    print("-------------------------------------------- delay by tail number --------------------")
    delay_by_tailnum(flights_tbl).show(10)

    print("-------------------------------------------- top hitters --------------------")
    top_hitters(batting_tbl).show(10)

    print("-------------------------------------------- pandas vs spark --------------------")
    ## same question, mean departure delay per carrier, three engines
    timings = benchmark.compare_group_mean(flights, flights_tbl, "carrier", "dep_delay", repeat=3)
    print(benchmark.format_timings(timings))
    ## on a couple of thousand rows pandas wins by orders of magnitude
    ## every spark job pays for planning, scheduling tasks and the shuffle
