# feature transformers and the sdf_ functions
## ft_binarizer, ft_bucketizer, ft_quantile_discretizer, ft_tokenizer, ft_regex_tokenizer
## sdf_sort, sdf_schema, sdf_sample, sdf_partition, sdf_register
## these run in spark through the DataFrame / spark.ml api, there is no sql translation in between
from pyspark.sql import DataFrame, SparkSession
from pyspark.sql import functions as F

from review_pyspark import features
from review_pyspark.lessons.connecting import copy_tracks

DECADE_SPLITS = list(range(1920, 2030, 10))


def hotttnesss_flags(track_metadata_tbl: DataFrame, threshold: float = 0.5) -> DataFrame:
    return features.binarize(
        track_metadata_tbl.select("artist_name", "artist_hotttnesss"),
        "artist_hotttnesss", "is_hottt", threshold,
    )


def decades(track_metadata_tbl: DataFrame) -> DataFrame:
    bucketed = features.bucketize(track_metadata_tbl.select("title", "year"), "year", "decade_index", DECADE_SPLITS)
    ## bucket i covers [splits[i], splits[i + 1])
    return bucketed.withColumn("decade", (F.lit(DECADE_SPLITS[0]) + F.col("decade_index") * 10).cast("int"))


def duration_quintiles(track_metadata_tbl: DataFrame) -> DataFrame:
    return features.quantile_discretize(
        track_metadata_tbl.select("title", "duration"), "duration", "duration_quintile", 5
    )


def title_words(track_metadata_tbl: DataFrame) -> DataFrame:
    return features.tokenize(track_metadata_tbl.select("title"), "title", "words")


def run(spark: SparkSession, workdir=None) -> None:
    _, track_metadata_tbl = copy_tracks(spark)

    print("-------------------------------------------- binarizer --------------------")
    flags = hotttnesss_flags(track_metadata_tbl)
    flags.show(5, truncate=False)
    flags.groupBy("is_hottt").count().show()

    print("-------------------------------------------- bucketizer --------------------")
    decades(track_metadata_tbl).groupBy("decade").count().orderBy("decade").show()

    print("-------------------------------------------- quantile discretizer --------------------")
    ## roughly the same number of tracks in each bucket
    duration_quintiles(track_metadata_tbl).groupBy("duration_quintile").count().orderBy("duration_quintile").show()

    print("-------------------------------------------- tokenizers --------------------")
    title_words(track_metadata_tbl).show(5, truncate=False)
    features.word_counts(track_metadata_tbl, "title").show(10)

    print("-------------------------------------------- sort, schema, sample --------------------")
    features.sort_by(track_metadata_tbl.select("title", "year"), ["year", "title"]).show(5, truncate=False)
    for name, simple_type in features.schema_of(track_metadata_tbl).items():
        print(f"{name:<20}{simple_type}")
    print("sampled rows", features.sample(track_metadata_tbl, 0.1, seed=20000229).count())

    print("-------------------------------------------- partition --------------------")
    parts = features.partition(track_metadata_tbl, training=0.7, testing=0.3, seed=1999)
    for name, part in parts.items():
        print(name, part.count())
    features.register(parts["training"], "track_metadata_training")
