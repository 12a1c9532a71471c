# lessons, in the order of the notes
## each lesson module has a run(spark, workdir) printing its worked examples
from review_pyspark.lessons import (
    advanced_manipulation,
    connecting,
    feature_transformers,
    flights_and_batting,
    machine_learning,
    manipulating_data,
    parquet_files,
)

LESSONS = {
    "connecting": connecting,
    "manipulating_data": manipulating_data,
    "advanced_manipulation": advanced_manipulation,
    "feature_transformers": feature_transformers,
    "parquet_files": parquet_files,
    "machine_learning": machine_learning,
    "flights_and_batting": flights_and_batting,
}


def summary(name):
    """First comment line of a lesson module."""
    path = LESSONS[name].__file__
    with open(path, encoding="utf-8") as handle:
        return handle.readline().lstrip("# ").strip()
