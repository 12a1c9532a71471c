import pytest

from review_pyspark import datasets, session
from review_pyspark.config import SessionConfig


@pytest.fixture(scope="session")
def spark():
    config = SessionConfig(
        master="local[2]",
        app_name="review-pyspark-tests",
        shuffle_partitions=2,
        options={"spark.ui.enabled": "false"},
    )
    spark = session.connect(config)
    yield spark
    session.disconnect(spark)


@pytest.fixture(scope="session")
def track_metadata():
    return datasets.track_metadata(200)


@pytest.fixture
def track_metadata_tbl(spark, track_metadata):
    return session.copy_to(spark, track_metadata, "track_metadata", overwrite=True)
