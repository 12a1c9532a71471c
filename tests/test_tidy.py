import pandas as pd
import pytest

from review_pyspark import tidy
from review_pyspark.errors import UnsupportedSubsetError


@pytest.fixture
def seasons(spark):
    return spark.createDataFrame(
        [
            ("a", 2001, 10), ("a", 2002, 10), ("a", 2003, 5),
            ("b", 2001, 0), ("b", 2002, 0),
            ("c", 2001, 3), ("c", 2002, 2), ("c", 2003, 1),
        ],
        ["playerID", "yearID", "H"],
    )


def test_select_helpers(track_metadata_tbl):
    assert tidy.starts_with(track_metadata_tbl, "artist") == [
        "artist_id", "artist_mbid", "artist_name", "artist_familiarity", "artist_hotttnesss",
    ]
    assert tidy.ends_with(track_metadata_tbl, "_id") == ["track_id", "song_id", "artist_id"]
    assert tidy.contains(track_metadata_tbl, "hot") == ["artist_hotttnesss"]
    assert tidy.contains(track_metadata_tbl, "ation") == ["duration"]
    assert tidy.matches(track_metadata_tbl, r"^[a-z]+_id$") == ["track_id", "song_id", "artist_id"]


def test_count_by_sorts_descending(spark):
    sdf = spark.createDataFrame([("x",), ("y",), ("y",), ("z",), ("y",), ("z",)], ["letter"])
    rows = [(row.letter, row["count"]) for row in tidy.count_by(sdf, "letter").collect()]
    assert rows == [("y", 3), ("z", 2), ("x", 1)]


def test_top_n(seasons):
    rows = tidy.top_n(seasons, 2, "H").collect()
    assert [row.H for row in rows] == [10, 10]


def test_top_n_per_group_keeps_ties_and_drops_zero_hits(seasons):
    result = tidy.top_n_per_group(seasons, "playerID", "H", 2)
    rows = sorted((row.playerID, row.yearID) for row in result.collect())
    assert rows == [("a", 2001), ("a", 2002), ("c", 2001), ("c", 2002)]
    assert result.columns == seasons.columns


def test_with_group_mean_keeps_every_row(seasons):
    result = tidy.with_group_mean(seasons, "playerID", "H", "mean_H")
    assert result.count() == seasons.count()
    means = {row.playerID: row.mean_H for row in result.collect()}
    assert means == pytest.approx({"a": 25 / 3, "b": 0.0, "c": 2.0})


def test_compute_registers_and_caches(spark, seasons):
    cached = tidy.compute(seasons.where("H > 0"), "hits_only")
    assert cached.is_cached
    assert spark.table("hits_only").count() == 6


def test_collect_returns_pandas(seasons):
    local = tidy.collect(seasons)
    assert isinstance(local, pd.DataFrame)
    assert len(local) == 8


def test_positional_subset_is_not_supported(track_metadata_tbl):
    with pytest.raises(UnsupportedSubsetError) as info:
        tidy.positional_subset(track_metadata_tbl, slice(0, 5))
    assert isinstance(info.value.__cause__, TypeError)


@pytest.mark.parametrize("rows", [0, [0, 1]])
def test_positional_subset_rejects_row_numbers(track_metadata_tbl, rows):
    ## spark reads an int as a column position, which is still not a row subset
    with pytest.raises(UnsupportedSubsetError):
        tidy.positional_subset(track_metadata_tbl, rows)
