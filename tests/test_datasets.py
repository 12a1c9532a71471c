import pandas as pd

from review_pyspark import datasets


def test_track_metadata_is_deterministic():
    pd.testing.assert_frame_equal(datasets.track_metadata(50), datasets.track_metadata(50))


def test_track_metadata_columns():
    frame = datasets.track_metadata(100)
    assert list(frame.columns) == [
        "track_id", "title", "song_id", "release", "artist_id", "artist_mbid",
        "artist_name", "duration", "artist_familiarity", "artist_hotttnesss", "year",
    ]
    assert len(frame) == 100
    assert frame["track_id"].is_unique
    assert frame["artist_hotttnesss"].between(0, 1).all()
    assert frame["year"].between(1927, 2010).all()
    assert (frame["duration"] > 0).all()


def test_timbre_shares_track_ids():
    tracks = datasets.track_metadata(40)
    timbre = datasets.timbre(20)
    assert list(timbre.columns) == ["track_id", "year"] + datasets.TIMBRE_COLUMNS
    assert set(timbre["track_id"]) <= set(tracks["track_id"])


def test_flights():
    frame = datasets.flights(300)
    assert len(frame) == 300
    assert set(frame["origin"]) <= set(datasets.AIRPORTS)
    assert frame["month"].between(1, 12).all()


def test_batting_hits_never_exceed_at_bats():
    frame = datasets.batting(30)
    assert frame["playerID"].nunique() == 30
    assert (frame["H"] <= frame["AB"]).all()
    assert (frame["R"] <= frame["H"]).all()


def test_mtcars():
    frame = datasets.mtcars()
    assert frame.shape == (32, 12)
    assert frame.loc[frame["model"] == "Mazda RX4", "mpg"].item() == 21.0
