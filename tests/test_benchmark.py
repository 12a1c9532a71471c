import pytest

from review_pyspark import benchmark, datasets, session
from review_pyspark.benchmark import Timing


def test_time_call_counts_rows():
    timing = benchmark.time_call("list", lambda: [1, 2, 3], repeat=2)
    assert timing.label == "list"
    assert timing.rows == 3
    assert timing.seconds >= 0


def test_time_call_without_rows():
    assert benchmark.time_call("number", lambda: 42).rows is None


def test_time_call_needs_a_run():
    with pytest.raises(ValueError):
        benchmark.time_call("never", lambda: None, repeat=0)


def test_format_timings():
    table = benchmark.format_timings([Timing("pandas", 0.001, 8), Timing("spark", 1.25)])
    lines = table.splitlines()
    assert lines[0].split() == ["operation", "seconds", "rows"]
    assert "0.0010" in table
    assert "1.2500" in table


def test_compare_group_mean(spark):
    flights = datasets.flights(200)
    flights_tbl = session.copy_to(spark, flights, "flights", overwrite=True)
    timings = benchmark.compare_group_mean(flights, flights_tbl, "carrier", "dep_delay")
    assert [t.label for t in timings] == ["pandas", "pandas api on spark", "spark DataFrame"]
    assert {t.rows for t in timings} == {flights["carrier"].nunique()}
