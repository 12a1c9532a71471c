from pathlib import Path

import pytest

from review_pyspark import datasets, parquet, session


@pytest.fixture
def timbre_tbl(spark):
    return session.copy_to(spark, datasets.timbre(60), "timbre_parquet_source", overwrite=True)


def test_write_list_and_read(spark, timbre_tbl, tmp_path):
    directory = tmp_path / "timbre_parquet"
    parquet.write_parquet(timbre_tbl.repartition(3), directory)

    files = parquet.list_parquet_files(directory)
    assert len(files) == 3
    assert all(Path(f).name.startswith("part-") for f in files)

    result = parquet.read_parquet(spark, directory, name="timbre_parquet")
    assert result.count() == 60
    assert result.columns == timbre_tbl.columns
    assert "timbre_parquet" in session.list_tables(spark)


def test_read_selected_columns(spark, timbre_tbl, tmp_path):
    parquet.write_parquet(timbre_tbl, tmp_path / "t")
    result = parquet.read_parquet(spark, tmp_path / "t", columns=["track_id", "year"])
    assert result.columns == ["track_id", "year"]


def test_partition_by_writes_sub_directories(spark, timbre_tbl, tmp_path):
    parquet.write_parquet(timbre_tbl, tmp_path / "by_year", partition_by="year")
    sub_directories = {p.name for p in (tmp_path / "by_year").iterdir() if p.is_dir()}
    years = {row.year for row in timbre_tbl.select("year").distinct().collect()}
    assert sub_directories == {f"year={year}" for year in years}
    assert parquet.read_parquet(spark, tmp_path / "by_year").count() == 60


def test_overwrite_mode_replaces_data(spark, timbre_tbl, tmp_path):
    parquet.write_parquet(timbre_tbl, tmp_path / "t")
    parquet.write_parquet(timbre_tbl.limit(5), tmp_path / "t")
    assert parquet.read_parquet(spark, tmp_path / "t").count() == 5


def test_read_missing_path(spark, tmp_path):
    with pytest.raises(FileNotFoundError):
        parquet.read_parquet(spark, tmp_path / "missing")


def test_read_and_list_file_uri(spark, timbre_tbl, tmp_path):
    directory = tmp_path / "timbre_uri"
    parquet.write_parquet(timbre_tbl.repartition(2), directory)
    uri = directory.as_uri()
    assert uri.startswith("file://")

    assert parquet.list_parquet_files(uri) == parquet.list_parquet_files(directory)
    assert parquet.read_parquet(spark, uri).count() == 60


def test_list_through_spark(spark, timbre_tbl, tmp_path):
    directory = tmp_path / "timbre_listed"
    parquet.write_parquet(timbre_tbl.repartition(2), directory)
    files = parquet.list_parquet_files(directory, spark=spark)
    assert len(files) == 2
    assert all(f.endswith(".parquet") for f in files)


def test_read_missing_file_uri(spark, tmp_path):
    with pytest.raises(FileNotFoundError) as info:
        parquet.read_parquet(spark, (tmp_path / "missing").as_uri())
    assert info.value.__cause__ is not None
