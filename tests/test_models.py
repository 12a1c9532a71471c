import pytest

from review_pyspark import datasets, models, session
from review_pyspark.errors import FormulaError


@pytest.fixture(scope="module")
def mtcars_tbl(spark):
    return session.copy_to(spark, datasets.mtcars(), "mtcars_models", overwrite=True)


@pytest.fixture(scope="module")
def timbre_tbl(spark):
    return session.copy_to(spark, datasets.timbre(300), "timbre_models", overwrite=True)


def test_linear_regression_matches_ols(mtcars_tbl):
    fit = models.linear_regression(mtcars_tbl, "mpg ~ wt + cyl")
    assert fit.response == "mpg"
    assert fit.features == ["wt", "cyl"]
    assert models.coefficients(fit) == pytest.approx(
        {"(Intercept)": 39.6863, "wt": -3.1910, "cyl": -1.5078}, abs=1e-3
    )


def test_predict_and_residuals(mtcars_tbl):
    fit = models.linear_regression(mtcars_tbl, "mpg ~ wt")
    predictions = models.residuals(fit.predict(mtcars_tbl), "mpg")
    assert {"prediction", "residual"} <= set(predictions.columns)
    ## least squares residuals sum to zero
    total = sum(row.residual for row in predictions.select("residual").collect())
    assert total == pytest.approx(0.0, abs=1e-6)
    assert 0 < models.rmse(predictions, "mpg") < 4


@pytest.mark.parametrize("formula", ["mpg", "~ wt", "mpg ~", "mpg ~ wt ~ cyl"])
def test_malformed_formula(mtcars_tbl, formula):
    with pytest.raises(FormulaError):
        models.linear_regression(mtcars_tbl, formula)


def test_tree_models_learn_year_from_timbre(timbre_tbl):
    gbt = models.gradient_boosted_trees(timbre_tbl, "year", datasets.TIMBRE_COLUMNS, seed=1, max_iter=5)
    forest = models.random_forest(timbre_tbl, "year", datasets.TIMBRE_COLUMNS, seed=1, num_trees=5)
    scores = models.compare_rmse({"gbt": gbt, "forest": forest}, timbre_tbl)
    baseline = timbre_tbl.toPandas()["year"].std()
    assert set(scores) == {"gbt", "forest"}
    assert all(score < baseline for score in scores.values())


def test_feature_importances_are_sorted(timbre_tbl):
    forest = models.random_forest(timbre_tbl, "year", datasets.TIMBRE_COLUMNS, seed=1, num_trees=5)
    importances = models.feature_importances(forest)
    assert len(importances) == len(datasets.TIMBRE_COLUMNS)
    values = [value for _, value in importances]
    assert values == sorted(values, reverse=True)
    assert sum(values) == pytest.approx(1.0)
    ## year leans heavily on the first timbre mean and barely on the eighth
    by_name = dict(importances)
    assert by_name["timbre_means1"] > by_name["timbre_means8"]


def test_random_forest_classification(mtcars_tbl):
    forest = models.random_forest(mtcars_tbl, "am", ["wt", "hp", "qsec"], type="classification",
                                  seed=1, num_trees=10)
    predictions = forest.predict(mtcars_tbl)
    assert forest.kind == "classification"
    assert 0.5 <= models.accuracy(predictions) <= 1.0


def test_unknown_model_type(mtcars_tbl):
    with pytest.raises(ValueError):
        models.gradient_boosted_trees(mtcars_tbl, "mpg", ["wt"], type="clustering")


@pytest.mark.parametrize("formula", ["mpg ~ no_such_column", "mpg ~ wt +"])
def test_formula_rejected_by_spark(mtcars_tbl, formula):
    with pytest.raises(FormulaError) as info:
        models.linear_regression(mtcars_tbl, formula)
    assert info.value.__cause__ is not None


def test_gradient_boosted_trees_classification(mtcars_tbl):
    gbt = models.gradient_boosted_trees(mtcars_tbl, "am", ["wt", "hp", "qsec"], type="classification",
                                        seed=1, max_iter=5)
    predictions = gbt.predict(mtcars_tbl)
    assert gbt.kind == "classification"
    assert {row.prediction for row in predictions.select("prediction").collect()} <= {0.0, 1.0}
    assert 0.5 <= models.accuracy(predictions) <= 1.0
