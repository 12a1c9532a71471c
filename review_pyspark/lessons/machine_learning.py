# machine learning
## two examples
## 1. the sparklyr readme: linear regression of mpg on wt and cyl for mtcars
## 2. the course: predict a track's year from its timbre, gradient boosted trees vs random forest
## in both cases: partition into training/testing, fit on training, predict and evaluate on testing
import tempfile
from pathlib import Path

from pyspark.sql import DataFrame, SparkSession
from pyspark.sql import functions as F

from review_pyspark import datasets, features, models, plots, session


def mtcars_partitions(spark: SparkSession, seed: int = 1099) -> dict:
    mtcars_tbl = session.copy_to(spark, datasets.mtcars(), "mtcars", overwrite=True)
    powerful = mtcars_tbl.filter(F.col("hp") >= 100).withColumn("cyl8", F.col("cyl") == 8)
    return features.partition(powerful, training=0.5, test=0.5, seed=seed)


def mtcars_regression(training: DataFrame) -> models.FittedModel:
    return models.linear_regression(training, "mpg ~ wt + cyl")


def timbre_models(training: DataFrame, seed: int = 1) -> dict:
    return {
        "gradient boosted trees": models.gradient_boosted_trees(
            training, "year", datasets.TIMBRE_COLUMNS, seed=seed),
        "random forest": models.random_forest(
            training, "year", datasets.TIMBRE_COLUMNS, seed=seed),
    }


def run(spark: SparkSession, workdir=None) -> None:
    if workdir is None:
        with tempfile.TemporaryDirectory(prefix="review-pyspark-") as tmp:
            return run(spark, tmp)

    print("-------------------------------------------- mtcars linear regression --------------------")
    partitions = mtcars_partitions(spark)
    fit = mtcars_regression(partitions["training"])
    for name, value in models.coefficients(fit).items():
        print(f"{name:<15}{value:>10.4f}")
    predictions = fit.predict(partitions["test"])
    predictions.select("model", "mpg", "prediction").show(truncate=False)
    print("test rmse", round(models.rmse(predictions, "mpg"), 3))

    print("-------------------------------------------- timbre => year --------------------")
    timbre_tbl = session.copy_to(spark, datasets.timbre(), "timbre", overwrite=True)
    parts = features.partition(timbre_tbl, training=0.7, testing=0.3, seed=1)
    fitted = timbre_models(parts["training"])
    for name, fit in fitted.items():
        print(name, "top features", models.feature_importances(fit)[:3])
    print(models.compare_rmse(fitted, parts["testing"]))

    ## plot only the collected (small) result, never the full spark table
    best_name = min(fitted, key=lambda name: models.rmse(fitted[name].predict(parts["testing"]), "year"))
    responses = models.residuals(fitted[best_name].predict(parts["testing"]), "year")
    local = responses.select("year", "prediction", "residual").toPandas()
    workdir = Path(workdir)
    print(plots.plot_predicted_vs_actual(local, "year", workdir / "predicted_vs_actual.png"))
    print(plots.plot_residuals(local, workdir / "residuals.png"))
