# machine learning with MLlib
## sparklyr's ml_* functions each build a small spark.ml Pipeline: features => vector column => estimator
## a Pipeline is an ordered list of stages, fitting it gives a PipelineModel where every stage is a transformer
## the same PipelineModel then predicts on new data, which keeps training and scoring preprocessing identical
import logging
from dataclasses import dataclass

from pyspark.errors import AnalysisException, IllegalArgumentException
from pyspark.ml import Pipeline, PipelineModel
from pyspark.ml.classification import GBTClassifier, RandomForestClassifier
from pyspark.ml.evaluation import MulticlassClassificationEvaluator, RegressionEvaluator
from pyspark.ml.feature import RFormula, StringIndexer, VectorAssembler
from pyspark.ml.regression import GBTRegressor, LinearRegression, RandomForestRegressor
from pyspark.sql import DataFrame
from pyspark.sql import functions as F

from review_pyspark.errors import FormulaError

logger = logging.getLogger(__name__)

MODEL_TYPES = ("regression", "classification")


@dataclass
class FittedModel:
    pipeline: PipelineModel
    kind: str
    response: str
    features: list

    @property
    def stage(self):
        """The fitted estimator, last stage of the pipeline."""
        return self.pipeline.stages[-1]

    def predict(self, sdf: DataFrame) -> DataFrame:
        ## sdf_predict(): adds a prediction column
        return self.pipeline.transform(sdf)


def _feature_names(frame: DataFrame, column: str = "features") -> list:
    ## vector columns built by RFormula / VectorAssembler carry the source names in their metadata
    attrs = frame.schema[column].metadata.get("ml_attr", {}).get("attrs", {})
    named = [attr for group in attrs.values() for attr in group]
    return [attr["name"] for attr in sorted(named, key=lambda attr: attr["idx"])]


def _parse_formula(formula: str):
    response, sep, terms = formula.partition("~")
    response, terms = response.strip(), terms.strip()
    if not sep or not response or not terms or "~" in terms:
        raise FormulaError(f"expected a formula like 'y ~ x1 + x2', got {formula!r}")
    return response


def _fit(pipeline: Pipeline, sdf: DataFrame) -> PipelineModel:
    try:
        return pipeline.fit(sdf)
    except (IllegalArgumentException, AnalysisException) as exc:
        raise FormulaError(str(exc)) from exc


def linear_regression(sdf: DataFrame, formula: str, **params) -> FittedModel:
    """ml_linear_regression(mpg ~ wt + cyl)

    RFormula understands R formulas: ``.`` for every other column, ``-`` to drop
    one, ``:`` for interactions; string columns are one-hot encoded.
    """
    response = _parse_formula(formula)
    pipeline = Pipeline(stages=[
        RFormula(formula=formula, featuresCol="features", labelCol="label"),
        LinearRegression(featuresCol="features", labelCol="label", **params),
    ])
    model = _fit(pipeline, sdf)
    features = _feature_names(model.transform(sdf))
    logger.info("fitted linear regression %s", formula)
    return FittedModel(model, "regression", response, features)


def coefficients(model: FittedModel) -> dict:
    lr = model.stage
    result = {"(Intercept)": float(lr.intercept)}
    result.update(zip(model.features, (float(c) for c in lr.coefficients)))
    return result


def _tree_pipeline(response, features, kind, regressor, classifier, params):
    if kind not in MODEL_TYPES:
        raise ValueError(f"type must be one of {MODEL_TYPES}, got {kind!r}")
    stages = [VectorAssembler(inputCols=list(features), outputCol="features")]
    if kind == "classification":
        ## classifiers want labels 0.0, 1.0, ...
        stages.append(StringIndexer(inputCol=response, outputCol="label"))
        stages.append(classifier(featuresCol="features", labelCol="label", **params))
    else:
        stages.append(regressor(featuresCol="features", labelCol=response, **params))
    return Pipeline(stages=stages)


def _without_none(**params):
    ## passing seed=None explicitly would set the param to None on the java side
    return {k: v for k, v in params.items() if v is not None}


def gradient_boosted_trees(sdf: DataFrame, response: str, features, type: str = "regression",
                           seed: int = None, max_iter: int = 20) -> FittedModel:
    """ml_gradient_boosted_trees(); spark's GBT classifier is binary only."""
    params = _without_none(seed=seed, maxIter=max_iter)
    pipeline = _tree_pipeline(response, features, type, GBTRegressor, GBTClassifier, params)
    model = pipeline.fit(sdf)
    logger.info("fitted gradient boosted trees (%s) for %s", type, response)
    return FittedModel(model, type, response, list(features))


def random_forest(sdf: DataFrame, response: str, features, type: str = "regression",
                  seed: int = None, num_trees: int = 20) -> FittedModel:
    params = _without_none(seed=seed, numTrees=num_trees)
    pipeline = _tree_pipeline(response, features, type, RandomForestRegressor, RandomForestClassifier, params)
    model = pipeline.fit(sdf)
    logger.info("fitted random forest (%s) for %s", type, response)
    return FittedModel(model, type, response, list(features))


def feature_importances(model: FittedModel) -> list:
    importances = model.stage.featureImportances.toArray()
    pairs = zip(model.features, (float(v) for v in importances))
    return sorted(pairs, key=lambda pair: pair[1], reverse=True)


def residuals(predictions: DataFrame, response: str) -> DataFrame:
    return predictions.withColumn("residual", F.col(response) - F.col("prediction"))


def rmse(predictions: DataFrame, response: str) -> float:
    evaluator = RegressionEvaluator(labelCol=response, predictionCol="prediction", metricName="rmse")
    return float(evaluator.evaluate(predictions.withColumn(response, F.col(response).cast("double"))))


def accuracy(predictions: DataFrame) -> float:
    evaluator = MulticlassClassificationEvaluator(labelCol="label", predictionCol="prediction",
                                                  metricName="accuracy")
    return float(evaluator.evaluate(predictions))


def compare_rmse(models: dict, sdf: DataFrame) -> dict:
    return {name: rmse(model.predict(sdf), model.response) for name, model in models.items()}
