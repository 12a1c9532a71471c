# feature transformers and sdf utilities
## sparklyr's ft_* functions wrap the pyspark.ml.feature transformers, sdf_* wrap DataFrame methods
## transformer => has transform(df), returns a new DataFrame
## estimator => has fit(df), returns a model which is itself a transformer
## e.g. QuantileDiscretizer is an estimator, fitting it gives back a Bucketizer
import logging

from pyspark.ml.feature import (
    Binarizer,
    Bucketizer,
    QuantileDiscretizer,
    RegexTokenizer,
    SQLTransformer,
    StringIndexer,
    Tokenizer,
    VectorAssembler,
)
from pyspark.sql import DataFrame
from pyspark.sql import functions as F

logger = logging.getLogger(__name__)


def _as_double(sdf, column):
    ## most transformers only accept DoubleType, integer columns have to be cast first
    return sdf.withColumn(column, F.col(column).cast("double"))


def binarize(sdf: DataFrame, input_col: str, output_col: str, threshold: float) -> DataFrame:
    """1.0 where ``input_col > threshold`` else 0.0 (ft_binarizer)."""
    binarizer = Binarizer(threshold=float(threshold), inputCol=input_col, outputCol=output_col)
    return binarizer.transform(_as_double(sdf, input_col))


def bucketize(sdf: DataFrame, input_col: str, output_col: str, splits) -> DataFrame:
    """Bucket index of each value, bucket i is ``[splits[i], splits[i + 1])``.

    The last bucket also includes its upper bound; use ``float("-inf")`` and
    ``float("inf")`` as outer splits to catch everything.
    """
    splits = [float(s) for s in splits]
    if len(splits) < 3:
        raise ValueError("bucketize needs at least three splits (two buckets)")
    if any(b <= a for a, b in zip(splits, splits[1:])):
        raise ValueError(f"splits must be strictly increasing, got {splits}")
    bucketizer = Bucketizer(splits=splits, inputCol=input_col, outputCol=output_col)
    return bucketizer.transform(_as_double(sdf, input_col))


def quantile_discretize(sdf: DataFrame, input_col: str, output_col: str, num_buckets: int) -> DataFrame:
    if num_buckets < 2:
        raise ValueError("num_buckets must be at least 2")
    discretizer = QuantileDiscretizer(numBuckets=num_buckets, inputCol=input_col, outputCol=output_col)
    sdf = _as_double(sdf, input_col)
    bucketizer = discretizer.fit(sdf)
    logger.debug("quantile splits for %s: %s", input_col, bucketizer.getSplits())
    return bucketizer.transform(sdf)


def tokenize(sdf: DataFrame, input_col: str, output_col: str) -> DataFrame:
    ## lowercases then splits on whitespace
    return Tokenizer(inputCol=input_col, outputCol=output_col).transform(sdf)


def regex_tokenize(sdf: DataFrame, input_col: str, output_col: str, pattern: str = r"\s+") -> DataFrame:
    ## with gaps=True (the default) the pattern matches the separators, not the tokens
    tokenizer = RegexTokenizer(inputCol=input_col, outputCol=output_col, pattern=pattern)
    return tokenizer.transform(sdf)


def index_strings(sdf: DataFrame, input_col: str, output_col: str) -> DataFrame:
    ## most frequent label gets index 0.0
    return StringIndexer(inputCol=input_col, outputCol=output_col).fit(sdf).transform(sdf)


def sql_transform(sdf: DataFrame, statement: str) -> DataFrame:
    ## __THIS__ stands for the input DataFrame
    return SQLTransformer(statement=statement).transform(sdf)


def assemble(sdf: DataFrame, input_cols, output_col: str = "features") -> DataFrame:
    return VectorAssembler(inputCols=list(input_cols), outputCol=output_col).transform(sdf)


def word_counts(sdf: DataFrame, input_col: str) -> DataFrame:
    """Count the words of a text column, most frequent first."""
    tokens = regex_tokenize(sdf, input_col, "_tokens", pattern=r"\W+")
    return (
        tokens.select(F.explode("_tokens").alias("word"))
        .where(F.length("word") > 0)
        .groupBy("word")
        .count()
        .orderBy(F.desc("count"), "word")
    )


# sdf_* utilities
def sort_by(sdf: DataFrame, columns, ascending: bool = True) -> DataFrame:
    columns = [columns] if isinstance(columns, str) else list(columns)
    return sdf.orderBy(*columns, ascending=ascending)


def schema_of(sdf: DataFrame) -> dict:
    return {f.name: f.dataType.simpleString() for f in sdf.schema.fields}


def sample(sdf: DataFrame, fraction: float, replacement: bool = False, seed: int = None) -> DataFrame:
    ## the fraction is a per-row probability, the result size is only approximately fraction * count
    return sdf.sample(withReplacement=replacement, fraction=fraction, seed=seed)


def partition(sdf: DataFrame, seed: int = None, **weights) -> dict:
    """Split ``sdf`` into named, non-overlapping random parts.

    ``partition(sdf, training=0.7, testing=0.3, seed=1)`` gives
    ``{"training": ..., "testing": ...}``; weights are normalized by spark.
    """
    if not weights or any(w < 0 for w in weights.values()) or sum(weights.values()) <= 0:
        raise ValueError(f"partition needs non-negative weights with a positive sum, got {weights}")
    names = list(weights)
    parts = sdf.randomSplit([float(weights[name]) for name in names], seed=seed)
    return dict(zip(names, parts))


def register(sdf: DataFrame, name: str) -> DataFrame:
    sdf.createOrReplaceTempView(name)
    return sdf.sparkSession.table(name)
