import os
from dataclasses import dataclass, field, fields

from review_pyspark.errors import ConfigError

ENV_PREFIX = "REVIEW_PYSPARK_"


@dataclass
class SessionConfig:
    """Everything needed to build a SparkSession.

    ``master`` is where the driver asks for resources:
    ``local[*]`` runs everything inside this process using all cores,
    ``spark://host:7077`` talks to a standalone cluster manager.
    """

    master: str = "local[*]"
    app_name: str = "review-pyspark"
    log_level: str = "WARN"
    shuffle_partitions: int = 8
    options: dict = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ=None, **overrides):
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            if f.name == "options":
                continue
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.name == "shuffle_partitions":
                try:
                    raw = int(raw)
                except ValueError as exc:
                    raise ConfigError(f"{ENV_PREFIX}SHUFFLE_PARTITIONS must be an integer, got {raw!r}") from exc
            values[f.name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def spark_options(self) -> dict:
        ## the default of 200 shuffle partitions is meant for clusters, a laptop wants a handful
        options = {"spark.sql.shuffle.partitions": str(self.shuffle_partitions)}
        options.update({k: str(v) for k, v in self.options.items()})
        return options
