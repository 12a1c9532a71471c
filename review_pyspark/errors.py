class ReviewError(Exception):
    """Base class for errors raised by the worked examples."""


class ConfigError(ReviewError):
    pass


class TableNotFoundError(ReviewError):
    pass


class TableExistsError(ReviewError):
    pass


class UnsupportedSubsetError(ReviewError):
    """Positional row subsetting is not something a Spark DataFrame can do."""


class FormulaError(ReviewError):
    pass
