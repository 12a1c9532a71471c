import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level="INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    ## py4j logs every gateway call at debug level, far too noisy
    logging.getLogger("py4j").setLevel(logging.ERROR)
