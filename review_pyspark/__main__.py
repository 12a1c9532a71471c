"""Run the worked examples from the command line.

Examples:
  python -m review_pyspark list
  python -m review_pyspark run connecting manipulating_data
  python -m review_pyspark --master local[4] run all --workdir ./output
  python -m review_pyspark benchmark --rows 200000
"""
import argparse
import logging
import sys
import tempfile
from pathlib import Path

from review_pyspark import benchmark, datasets, log, session
from review_pyspark.config import SessionConfig
from review_pyspark.errors import ReviewError
from review_pyspark.lessons import LESSONS, summary

logger = logging.getLogger("review_pyspark")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="review-pyspark",
        description="Learning notes and worked examples for apache spark from python.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--master", default=None, help="spark master url (default: local[*] or $REVIEW_PYSPARK_MASTER)")
    parser.add_argument("--log-level", default="INFO", help="python log level (default: INFO)")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="list the lessons")

    run = commands.add_parser("run", help="run one or more lessons")
    run.add_argument("lessons", nargs="+", choices=list(LESSONS) + ["all"])
    run.add_argument("--workdir", default=None, help="where files and plots are written (default: a temp dir)")

    bench = commands.add_parser("benchmark", help="time a grouped mean with pandas and spark")
    bench.add_argument("--rows", type=_positive_int, default=100_000)
    bench.add_argument("--repeat", type=_positive_int, default=3)
    return parser.parse_args(argv)


def _run_lessons(spark, names, workdir):
    names = list(LESSONS) if "all" in names else names
    for name in names:
        print("=" * 70)
        print(f"  {name}: {summary(name)}")
        print("=" * 70)
        LESSONS[name].run(spark, workdir)


def _benchmark(spark, rows, repeat):
    flights = datasets.flights(rows)
    flights_tbl = session.copy_to(spark, flights, "flights", overwrite=True)
    timings = benchmark.compare_group_mean(flights, flights_tbl, "carrier", "dep_delay", repeat=repeat)
    print(benchmark.format_timings(timings))


def main(argv=None) -> int:
    args = parse_args(argv)
    log.configure_logging(args.log_level)

    if args.command == "list":
        for name in LESSONS:
            print(f"{name:<25}{summary(name)}")
        return 0

    try:
        config = SessionConfig.from_env(master=args.master)
    except ReviewError as exc:
        logger.error("%s", exc)
        return 2
    spark = session.connect(config)
    try:
        if args.command == "run":
            if args.workdir:
                workdir = Path(args.workdir)
                workdir.mkdir(parents=True, exist_ok=True)
                _run_lessons(spark, args.lessons, workdir)
            else:
                with tempfile.TemporaryDirectory(prefix="review-pyspark-") as tmp:
                    _run_lessons(spark, args.lessons, Path(tmp))
        elif args.command == "benchmark":
            _benchmark(spark, args.rows, args.repeat)
    except ReviewError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        session.disconnect(spark)
    return 0


if __name__ == "__main__":
    sys.exit(main())
