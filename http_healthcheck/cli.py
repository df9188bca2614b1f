from __future__ import annotations

import argparse
import logging
import math
import sys
import threading

from http_healthcheck.checks.http_check import HttpHealthChecker
from http_healthcheck.config import VERSION, settings
from http_healthcheck.models import Configuration
from http_healthcheck.runner import loop_forever

logger = logging.getLogger(__name__)


# sleep() cannot take more seconds than this.
MAX_INTERVAL_S = int(threading.TIMEOUT_MAX)


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if n > MAX_INTERVAL_S:
        raise argparse.ArgumentTypeError(f"interval too large (max {MAX_INTERVAL_S}): {value!r}")
    return n


def _positive_float(value: str) -> float:
    try:
        f = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive number: {value!r}")
    if not math.isfinite(f) or f <= 0 or f > threading.TIMEOUT_MAX:
        raise argparse.ArgumentTypeError(f"invalid positive number: {value!r}")
    return f


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-healthcheck",
        description="Repeatedly GET a URL and report whether it answers HTTP 200.",
    )
    parser.add_argument("interval", type=_non_negative_int, help="seconds to wait between checks")
    parser.add_argument("url", help="http or https URL to check")
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=settings.HEALTHCHECK_TIMEOUT_SECONDS,
        help="per-request connect/read timeout in seconds (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every request")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def parse_args(argv: list[str] | None = None) -> tuple[Configuration, bool]:
    args = build_parser().parse_args(argv)
    config = Configuration(interval=args.interval, url=args.url, timeout_s=args.timeout)
    return config, args.verbose


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else settings.HEALTHCHECK_LOG_LEVEL
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    config, verbose = parse_args(argv)
    configure_logging(verbose)
    logger.debug("Starting: interval=%ss url=%s timeout=%ss", config.interval, config.url, config.timeout_s)

    with HttpHealthChecker(timeout_s=config.timeout_s) as checker:
        try:
            return loop_forever(config, checker=checker)
        except KeyboardInterrupt:
            logger.debug("Interrupted, stopping")
            return 130


if __name__ == "__main__":
    raise SystemExit(main())
