from __future__ import annotations

import logging
import sys
import time
from typing import TextIO

from pydantic import AnyHttpUrl, ValidationError

from http_healthcheck.checks.http_check import HttpHealthChecker
from http_healthcheck.checks.results import CheckOutcome, UrlParseError
from http_healthcheck.formatting import format_outcome
from http_healthcheck.models import Configuration, validate_http_url

logger = logging.getLogger(__name__)


def parse_url(raw: str) -> AnyHttpUrl | UrlParseError:
    try:
        return validate_http_url(raw)
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors()) or str(e)
        return UrlParseError(url=raw, reason=reason)


def run_once(checker: HttpHealthChecker, raw_url: str) -> CheckOutcome:
    url = parse_url(raw_url)
    if isinstance(url, UrlParseError):
        return url
    return checker.check(str(url))


def _report(out: TextIO, line: str) -> None:
    out.write(line + "\n")
    out.flush()


def loop_forever(
    config: Configuration,
    checker: HttpHealthChecker | None = None,
    out: TextIO | None = None,
) -> int:
    """
    Poll config.url every config.interval seconds until interrupted.
    Returns a non-zero exit code only when the URL cannot be parsed.
    """
    out = out or sys.stdout
    if checker is None:
        with HttpHealthChecker(timeout_s=config.timeout_s) as checker:
            return loop_forever(config, checker=checker, out=out)
    while True:
        outcome = run_once(checker, config.url)
        _report(out, format_outcome(config.url, outcome))
        if isinstance(outcome, UrlParseError):
            logger.error("Invalid URL %r: %s", outcome.url, outcome.reason)
            return 1
        time.sleep(config.interval)
