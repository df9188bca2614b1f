from __future__ import annotations

from http_healthcheck.checks.results import CheckOutcome, UrlParseError


def format_outcome(url: str, outcome: CheckOutcome) -> str:
    if isinstance(outcome, UrlParseError):
        return outcome.render()
    return f"Checking '{url}'. Result: {outcome.render()}"
