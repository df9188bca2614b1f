from __future__ import annotations

import logging
import time

import requests
from urllib3.exceptions import LocationValueError

from http_healthcheck.checks.results import CheckOutcome, Failure, Success, TransportError

logger = logging.getLogger(__name__)


class HttpHealthChecker:
    """
    Issues one GET per check over a single reusable session.
    Only HTTP 200 counts as success; any other status is a failure and
    anything that stops the response from arriving is a transport error.
    """

    def __init__(self, timeout_s: float, session: requests.Session | None = None) -> None:
        self.timeout_s = timeout_s
        self._session = session or requests.Session()

    def check(self, url: str) -> CheckOutcome:
        start = time.perf_counter()
        try:
            r = self._session.get(url, timeout=(self.timeout_s, self.timeout_s))
        except (requests.RequestException, LocationValueError) as e:
            latency_ms = int((time.perf_counter() - start) * 1000)
            logger.warning("GET %s failed: %s: %s", url, e.__class__.__name__, e)
            return TransportError(error=f"{e.__class__.__name__}: {e}", latency_ms=latency_ms)

        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("GET %s -> HTTP %s in %s ms", url, r.status_code, latency_ms)
        if r.status_code == 200:
            return Success(latency_ms=latency_ms)
        return Failure(status_code=r.status_code, latency_ms=latency_ms)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> HttpHealthChecker:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
