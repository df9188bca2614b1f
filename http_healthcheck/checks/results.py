from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Success:
    latency_ms: int
    status_code = 200
    ok = True

    def render(self) -> str:
        return f"OK({self.status_code})"


@dataclass(frozen=True)
class Failure:
    status_code: int
    latency_ms: int
    ok = False

    def render(self) -> str:
        return f"ERR({self.status_code})"


@dataclass(frozen=True)
class TransportError:
    error: str
    latency_ms: int
    ok = False

    def render(self) -> str:
        return "ERR(request error)"


@dataclass(frozen=True)
class UrlParseError:
    url: str
    reason: str
    ok = False

    def render(self) -> str:
        return "URL parsing error"


CheckOutcome = Success | Failure | TransportError | UrlParseError
