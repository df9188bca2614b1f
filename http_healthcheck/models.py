from __future__ import annotations

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True)

    interval: int = Field(..., ge=0)
    # Kept raw; validated by the runner on every iteration.
    url: str
    timeout_s: float = Field(..., gt=0)


def validate_http_url(raw: str) -> AnyHttpUrl:
    """
    Parse an absolute http/https URL.
    Raises pydantic.ValidationError for anything else.
    """
    return _HTTP_URL.validate_python(raw)
