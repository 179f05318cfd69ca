from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Union

from .errors import (
    ApiErrorsListError,
    ApiMessageError,
    ApiUnclassifiedError,
    ConfigurationError,
    NetworkError,
    NfhubClientError,
    ValidationError,
)


@dataclass(frozen=True)
class Raw:
    """Response text returned as-is (decode disabled, HTTP 200)."""

    text: str

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True)
class Decoded:
    """Response text parsed as JSON. `value` is None for empty/invalid JSON."""

    value: Any


Body = Union[Raw, Decoded]


@dataclass(frozen=True)
class RequestResult:
    body: Body
    http_code: int
    info: dict[str, Any] | None = None

    def field(self, name: str) -> Any:
        """Top-level key of a decoded mapping body, None otherwise."""
        if isinstance(self.body, Decoded) and isinstance(self.body.value, dict):
            return self.body.value.get(name)
        return None

    def has_field(self, name: str) -> bool:
        return isinstance(self.body, Decoded) and isinstance(self.body.value, dict) and name in self.body.value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"body": self.body.value, "httpCode": self.http_code}
        if self.info is not None:
            data["info"] = self.info
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


class ErrorKind(enum.Enum):
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    NETWORK = "network"
    API_MESSAGE = "api_message"
    API_ERRORS = "api_errors"
    API_UNCLASSIFIED = "api_unclassified"


@dataclass(frozen=True)
class Ok:
    value: RequestResult

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> RequestResult:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    status_code: int | None = None
    details: str | None = None

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> NfhubClientError:
        if self.kind is ErrorKind.VALIDATION:
            return ValidationError(self.message)
        if self.kind is ErrorKind.CONFIGURATION:
            return ConfigurationError(self.message)
        if self.kind is ErrorKind.NETWORK:
            return NetworkError(self.message)
        status = self.status_code or 0
        if self.kind is ErrorKind.API_MESSAGE:
            return ApiMessageError(status, self.message, self.details)
        if self.kind is ErrorKind.API_ERRORS:
            return ApiErrorsListError(status, self.message, self.details)
        return ApiUnclassifiedError(status, self.message, self.details)

    def unwrap(self) -> RequestResult:
        raise self.to_exception()


Result = Union[Ok, Err]
