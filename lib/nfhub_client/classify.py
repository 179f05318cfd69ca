from __future__ import annotations

from typing import Any

from .results import Err, ErrorKind, Ok, RequestResult, Result


def check_message(result: RequestResult) -> Result:
    """Success unless the decoded body carries a non-null `message`."""
    if result.field("message") is None:
        return Ok(result)
    return Err(
        ErrorKind.API_MESSAGE,
        str(result.field("message")),
        status_code=result.http_code,
        details=result.to_json(),
    )


def _error_lines(errors: Any) -> list[str] | None:
    if isinstance(errors, list):
        return [str(e) for e in errors]
    if isinstance(errors, dict):
        # {"field": ["msg", ...]} validation bags
        lines: list[str] = []
        for value in errors.values():
            if isinstance(value, list):
                lines.extend(str(v) for v in value)
            else:
                lines.append(str(value))
        return lines
    return None


def check_status(result: RequestResult) -> Result:
    """Success on HTTP 200; otherwise classify by the `errors` field."""
    if result.http_code == 200:
        return Ok(result)
    lines = _error_lines(result.field("errors"))
    if lines is not None:
        return Err(
            ErrorKind.API_ERRORS,
            "\r\n".join(lines),
            status_code=result.http_code,
            details=result.to_json(),
        )
    return Err(
        ErrorKind.API_UNCLASSIFIED,
        result.to_json(),
        status_code=result.http_code,
        details=result.to_json(),
    )
