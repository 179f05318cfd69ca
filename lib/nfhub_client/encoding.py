from __future__ import annotations

import io
import json
from typing import Any, Mapping


def encode_json(body: Any) -> bytes:
    return json.dumps(body if body is not None else {}, ensure_ascii=False).encode("utf-8")


def _is_nested(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _children(value: Any):
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def flatten_form(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """Flatten nested mappings/sequences into `key[sub]` form field names.

    One level is unrolled per pass; passes repeat until no value is nested,
    so {"b": {"y": {"z": 3}}} ends as {"b[y][z]": 3}.
    """
    flat: dict[str, Any] = {}
    again = False
    for key, value in (data or {}).items():
        if not _is_nested(value):
            flat[str(key)] = value
            continue
        for sub, sub_value in _children(value):
            flat[f"{key}[{sub}]"] = sub_value
            if _is_nested(sub_value):
                again = True
    if again:
        return flatten_form(flat)
    return flat


def _is_file(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, io.IOBase))


def _form_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def multipart_fields(data: Mapping[str, Any] | None) -> list[tuple[str, tuple]]:
    """Flattened body as httpx `files=` entries.

    Plain values become `(None, text)` parts so the request is always
    multipart, even when no file is attached.
    """
    fields: list[tuple[str, tuple]] = []
    for key, value in flatten_form(data).items():
        if _is_file(value):
            filename = getattr(value, "name", None) or key
            fields.append((key, (str(filename).rsplit("/", 1)[-1], value)))
        else:
            fields.append((key, (None, _form_value(value))))
    return fields
