from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union
from urllib.parse import quote_plus


@dataclass(frozen=True)
class QueryParam:
    name: str
    value: Any = None

    def is_empty(self) -> bool:
        if not self.name:
            return True
        return self.value is None or str(self.value) == ""


ParamLike = Union[QueryParam, tuple, Mapping[str, Any]]


def as_params(params: Iterable[ParamLike] | None) -> list[QueryParam]:
    """Normalize QueryParam objects, (name, value) pairs and
    {"name": ..., "value": ...} mappings into a new list."""
    out: list[QueryParam] = []
    for item in params or ():
        if isinstance(item, QueryParam):
            out.append(item)
            continue
        if isinstance(item, Mapping):
            name, value = item.get("name"), item.get("value")
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            name, value = item
        else:
            raise TypeError(f"query parameter must be a QueryParam, pair or mapping, got {item!r}")
        out.append(QueryParam(str(name or ""), value))
    return out


def without_params(params: Iterable[ParamLike] | None, *names: str) -> list[QueryParam]:
    drop = set(names)
    return [p for p in as_params(params) if p.name not in drop]


def with_param(params: Iterable[ParamLike] | None, name: str, value: Any) -> list[QueryParam]:
    """Drop every entry called `name`, then append the new value last."""
    out = without_params(params, name)
    out.append(QueryParam(name, value))
    return out


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def build_query(params: Iterable[ParamLike] | None) -> str:
    joined = [
        f"{quote_plus(p.name)}={quote_plus(_query_value(p.value))}"
        for p in as_params(params)
        if not p.is_empty()
    ]
    if not joined:
        return ""
    return "?" + "&".join(joined)
