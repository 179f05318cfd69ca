from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class Environment(enum.IntEnum):
    PRODUCTION = 1
    LOCAL = 2
    SANDBOX = 3
    DUSK = 4

    @classmethod
    def parse(cls, value) -> "Environment | None":
        """Accept an enum member, an int code or a name like "sandbox"."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        text = str(value or "").strip()
        if not text:
            return None
        if text.isdigit():
            return cls.parse(int(text))
        return cls.__members__.get(text.upper())


DEFAULT_BASE_URLS: Mapping[Environment, str] = MappingProxyType(
    {
        Environment.PRODUCTION: "https://api.fuganholi-fiscal.com.br/api",
        Environment.LOCAL: "http://api.nfhub.com/api",
        Environment.SANDBOX: "https://api.sandbox.fuganholi-fiscal.com.br/api",
        Environment.DUSK: "https://api.dusk.fuganholi-fiscal.com.br/api",
    }
)


@dataclass
class ClientConfig:
    token: str = ""
    environment: Environment | None = None
    debug: bool = False
    upload: bool = False
    decode: bool = True
    timeout_s: float = 15.0
