from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import httpx

from .config_types import DEFAULT_BASE_URLS, ClientConfig, Environment
from .encoding import encode_json, multipart_fields
from .errors import ConfigurationError, NetworkError
from .params import ParamLike, build_query
from .results import Decoded, Raw, RequestResult

logger = logging.getLogger(__name__)

USER_AGENT = "nfhub-client/0.1.0"
MULTIPART = "multipart/form-data"
JSON = "application/json"

HeaderList = Iterable[tuple[str, str]]

_NO_BODY = object()


def _decode_json(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        logger.debug("response body is not JSON (%d chars)", len(text))
        return None


def _redact(headers: httpx.Headers) -> dict[str, str]:
    out: dict[str, str] = {}
    for key, value in headers.multi_items():
        if key.lower() == "authorization":
            value = "Bearer ***"
        out[key] = value
    return out


class Transport:
    """Builds, sends and normalizes every request; never classifies results."""

    def __init__(
            self,
            cfg: ClientConfig,
            *,
            base_urls: Mapping[Environment, str] | None = None,
            transport: httpx.BaseTransport | None = None,
    ):
        self._cfg = cfg
        if base_urls is None:
            self._base_urls = DEFAULT_BASE_URLS
        else:
            self._base_urls = MappingProxyType(dict(base_urls))
        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def base_urls(self) -> Mapping[Environment, str]:
        return self._base_urls

    def close(self) -> None:
        self._client.close()

    def default_headers(self) -> list[tuple[str, str]]:
        return [
            ("User-Agent", USER_AGENT),
            ("Authorization", f"Bearer {self._cfg.token}"),
            ("Accept", JSON),
            ("Content-Type", MULTIPART if self._cfg.upload else JSON),
        ]

    def base_url(self) -> str:
        env = self._cfg.environment
        if env is None:
            raise ConfigurationError("API environment is not configured")
        try:
            return self._base_urls[env]
        except KeyError:
            raise ConfigurationError(f"No base URL configured for environment {env.name.lower()}") from None

    def resolve_url(self, path: str, params: Iterable[ParamLike] | None = None) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url() + path + build_query(params)

    def get(self, path: str, params: Iterable[ParamLike] | None = None, headers: HeaderList = ()) -> RequestResult:
        return self.execute("GET", path, params=params, headers=headers)

    def post(
            self,
            path: str,
            body: Mapping[str, Any] | None = None,
            params: Iterable[ParamLike] | None = None,
            headers: HeaderList = (),
    ) -> RequestResult:
        return self.execute("POST", path, params=params, headers=headers, body=body or {})

    def put(
            self,
            path: str,
            body: Mapping[str, Any] | None = None,
            params: Iterable[ParamLike] | None = None,
            headers: HeaderList = (),
    ) -> RequestResult:
        return self.execute("PUT", path, params=params, headers=headers, body=body or {})

    def delete(self, path: str, params: Iterable[ParamLike] | None = None, headers: HeaderList = ()) -> RequestResult:
        return self.execute("DELETE", path, params=params, headers=headers)

    def options(self, path: str, params: Iterable[ParamLike] | None = None, headers: HeaderList = ()) -> RequestResult:
        return self.execute("OPTIONS", path, params=params, headers=headers)

    def execute(
            self,
            method: str,
            path: str,
            *,
            params: Iterable[ParamLike] | None = None,
            headers: HeaderList = (),
            body: Any = _NO_BODY,
    ) -> RequestResult:
        url = self.resolve_url(path, params)
        request = self._build_request(method, url, list(headers), body)
        logger.debug("%s %s", method, url)

        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        text = response.text
        response.close()
        # Error bodies are always decoded so callers can inspect `errors`/`message`.
        if self._cfg.decode or response.status_code != 200:
            payload = Decoded(_decode_json(text))
        else:
            payload = Raw(text)
        logger.debug("%s %s -> %s", method, url, response.status_code)

        info = self._debug_info(request, response) if self._cfg.debug else None
        return RequestResult(body=payload, http_code=response.status_code, info=info)

    def _build_request(self, method: str, url: str, extra: list[tuple[str, str]], body: Any) -> httpx.Request:
        headers = self.default_headers()
        if body is _NO_BODY:
            return self._client.build_request(
                method, url, headers=headers + extra, timeout=self._cfg.timeout_s
            )

        if not self._cfg.upload:
            return self._client.build_request(
                method,
                url,
                headers=headers + extra,
                content=encode_json(body),
                timeout=self._cfg.timeout_s,
            )

        fields = multipart_fields(body)
        if not fields:
            return self._client.build_request(
                method, url, headers=headers + extra, timeout=self._cfg.timeout_s
            )
        # httpx supplies "multipart/form-data; boundary=..." for the encoded parts.
        headers = [(k, v) for k, v in headers if not (k == "Content-Type" and v == MULTIPART)]
        return self._client.build_request(
            method,
            url,
            headers=headers + extra,
            files=fields,
            timeout=self._cfg.timeout_s,
        )

    @staticmethod
    def _debug_info(request: httpx.Request, response: httpx.Response) -> dict[str, Any]:
        return {
            "url": str(request.url),
            "method": request.method,
            "http_code": response.status_code,
            "content_type": response.headers.get("Content-Type"),
            "total_time": response.elapsed.total_seconds(),
            "request_headers": _redact(request.headers),
            "response_headers": dict(response.headers.items()),
        }
