from __future__ import annotations

import json

import httpx
import pytest

from nfhub_client.config_types import ClientConfig, Environment
from nfhub_client.errors import ConfigurationError, NetworkError
from nfhub_client.results import Decoded, Raw
from nfhub_client.transport import Transport


def _transport(handler, **cfg_kwargs) -> tuple[Transport, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    cfg_kwargs.setdefault("token", "tok")
    cfg_kwargs.setdefault("environment", Environment.SANDBOX)
    cfg = ClientConfig(**cfg_kwargs)
    return Transport(cfg, transport=httpx.MockTransport(_handler)), seen


def _json(status: int, data) -> callable:
    return lambda _req: httpx.Response(status, json=data)


def test_get_builds_url_query_and_headers() -> None:
    t, seen = _transport(_json(200, {"data": []}))

    result = t.get("customers", [("company_id", 7), ("filter", "a b"), ("empty", "")])

    req = seen[0]
    assert req.method == "GET"
    assert req.url.host == "api.sandbox.fuganholi-fiscal.com.br"
    assert req.url.path == "/api/customers"
    assert list(req.url.params.multi_items()) == [("company_id", "7"), ("filter", "a b")]
    assert req.headers["Authorization"] == "Bearer tok"
    assert req.headers["Accept"] == "application/json"
    assert req.headers["Content-Type"] == "application/json"
    assert req.content == b""
    assert result.http_code == 200
    assert result.body == Decoded({"data": []})
    assert result.info is None


def test_resolve_url_per_environment() -> None:
    t, _ = _transport(_json(200, {}), environment=Environment.PRODUCTION)
    assert t.resolve_url("/companies") == "https://api.fuganholi-fiscal.com.br/api/companies"
    t.config.environment = Environment.LOCAL
    assert t.resolve_url("companies", [("cnpj_company", "123")]) == "http://api.nfhub.com/api/companies?cnpj_company=123"


def test_injected_base_urls_take_precedence() -> None:
    cfg = ClientConfig(environment=Environment.DUSK)
    t = Transport(cfg, base_urls={Environment.DUSK: "http://dusk.test/api"})
    assert t.resolve_url("banks") == "http://dusk.test/api/banks"


def test_missing_environment_raises_configuration_error() -> None:
    t, seen = _transport(_json(200, {}), environment=None)
    with pytest.raises(ConfigurationError):
        t.get("banks")
    assert seen == []


def test_extra_headers_are_appended_not_merged() -> None:
    t, seen = _transport(_json(200, {}))
    t.get("banks", headers=[("Accept", "text/plain"), ("X-Trace", "1")])
    req = seen[0]
    assert req.headers.get_list("Accept") == ["application/json", "text/plain"]
    assert req.headers["X-Trace"] == "1"


def test_post_sends_json_body() -> None:
    t, seen = _transport(_json(200, {"id": 1}))
    body = {"name": "ACME", "address": {"city": "Curitiba"}}
    t.post("companies", body)
    req = seen[0]
    assert req.method == "POST"
    assert json.loads(req.content) == body


def test_put_sends_json_body() -> None:
    t, seen = _transport(_json(200, {"id": 1}))
    t.put("/companies/3", {"name": "ACME"})
    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/api/companies/3"
    assert json.loads(seen[0].content) == {"name": "ACME"}


def test_delete_and_options_send_no_body() -> None:
    t, seen = _transport(_json(200, {}))
    t.delete("companies/3")
    t.options("companies")
    assert [r.method for r in seen] == ["DELETE", "OPTIONS"]
    assert all(r.content == b"" for r in seen)


def test_upload_mode_sends_flattened_multipart() -> None:
    t, seen = _transport(_json(200, {}), upload=True)
    t.post("certificates", {"name": "cert", "meta": {"kind": {"code": 3}}})
    req = seen[0]
    assert req.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    content = req.content
    assert b'name="name"' in content
    assert b'name="meta[kind][code]"' in content
    assert b"\r\n\r\n3\r\n" in content


def test_upload_mode_header_without_body() -> None:
    t, seen = _transport(_json(200, {}), upload=True)
    t.get("banks")
    assert seen[0].headers["Content-Type"] == "multipart/form-data"


def test_decode_disabled_success_returns_raw_text() -> None:
    t, _ = _transport(lambda _req: httpx.Response(200, text="-----BEGIN CERTIFICATE-----"), decode=False)
    result = t.get("certificates/1/pem")
    assert result.body == Raw("-----BEGIN CERTIFICATE-----")


def test_decode_disabled_error_is_still_decoded() -> None:
    t, _ = _transport(_json(500, {"errors": ["boom"]}), decode=False)
    result = t.get("banks")
    assert result.body == Decoded({"errors": ["boom"]})
    assert result.http_code == 500


def test_invalid_json_decodes_to_none() -> None:
    t, _ = _transport(lambda _req: httpx.Response(502, text="<html>bad gateway</html>"))
    result = t.get("banks")
    assert result.body == Decoded(None)


def test_debug_adds_info_with_redacted_token() -> None:
    t, _ = _transport(_json(200, {}), debug=True, token="secret")
    result = t.get("banks")
    assert result.info is not None
    assert result.info["http_code"] == 200
    assert result.info["method"] == "GET"
    assert result.info["url"].endswith("/api/banks")
    assert "secret" not in json.dumps(result.info)
    assert "info" in result.to_dict()


def test_transport_failure_raises_network_error() -> None:
    def _boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    t, _ = _transport(_boom)
    with pytest.raises(NetworkError):
        t.get("banks")


def test_debug_info_on_raw_body_records_elapsed_time() -> None:
    t, _ = _transport(lambda _req: httpx.Response(200, text="PEM"), debug=True, decode=False)
    result = t.get("certificates/1/pem")
    assert result.body == Raw("PEM")
    assert result.info["total_time"] >= 0
    assert result.info["content_type"].startswith("text/plain")
