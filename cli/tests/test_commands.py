from __future__ import annotations

import json

import typer
from nfhub_client import Decoded, Err, ErrorKind, Ok, Raw, RequestResult
from typer.testing import CliRunner

from nfhub_cli import config, main
from nfhub_cli.commands import certificates_cmd, companies_cmd, customers_cmd, settings_cmd

runner = CliRunner()


class _FakeClient:
    def __init__(self, result) -> None:
        self.result = result
        self.calls: list[tuple] = []
        self.closed = False
        self.decode = True

    def set_decode(self, decode: bool) -> None:
        self.decode = decode

    def __getattr__(self, name):
        def _call(*args):
            self.calls.append((name, args))
            return self.result

        return _call

    def close(self) -> None:
        self.closed = True


def _patch(monkeypatch, module, client: _FakeClient) -> None:
    monkeypatch.setattr(module, "load_config", config.default_config)
    monkeypatch.setattr(module, "make_client", lambda *_args, **_kwargs: client)


def _ok(value, code: int = 200) -> Ok:
    return Ok(RequestResult(body=Decoded(value), http_code=code))


def test_top_level_groups_listed() -> None:
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    for group in ("settings", "companies", "customers", "installments", "accountant", "banks", "categories"):
        assert group in result.output


def test_customers_list_renders_table(monkeypatch) -> None:
    client = _FakeClient(_ok({"data": [{"id": 1, "name": "Maria", "cpfcnpj": "123"}]}))
    _patch(monkeypatch, customers_cmd, client)

    result = runner.invoke(main.app, ["customers", "list", "-c", "5", "-p", "page=2"])

    assert result.exit_code == 0, result.output
    assert "Maria" in result.output
    name, args = client.calls[0]
    assert name == "customers_list"
    assert args[0] == 5
    assert [(p.name, p.value) for p in args[1]] == [("page", "2")]
    assert client.closed is True


def test_company_create_prints_json_envelope(monkeypatch) -> None:
    client = _FakeClient(_ok({"id": 42}))
    _patch(monkeypatch, companies_cmd, client)

    result = runner.invoke(main.app, ["companies", "create", "--data", '{"name": "ACME"}', "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"body": {"id": 42}, "httpCode": 200}
    assert client.calls[0] == ("company_create", ({"name": "ACME"}, []))


def test_company_create_error_exits_2(monkeypatch) -> None:
    client = _FakeClient(Err(ErrorKind.API_ERRORS, "cnpj invalid\r\nname required", status_code=422))
    _patch(monkeypatch, companies_cmd, client)

    result = runner.invoke(main.app, ["companies", "create", "--data", "{}"])

    assert result.exit_code == 2
    assert "cnpj invalid" in result.output


def test_company_delete_requires_confirmation(monkeypatch) -> None:
    client = _FakeClient(_ok({}))
    _patch(monkeypatch, companies_cmd, client)
    monkeypatch.setattr(typer, "confirm", lambda *_args, **_kwargs: False)

    result = runner.invoke(main.app, ["companies", "delete", "8"])

    assert result.exit_code == 0
    assert client.calls == []


def test_company_delete_with_yes(monkeypatch) -> None:
    client = _FakeClient(_ok({}))
    _patch(monkeypatch, companies_cmd, client)

    result = runner.invoke(main.app, ["companies", "delete", "8", "--yes"])

    assert result.exit_code == 0, result.output
    assert client.calls == [("company_delete", (8,))]
    assert "deleted" in result.output


def test_certificate_pem_written_to_file(tmp_path, monkeypatch) -> None:
    pem = "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n"
    client = _FakeClient(Ok(RequestResult(body=Raw(pem), http_code=200)))
    _patch(monkeypatch, certificates_cmd, client)
    out = tmp_path / "cert.pem"

    result = runner.invoke(main.app, ["certificates", "pem", "3", "--raw", "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == pem
    assert client.decode is False


def test_certificate_pem_from_decoded_body(tmp_path, monkeypatch) -> None:
    client = _FakeClient(_ok({"pem": "PEM-DATA"}))
    _patch(monkeypatch, certificates_cmd, client)
    out = tmp_path / "cert.pem"

    result = runner.invoke(main.app, ["certificates", "pem", "3", "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "PEM-DATA"


def test_settings_set_and_show(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _name: str(tmp_path))
    monkeypatch.delenv(config.ENV_ENVIRONMENT, raising=False)

    result = runner.invoke(main.app, ["settings", "set", "--token", "abc", "-e", "2", "--no-decode"])
    assert result.exit_code == 0, result.output

    cfg = config.load_config()
    assert cfg.auth.token == "abc"
    assert cfg.environment == "local"
    assert cfg.decode is False

    result = runner.invoke(main.app, ["settings", "show"])
    assert "environment=local" in result.output
    assert "abc" not in result.output


def test_settings_set_rejects_unknown_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _name: str(tmp_path))
    result = runner.invoke(main.app, ["settings", "set", "-e", "5"])
    assert result.exit_code == 2
    assert not (tmp_path / "config.toml").exists()


def test_settings_get_unknown_key(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _name: str(tmp_path))
    result = runner.invoke(settings_cmd.app, ["get", "base_url"])
    assert result.exit_code == 2
