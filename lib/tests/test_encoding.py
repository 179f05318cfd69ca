import json

from nfhub_client.encoding import encode_json, flatten_form, multipart_fields


def test_encode_json_round_trip() -> None:
    body = {"name": "ACME", "address": {"city": "Curitiba", "lines": ["a", "b"]}, "active": True}
    assert json.loads(encode_json(body)) == body


def test_encode_json_keeps_non_ascii() -> None:
    assert encode_json({"name": "São Paulo"}) == '{"name": "São Paulo"}'.encode("utf-8")


def test_flatten_form_nested_mappings() -> None:
    body = {"a": 1, "b": {"x": 2, "y": {"z": 3}}}
    assert flatten_form(body) == {"a": 1, "b[x]": 2, "b[y][z]": 3}


def test_flatten_form_lists_use_indexes() -> None:
    body = {"tags": ["x", "y"], "items": [{"qty": 1}, {"qty": 2}]}
    assert flatten_form(body) == {
        "tags[0]": "x",
        "tags[1]": "y",
        "items[0][qty]": 1,
        "items[1][qty]": 2,
    }


def test_flatten_form_flat_input_unchanged() -> None:
    assert flatten_form({"a": "1", "b": None}) == {"a": "1", "b": None}


def test_multipart_fields_splits_files_from_values() -> None:
    fields = multipart_fields({"name": "cert", "active": True, "pfx": b"\x00\x01", "meta": {"n": 2}})
    assert fields == [
        ("name", (None, "cert")),
        ("active", (None, "1")),
        ("pfx", ("pfx", b"\x00\x01")),
        ("meta[n]", (None, "2")),
    ]
