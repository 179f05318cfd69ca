import pytest

from nfhub_client.params import QueryParam, as_params, build_query, with_param, without_params


def test_with_param_replaces_every_caller_entry() -> None:
    params = [("company_id", 1), ("page", 2), ("company_id", 3)]

    out = with_param(params, "company_id", 9)

    named = [p for p in out if p.name == "company_id"]
    assert named == [QueryParam("company_id", 9)]
    assert out[-1] == QueryParam("company_id", 9)
    assert out[0] == QueryParam("page", 2)


def test_with_param_does_not_mutate_input() -> None:
    params = [QueryParam("filter", "old")]
    with_param(params, "filter", "new")
    assert params == [QueryParam("filter", "old")]


def test_without_params_drops_all_names() -> None:
    out = without_params([("a", 1), ("b", 2), ("c", 3)], "a", "c")
    assert out == [QueryParam("b", 2)]


def test_as_params_accepts_tuples_and_objects() -> None:
    out = as_params([QueryParam("a", 1), ("b", "x")])
    assert out == [QueryParam("a", 1), QueryParam("b", "x")]


def test_build_query_preserves_order_and_skips_empty() -> None:
    params = [
        ("page", 2),
        ("", "ignored"),
        ("filter", ""),
        ("id", None),
        ("name", "José Silva"),
        ("limit", 0),
    ]
    assert build_query(params) == "?page=2&name=Jos%C3%A9+Silva&limit=0"


def test_build_query_empty_when_nothing_left() -> None:
    assert build_query([("a", None), ("", "b")]) == ""
    assert build_query(None) == ""


def test_build_query_encodes_reserved_characters() -> None:
    assert build_query([("q", "a&b=c")]) == "?q=a%26b%3Dc"


def test_as_params_accepts_name_value_mappings() -> None:
    out = as_params([{"name": "cnpj_company", "value": "123"}, {"name": "page"}])
    assert out == [QueryParam("cnpj_company", "123"), QueryParam("page", None)]
    assert build_query(out) == "?cnpj_company=123"


@pytest.mark.parametrize("item", ["page", ("a", 1, 2), 5])
def test_as_params_rejects_other_shapes(item) -> None:
    with pytest.raises(TypeError):
        as_params([item])


def test_build_query_sends_booleans_as_digits() -> None:
    assert build_query([("active", True), ("archived", False)]) == "?active=1&archived=0"
