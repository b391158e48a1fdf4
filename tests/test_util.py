from oasmodel.util import extract_extensions, filter_keys, is_false


def test_is_false():
    assert is_false(False) is True
    assert is_false(True) is False


def test_extract_extensions_keeps_only_x_keys_in_order():
    data = {"x-b": 1, "title": "t", "x-a": {"k": [1, 2]}, "ignored": "wat"}
    result = extract_extensions(data)
    assert list(result) == ["x-b", "x-a"]
    assert result["x-a"] == {"k": [1, 2]}


def test_extract_extensions_skips_non_string_keys():
    data = {200: "ok", "x-foo": "bar"}
    assert extract_extensions(data) == {"x-foo": "bar"}


def test_extract_extensions_empty():
    assert extract_extensions({"name": "n"}) == {}


def test_filter_keys_applies_predicate():
    data = {"/pets": 1, "x-ext": 2, "/users": 3}
    result = filter_keys(data, lambda key: key.startswith("/"))
    assert result == {"/pets": 1, "/users": 3}
    assert list(result) == ["/pets", "/users"]


def test_filter_keys_returns_new_dict():
    data = {"a": 1}
    result = filter_keys(data, lambda key: True)
    result["b"] = 2
    assert data == {"a": 1}