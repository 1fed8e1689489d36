from __future__ import annotations

import pytest

from jsonmend.accessors import duplicate_value, get_value, set_value, sort_by_path
from jsonmend.exceptions import PathSyntaxError

DATA = {"items": [{"name": "x", "tags": ["a", "b"]}, {"name": "y"}], "count": 2}


def test_get_value_by_expression_and_by_tuple() -> None:
    assert get_value(DATA, ".items[0].name") == "x"
    assert get_value(DATA, ("items", 0, "tags", 1)) == "b"


def test_get_value_root() -> None:
    assert get_value(DATA, "") is DATA
    assert get_value(DATA, None) is DATA


def test_get_value_missing_returns_none() -> None:
    assert get_value(DATA, ".items[5].name") is None
    assert get_value(DATA, ".items[1].tags[0]") is None
    assert get_value(DATA, ".count.value") is None
    assert get_value(DATA, ".items[*]") is None


def test_get_value_invalid_expression_raises() -> None:
    with pytest.raises(PathSyntaxError):
        get_value(DATA, "items")


def test_sort_by_path() -> None:
    items = [{"n": 2}, {"n": 1}, {}]
    assert sort_by_path(items, ".n") == [{}, {"n": 1}, {"n": 2}]
    assert sort_by_path(items, ".n", direction="desc") == [{"n": 2}, {"n": 1}, {}]
    assert items == [{"n": 2}, {"n": 1}, {}]


def test_sort_without_path_compares_items() -> None:
    assert sort_by_path([3, 1, 2]) == [1, 2, 3]
    assert sort_by_path([3, 1, 2], ".") == [1, 2, 3]


def test_sort_ranks_mixed_types() -> None:
    assert sort_by_path(["a", 1, None, True]) == [None, True, 1, "a"]


def test_sort_is_stable() -> None:
    items = [{"k": 1, "id": "first"}, {"k": 0}, {"k": 1, "id": "second"}]
    ordered = sort_by_path(items, ".k")
    assert [item.get("id") for item in ordered] == [None, "first", "second"]


def test_set_value_creates_missing_objects() -> None:
    assert set_value({}, ".x.y", 2) == {"x": {"y": 2}}
    assert set_value({"a": {}}, ".a.b", 1) == {"a": {"b": 1}}


def test_set_value_in_arrays() -> None:
    assert set_value({"l": [1]}, ".l[0]", 5) == {"l": [5]}
    assert set_value({"l": [1]}, ".l[1]", 5) == {"l": [1, 5]}
    with pytest.raises(IndexError):
        set_value({"l": [1]}, ".l[3]", 5)


def test_set_value_root_replaces_document() -> None:
    assert set_value({"a": 1}, "", [1]) == [1]


def test_set_value_replaces_scalar_with_object() -> None:
    assert set_value({"a": 1}, ".a.b", 2) == {"a": {"b": 2}}


def test_set_value_with_mismatched_segment_fails() -> None:
    with pytest.raises(ValueError):
        set_value([1], ".a", 2)
    with pytest.raises(ValueError):
        set_value({"a": [1]}, ".a.b", 2)


def test_duplicate_member_takes_free_copy_name() -> None:
    data = {"a": {"x": 1}, "a (copy)": 2, "b": 3}
    updated, copy_path = duplicate_value(data, ".a")
    assert copy_path == ("a (copy 2)",)
    assert list(updated) == ["a", "a (copy 2)", "a (copy)", "b"]
    assert updated["a (copy 2)"] == {"x": 1}
    assert updated["a (copy 2)"] is not updated["a"]


def test_duplicate_array_item_inserts_after_it() -> None:
    data = {"items": [{"n": 1}, {"n": 2}]}
    updated, copy_path = duplicate_value(data, ".items[0]")
    assert copy_path == ("items", 1)
    assert updated["items"] == [{"n": 1}, {"n": 1}, {"n": 2}]


@pytest.mark.parametrize("path", ["", ".missing", ".items[5]"])
def test_duplicate_without_value_fails(path: str) -> None:
    with pytest.raises(ValueError):
        duplicate_value({"items": [1]}, path)
