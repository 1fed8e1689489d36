from __future__ import annotations

import pytest

from jsonmend.structure import find_unique_name, get_child_paths, natural_key, sort_object_keys
from jsonmend.values import limit_characters, parse_string_value


def test_sort_object_keys_naturally() -> None:
    obj = {"item10": 1, "item2": 2, "Item1": 3}
    assert list(sort_object_keys(obj)) == ["Item1", "item2", "item10"]
    assert list(sort_object_keys(obj, direction="desc")) == ["item10", "item2", "Item1"]


def test_natural_key_mixes_text_and_numbers() -> None:
    assert sorted(["b", "a10", "10", "a9"], key=natural_key) == ["10", "a9", "a10", "b"]


def test_child_paths_of_array_items() -> None:
    data = [{"a": 1, "b": {"c": 2}}, {"d": [1]}]
    assert get_child_paths(data) == [".a", ".b.c"]
    assert get_child_paths(data, include_objects=True) == ["", ".a", ".b", ".b.c", ".d"]


def test_child_paths_quote_unusual_names() -> None:
    assert get_child_paths([{"a b": 1}]) == ['["a b"]']


def test_child_paths_of_non_array_is_root() -> None:
    assert get_child_paths({"a": 1}) == [""]


def test_child_paths_limit_items(monkeypatch: pytest.MonkeyPatch) -> None:
    data = [{"a": 1}, {"b": 2}]
    assert get_child_paths(data, max_items=1) == [".a"]

    monkeypatch.setenv("JSONMEND_MAX_CHILD_PATH_ITEMS", "1")
    assert get_child_paths(data) == [".a"]


def test_find_unique_name() -> None:
    assert find_unique_name("b", []) == "b"
    assert find_unique_name("a", ["a"]) == "a (copy)"
    assert find_unique_name("a", ["a", "a (copy)"]) == "a (copy 2)"
    assert find_unique_name("a (copy 2)", ["a", "a (copy)"]) == "a (copy 2)"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("NULL", None),
        ("True", True),
        ("false", False),
        ("12", 12),
        ("-3", -3),
        ("1.5", 1.5),
        ("2e3", 2000.0),
        ("abc", "abc"),
        ("123ab", "123ab"),
        ("nan", "nan"),
        ("1_000", "1_000"),
        ("  ", "  "),
        (" 12 ", 12),
        ("+5", 5),
        ("007", 7),
        ("5.", 5.0),
        (".5", 0.5),
        ("0x10", 16),
        ("0XfF", 255),
        ("0o17", 15),
        ("0b101", 5),
        ("-0x10", "-0x10"),
        ("0x", "0x"),
        ("0x1g", "0x1g"),
        ("Infinity", "Infinity"),
        ("1e999", "1e999"),
        ("\uff11\uff12", "\uff11\uff12"),
    ],
)
def test_parse_string_value(text: str, expected) -> None:
    value = parse_string_value(text)
    assert value == expected
    assert type(value) is type(expected)


def test_limit_characters() -> None:
    assert limit_characters("abcdef", 3) == "abc..."
    assert limit_characters("ab", 3) == "ab"
