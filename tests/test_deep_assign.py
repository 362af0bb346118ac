import pytest

from objpath.deep_assign import (
    ArrayMode,
    DeepAssign,
    deep_assign,
    deep_assign_with_concat,
    deep_assign_with_overwrite,
    deep_assign_with_shallow_merge,
)


def test_deep_assign_rejects_invalid_array_mode() -> None:
    with pytest.raises(ValueError, match="Invalid array mode received: 'random'"):
        _ = DeepAssign(array_mode="random")


def test_deep_assign_accepts_mode_values() -> None:
    assert DeepAssign("concat").array_mode is ArrayMode.CONCAT
    assert DeepAssign().array_mode is ArrayMode.MERGE


def test_assign_without_targets_returns_an_empty_dict() -> None:
    assert deep_assign() == {}
    assert deep_assign("text", 42) == {}


def test_assign_merges_mappings_without_references() -> None:
    first = {"name": "Rosario", "address": {"planet": "earth"}}
    second = {"nickname": "Charito", "address": {"city": "Springfield"}}

    result = deep_assign(first, second)
    first["address"]["planet"] = "mars"
    second["address"]["city"] = "Shelbyville"

    assert result == {
        "name": "Rosario",
        "nickname": "Charito",
        "address": {"planet": "earth", "city": "Springfield"},
    }


def test_assign_ignores_non_container_targets() -> None:
    assert deep_assign({"a": 1}, None, "text", {"b": 2}) == {"a": 1, "b": 2}


def test_assign_none_values_override() -> None:
    assert deep_assign({"a": {"b": 1}}, {"a": None}) == {"a": None}


def test_merge_mode_merges_lists_by_index() -> None:
    first = {"people": [{"name": "Rosario"}, {"name": "Pili"}]}
    second = {"people": [{"nickname": "Charito"}]}
    assert deep_assign(first, second) == {"people": [{"name": "Rosario", "nickname": "Charito"}, {"name": "Pili"}]}
    assert deep_assign(["a", "b"], ["c"]) == ["c", "b"]
    assert deep_assign(["a"], ["b", "c"]) == ["b", "c"]


def test_shallow_merge_mode_replaces_items_by_index() -> None:
    first = {"people": [{"name": "Rosario"}, {"name": "Pili"}]}
    second = {"people": [{"nickname": "Charito"}]}
    assert deep_assign_with_shallow_merge(first, second) == {"people": [{"nickname": "Charito"}, {"name": "Pili"}]}


def test_concat_mode_concatenates_nested_lists() -> None:
    assert deep_assign_with_concat({"list": [1, 2]}, {"list": [3]}) == {"list": [1, 2, 3]}


def test_overwrite_mode_replaces_nested_lists() -> None:
    assert deep_assign_with_overwrite({"list": [1, 2]}, {"list": [3]}) == {"list": [3]}


def test_top_level_lists_always_merge() -> None:
    assert deep_assign_with_concat([{"a": 1}], [{"b": 2}]) == [{"a": 1, "b": 2}]
    assert deep_assign_with_overwrite(["a", "b"], ["c"]) == ["c", "b"]


def test_mismatched_top_level_targets_take_the_last_one() -> None:
    assert deep_assign({"a": 1}, [1, 2]) == [1, 2]
