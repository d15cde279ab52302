# tests/unit/domain/test_error_tree.py
from __future__ import annotations

import pytest

from jsonbind.domain.error_tree import ErrorTree, FlattenedError


def test_leaf_requires_a_message() -> None:
    with pytest.raises(ValueError):
        ErrorTree.leaf()


def test_flatten_root_messages_have_empty_path() -> None:
    assert ErrorTree.leaf("boom", "bang").flatten() == [
        FlattenedError("boom"),
        FlattenedError("bang"),
    ]


def test_flatten_is_depth_first_in_insertion_order() -> None:
    tree = ErrorTree.node(
        [
            ("b", ErrorTree.leaf("b failed")),
            (
                "a",
                ErrorTree.node(
                    [(3, ErrorTree.leaf("third")), (0, ErrorTree.leaf("zeroth"))]
                ),
            ),
        ]
    )

    assert [(e.path, e.message) for e in tree.flatten()] == [
        ("b", "b failed"),
        ("a.3", "third"),
        ("a.0", "zeroth"),
    ]


def test_own_messages_come_before_children() -> None:
    tree = ErrorTree(["self"], {"child": ErrorTree.leaf("nested")})
    assert [str(e) for e in tree.flatten()] == ["self", "child: nested"]


def test_merge_concatenates_messages_and_merges_children() -> None:
    left = ErrorTree(["l"], {"x": ErrorTree.leaf("x1"), "y": ErrorTree.leaf("y1")})
    right = ErrorTree(["r"], {"x": ErrorTree.leaf("x2"), "z": ErrorTree.leaf("z1")})

    merged = left.merge(right)

    assert merged.messages == ("l", "r")
    assert list(merged.children) == ["x", "y", "z"]
    assert merged.children["x"].messages == ("x1", "x2")


def test_node_merges_duplicate_segments() -> None:
    tree = ErrorTree.node([("f", ErrorTree.leaf("one")), ("f", ErrorTree.leaf("two"))])
    assert tree.children["f"].messages == ("one", "two")


def test_at_nests_a_tree() -> None:
    tree = ErrorTree.leaf("bad").at(1).at("items")
    assert tree.flatten() == [FlattenedError("bad", "items.1")]


def test_is_empty() -> None:
    assert ErrorTree().is_empty
    assert ErrorTree.node([("a", ErrorTree())]).is_empty
    assert not ErrorTree.leaf("x").at("a").is_empty


def test_trees_are_immutable() -> None:
    tree = ErrorTree.node([("a", ErrorTree.leaf("x"))])
    with pytest.raises(TypeError):
        tree.children["b"] = ErrorTree.leaf("y")  # type: ignore[index]


def test_str_joins_flattened_errors() -> None:
    tree = ErrorTree.node([("a", ErrorTree.leaf("x")), ("b", ErrorTree.leaf("y"))])
    assert str(tree) == "a: x; b: y"
