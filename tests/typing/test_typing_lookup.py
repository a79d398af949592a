"""
Tests for recording and looking up node types in a typing context.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from conftest import located
from tc_ast import BinaryOp, IntLiteral, VarRef
from tc_internal_error import NodeNotTyped, VariableNotTyped
from tc_types import get_instance_type, union_of
from tc_typing import TypingContext

INTEGER = get_instance_type("Integer")
STRING = get_instance_type("String")


def x_plus_one(line: int) -> BinaryOp:
    return located(BinaryOp("+", VarRef("x"), IntLiteral(1)), line, 1, "x + 1")


def test_create_root_starts_at_version_zero(root):
    assert root.parent is None
    assert root.is_root
    assert root.depth == 0
    assert root.version == 0
    assert root.pending_child is False
    assert root.node_type_map == {}
    assert root.var_type_map == {}
    assert root.error_log == []


def test_record_type_then_lookup(root):
    node = IntLiteral(1)

    assert root.record_type(node, INTEGER) is INTEGER
    assert root.has_type(node)
    assert root.type_of(node) == INTEGER


def test_record_type_overwrites_local_binding(root):
    node = VarRef("x")
    root.record_type(node, INTEGER)
    root.record_type(node, STRING)

    assert root.type_of(node) == STRING
    assert len(root.node_type_map) == 1


def test_structurally_equal_nodes_are_distinct_keys(root):
    first = x_plus_one(1)
    second = x_plus_one(2)
    assert first == second

    root.record_type(first, INTEGER)

    assert root.has_type(first)
    assert not root.has_type(second)

    root.record_type(second, STRING)
    assert root.type_of(first) == INTEGER
    assert root.type_of(second) == STRING


def test_type_of_unknown_node_raises(root):
    node = VarRef("missing")

    with pytest.raises(NodeNotTyped) as exc:
        root.type_of(node)

    assert exc.value.node is node
    assert "[ICE-0010]" in exc.value.format()


def test_type_of_unknown_node_raises_through_ancestors(root):
    child = root.spawn_child()
    grandchild = child.spawn_child()

    with pytest.raises(NodeNotTyped):
        grandchild.type_of(IntLiteral(7))


def test_child_sees_parent_binding(root):
    node = IntLiteral(1)
    root.record_type(node, INTEGER)
    child = root.spawn_child()

    assert child.type_of(node) == root.type_of(node)
    # Lookup walks outwards, has_type does not
    assert not child.has_type(node)


def test_lookup_walks_the_whole_chain(root):
    node = IntLiteral(1)
    root.record_type(node, INTEGER)
    leaf = root.spawn_child().spawn_child().spawn_child()

    assert leaf.depth == 3
    assert leaf.type_of(node) == INTEGER


def test_child_binding_does_not_touch_parent(root):
    node = VarRef("x")
    root.record_type(node, union_of(INTEGER, STRING))
    child = root.spawn_child()

    child.record_type(node, INTEGER)

    assert child.type_of(node) == INTEGER
    assert root.type_of(node) == union_of(INTEGER, STRING)


def test_has_type_is_side_effect_free(root):
    node = IntLiteral(1)
    root.record_type(node, INTEGER)
    root.spawn_child()
    version = root.version

    for _ in range(3):
        assert root.has_type(node)
        assert not root.has_type(IntLiteral(1))

    assert root.version == version
    assert root.pending_child is True


def test_each_typing_preserves_recording_order(root):
    a, b, c = IntLiteral(1), IntLiteral(2), IntLiteral(3)
    root.record_type(a, INTEGER)
    root.record_type(b, STRING)
    root.record_type(c, INTEGER)
    root.record_type(a, STRING)

    pairs = list(root.each_typing())

    assert len(pairs) == 3
    assert all(node is expected for (node, _), expected in zip(pairs, (a, b, c)))
    assert [t for _, t in pairs] == [STRING, STRING, INTEGER]


def test_each_typing_is_restartable(root):
    root.record_type(IntLiteral(1), INTEGER)

    assert list(root.each_typing()) == list(root.each_typing())


def test_each_typing_only_covers_local_bindings(root):
    root.record_type(IntLiteral(1), INTEGER)
    child = root.spawn_child()
    local = IntLiteral(2)
    child.record_type(local, INTEGER)

    assert [node for node, _ in child.each_typing()] == [local]


# ============================================================================
# Variable namespace
# ============================================================================


def test_var_types_live_in_their_own_namespace(root):
    root.record_var_type("x", INTEGER)

    assert root.has_var_type("x")
    assert root.var_type_of("x") == INTEGER
    assert root.node_type_map == {}
    assert not root.has_type(VarRef("x"))


def test_var_type_of_walks_ancestors(root):
    root.record_var_type("x", INTEGER)
    child = root.spawn_child()

    assert child.var_type_of("x") == INTEGER
    assert not child.has_var_type("x")


def test_var_type_of_unknown_raises(root):
    with pytest.raises(VariableNotTyped) as exc:
        root.spawn_child().var_type_of("y")

    assert exc.value.var == "y"


def test_create_root_with_custom_summarizer_is_inherited():
    def summarize(node):
        return "node"

    root = TypingContext.create_root(summarizer=summarize)

    assert root.spawn_child().summarizer is summarize
