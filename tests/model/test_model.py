# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct and navigate a command tree."""

import pytest
from pydantic import TypeAdapter, ValidationError

from cmdtree.model import ArgumentNode, ArgumentType, CommandNode, LiteralNode


def _give() -> LiteralNode:
    item = ArgumentNode(name="item", type_spec="item", type=ArgumentType(name="item"))
    target = ArgumentNode(name="target", type_spec="player", type=ArgumentType(name="player"), children=(item,))
    return LiteralNode(name="give", children=(target, LiteralNode(name="help")))


def test_leaf_literal() -> None:
    """A literal without children is a leaf."""
    node = LiteralNode(name="help")
    assert node.kind == "literal"
    assert node.children == ()
    assert node.is_leaf


def test_argument_node_carries_type() -> None:
    """An argument node keeps both the raw type specifier and the resolved type."""
    node = ArgumentNode(
        name="count",
        type_spec="integer 1 64",
        type=ArgumentType(name="integer", properties={"min": 1, "max": 64}),
    )
    assert node.kind == "argument"
    assert node.type.properties["max"] == 64


def test_get_child() -> None:
    """Children can be looked up by name."""
    tree = _give()
    target = tree.get_child("target")
    assert isinstance(target, ArgumentNode)
    assert target.get_child("item") is not None
    assert tree.get_child("missing") is None


def test_walk_is_depth_first_preorder() -> None:
    """walk() yields parents before children and siblings in declaration order."""
    assert [node.name for node in _give().walk()] == ["give", "target", "item", "help"]


def test_nodes_are_frozen() -> None:
    """Nodes cannot be modified after construction."""
    tree = _give()
    with pytest.raises(ValidationError):
        tree.name = "take"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        tree.children[0].type = ArgumentType(name="entity")  # type: ignore[misc]


def test_argument_type_properties_are_read_only() -> None:
    """Properties are copied on construction and cannot be changed afterwards."""
    source = {"min": 1}
    arg_type = ArgumentType(name="integer", properties=source)
    source["min"] = 5
    assert arg_type.properties == {"min": 1}
    with pytest.raises(TypeError):
        arg_type.properties["min"] = 2  # type: ignore[index]
    with pytest.raises(TypeError):
        ArgumentType(name="bool").properties["strict"] = True  # type: ignore[index]


def test_argument_type_properties_serialize_as_mapping() -> None:
    """Read-only properties still dump to plain dictionaries and JSON objects."""
    arg_type = ArgumentType(name="integer", properties={"min": 1, "max": 64})
    assert arg_type.model_dump() == {"name": "integer", "properties": {"min": 1, "max": 64}}
    assert ArgumentType.model_validate_json(arg_type.model_dump_json()) == arg_type


def test_json_round_trip_restores_node_kinds() -> None:
    """The kind discriminator restores literal and argument nodes from JSON."""
    tree = _give()
    restored = LiteralNode.model_validate_json(tree.model_dump_json())
    assert restored == tree
    assert isinstance(restored.children[0], ArgumentNode)
    assert isinstance(restored.children[1], LiteralNode)


def test_command_node_union_validates_by_kind() -> None:
    """A plain mapping is turned into the node class named by its kind."""
    node = TypeAdapter(CommandNode).validate_python(
        {"kind": "argument", "name": "x", "type_spec": "bool", "type": {"name": "bool"}}
    )
    assert isinstance(node, ArgumentNode)
