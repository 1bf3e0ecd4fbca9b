# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for writing command trees back to command file text."""

from pathlib import Path

import pytest

from cmdtree.compiler import dump, dump_path, parse_path, parse_string
from cmdtree.model import ArgumentNode, ArgumentType, LiteralNode

# ###############
# Test Helpers
# ###############


def _shape(node: LiteralNode | ArgumentNode) -> tuple:
    """Reduce a tree to node kinds, names, type specifiers and child order."""
    spec = node.type_spec if isinstance(node, ArgumentNode) else None
    return (node.kind, node.name, spec, tuple(_shape(child) for child in node.children))


def _arg(name: str, type_spec: str, *children: LiteralNode | ArgumentNode) -> ArgumentNode:
    type_name = type_spec.split()[0]
    return ArgumentNode(name=name, type_spec=type_spec, type=ArgumentType(name=type_name), children=children)


_TIME = LiteralNode(
    name="time",
    children=(
        LiteralNode(name="set", children=(LiteralNode(name="day"), LiteralNode(name="night"), _arg("time", "time"))),
        LiteralNode(name="add", children=(_arg("time", "time 1"),)),
        LiteralNode(name="query", children=(LiteralNode(name="daytime"), LiteralNode(name="gametime"))),
    ),
)


# ###############
# Output Format
# ###############


class TestDump:
    def test_single_literal(self) -> None:
        assert dump(LiteralNode(name="help")) == "help\n"

    def test_nested_tree(self) -> None:
        tree = LiteralNode(name="give", children=(_arg("target", "player", _arg("item", "string word")),))
        assert dump(tree) == "give\n    <target>:player\n        <item>:string word\n"

    def test_custom_indent(self) -> None:
        tree = LiteralNode(name="a", children=(LiteralNode(name="b", children=(LiteralNode(name="c"),)),))
        assert dump(tree, indent=2) == "a\n  b\n    c\n"

    def test_invalid_indent(self) -> None:
        with pytest.raises(ValueError):
            dump(LiteralNode(name="a"), indent=0)

    @pytest.mark.parametrize("name", ["two words", "a<b", "#hash", ""])
    def test_unwritable_literal_name(self, name: str) -> None:
        with pytest.raises(ValueError):
            dump(LiteralNode(name="root", children=(LiteralNode(name=name),)))

    def test_unwritable_argument_name(self) -> None:
        with pytest.raises(ValueError):
            dump(LiteralNode(name="root", children=(_arg("a:b", "bool"),)))

    @pytest.mark.parametrize("type_spec", ["bool # no", "integer\r1", "integer\n1", "a<b", "   "])
    def test_unwritable_type_spec(self, type_spec: str) -> None:
        node = ArgumentNode(name="x", type_spec=type_spec, type=ArgumentType(name="bool"))
        with pytest.raises(ValueError):
            dump(LiteralNode(name="root", children=(node,)))

    def test_namespaced_literal_is_allowed(self) -> None:
        assert dump(LiteralNode(name="minecraft:give")) == "minecraft:give\n"


# ###############
# Round Trip
# ###############


class TestRoundTrip:
    def test_hand_built_tree_keeps_shape(self) -> None:
        reparsed = parse_string(dump(_TIME))
        assert _shape(reparsed) == _shape(_TIME)

    def test_parsed_tree_is_reproduced_exactly(self) -> None:
        source = """\
# spawn an entity
summon
    <entity>:entity
        <pos>:block_pos
            <nbt:nbt>
    cow
"""
        tree = parse_string(source)
        assert parse_string(dump(tree)) == tree

    def test_dump_path(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "time.cmd"
        dump_path(_TIME, path)
        assert path.read_text(encoding="utf-8") == dump(_TIME)
        assert _shape(parse_path(path)) == _shape(_TIME)
