# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of command trees back into command file text.

The output uses one node per line, a fixed indentation width, and the
``<name>:type-spec`` argument form. Reading it back yields a tree with the
same node kinds, names, type specifiers and child order.
"""

from __future__ import annotations

from pathlib import Path

from cmdtree.model.nodes import ArgumentNode, LiteralNode

# ###############
# Public Interface
# ###############

DEFAULT_INDENT = 4


def dump(root: LiteralNode, indent: int = DEFAULT_INDENT) -> str:
    """Serialize a command tree to command file text.

    Args:
        root: The root literal of the tree.
        indent: Number of spaces per nesting level.

    Returns:
        The command file text, terminated by a newline.

    Raises:
        ValueError: If *indent* is not positive or a name cannot be written
            without changing its meaning.
    """
    if indent < 1:
        raise ValueError(f"Indentation width must be positive, got {indent}")
    lines: list[str] = []
    stack: list[tuple[LiteralNode | ArgumentNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(" " * (indent * depth) + _format_node(node))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines) + "\n"


def dump_path(root: LiteralNode, path: Path, indent: int = DEFAULT_INDENT) -> None:
    """Write a command tree to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump(root, indent), encoding="utf-8")


# ################
# Implementation
# ################

_FORBIDDEN = frozenset("<>#:")


def _check_name(name: str, allowed: str = "") -> None:
    if not name or any(ch.isspace() or (ch in _FORBIDDEN and ch not in allowed) for ch in name):
        raise ValueError(f"Name {name!r} cannot be written to a command file")


def _format_node(node: LiteralNode | ArgumentNode) -> str:
    """Render a single node line without indentation."""
    if isinstance(node, ArgumentNode):
        _check_name(node.name)
        spec = node.type_spec.strip()
        if not spec or any(ch in "<>#\r\n" for ch in spec):
            raise ValueError(f"Type specifier {node.type_spec!r} of argument {node.name!r} cannot be written")
        return f"<{node.name}>:{spec}"
    _check_name(node.name, allowed=":")
    return node.name
