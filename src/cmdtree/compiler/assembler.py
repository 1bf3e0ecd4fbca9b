# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of parsed descriptors into an immutable command tree.

Checks that need the whole tree (unique names among siblings) are done here
rather than in the parser.
"""

from __future__ import annotations

from cmdtree.compiler.descriptors import ArgumentDescriptor, LiteralDescriptor, NodeDescriptor
from cmdtree.compiler.errors import DuplicateSiblingError
from cmdtree.model.nodes import ArgumentNode, CommandNode, LiteralNode

# ###############
# Public Interface
# ###############


def assemble(root: LiteralDescriptor) -> LiteralNode:
    """Convert a descriptor tree into a command tree.

    Literal and argument names share one namespace per parent, so a literal
    and an argument with the same name under one node also collide.

    Args:
        root: The root descriptor produced by the parser.

    Returns:
        The root literal node of the immutable command tree.

    Raises:
        DuplicateSiblingError: If two children of one node have the same name.
            The error points at the second declaration.
    """
    order = _preorder(root)
    # Children follow their parent in pre-order, so building in reverse
    # finds every child already built.
    built: dict[int, CommandNode] = {}
    for descriptor in reversed(order):
        children = tuple(built.pop(id(child)) for child in descriptor.children)
        built[id(descriptor)] = _build(descriptor, children)
    node = built[id(root)]
    assert isinstance(node, LiteralNode)
    return node


# ################
# Implementation
# ################


def _display_name(descriptor: NodeDescriptor) -> str:
    """Render a descriptor name the way it appears in a command path."""
    if isinstance(descriptor, ArgumentDescriptor):
        return f"<{descriptor.name}>"
    return descriptor.name


def _check_sibling_names(descriptor: NodeDescriptor, path: tuple[str, ...]) -> None:
    """Raise DuplicateSiblingError for the first repeated child name."""
    seen: set[str] = set()
    for child in descriptor.children:
        if child.name in seen:
            raise DuplicateSiblingError(" ".join(path), child.name, child.line, child.column)
        seen.add(child.name)


def _preorder(root: NodeDescriptor) -> list[NodeDescriptor]:
    """List all descriptors depth-first, checking sibling names on the way."""
    order: list[NodeDescriptor] = []
    stack: list[tuple[NodeDescriptor, tuple[str, ...]]] = [(root, ())]
    while stack:
        descriptor, parent_path = stack.pop()
        path = (*parent_path, _display_name(descriptor))
        _check_sibling_names(descriptor, path)
        order.append(descriptor)
        stack.extend((child, path) for child in reversed(descriptor.children))
    return order


def _build(descriptor: NodeDescriptor, children: tuple[CommandNode, ...]) -> CommandNode:
    """Build the node for *descriptor* from its already built children."""
    if isinstance(descriptor, LiteralDescriptor):
        return LiteralNode(name=descriptor.name, children=children)
    return ArgumentNode(
        name=descriptor.name,
        type_spec=descriptor.type_spec,
        type=descriptor.argument_type,
        children=children,
    )
