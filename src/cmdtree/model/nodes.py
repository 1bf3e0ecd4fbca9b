# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Immutable command tree nodes.

A command tree is rooted at a single literal node. Every other node is owned
by exactly one parent and children are kept in declaration order.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from cmdtree.model.types import ArgumentType

# ###############
# Public Interface
# ###############


class _Node(BaseModel):
    """Behaviour shared by literal and argument nodes."""

    model_config = ConfigDict(frozen=True)

    name: str
    children: tuple[CommandNode, ...] = ()

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return not self.children

    def get_child(self, name: str) -> CommandNode | None:
        """Return the direct child called *name*, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def walk(self) -> Iterator[_Node]:
        """Yield this node and all of its descendants in depth-first pre-order."""
        stack: list[_Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


class LiteralNode(_Node):
    """A node matched by an exact keyword."""

    kind: Literal["literal"] = "literal"


class ArgumentNode(_Node):
    """A node matched by a typed value.

    Attributes:
        type_spec: The type specifier text as written in the command file.
        type: The argument type resolved from ``type_spec``.
    """

    kind: Literal["argument"] = "argument"
    type_spec: str
    type: ArgumentType


# Either kind of node; `kind` is the discriminator for deserialization.
CommandNode = Annotated[LiteralNode | ArgumentNode, _Field(discriminator="kind")]

# The value produced by one successful parse.
CommandTree = LiteralNode


# Resolve forward references in self-referential models.
LiteralNode.model_rebuild()
ArgumentNode.model_rebuild()
