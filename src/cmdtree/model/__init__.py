# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command tree model: literal and argument nodes and their argument types."""

from cmdtree.model.nodes import ArgumentNode, CommandNode, CommandTree, LiteralNode
from cmdtree.model.types import ArgumentType

__all__ = [
    "ArgumentType",
    "ArgumentNode",
    "CommandNode",
    "CommandTree",
    "LiteralNode",
]
