# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Intermediate node descriptors built by the parser and consumed by the assembler."""

from __future__ import annotations

from dataclasses import dataclass, field

from cmdtree.model.types import ArgumentType

# ###############
# Public Interface
# ###############


@dataclass
class LiteralDescriptor:
    """A literal node as declared in the source."""

    name: str
    line: int
    column: int
    children: list[NodeDescriptor] = field(default_factory=list)


@dataclass
class ArgumentDescriptor:
    """An argument node as declared in the source, with its type already resolved.

    Attributes:
        type_spec: The raw type specifier text.
        argument_type: The result of resolving ``type_spec`` through the registry.
    """

    name: str
    type_spec: str
    argument_type: ArgumentType
    line: int
    column: int
    children: list[NodeDescriptor] = field(default_factory=list)


NodeDescriptor = LiteralDescriptor | ArgumentDescriptor
