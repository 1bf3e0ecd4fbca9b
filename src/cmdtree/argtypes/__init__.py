# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Argument type registry and the default argument type families."""

from cmdtree.argtypes.game import GAME_TYPES
from cmdtree.argtypes.primitive import PRIMITIVE_TYPES
from cmdtree.argtypes.registry import (
    ArgumentTypeError,
    ArgumentTypeParser,
    ArgumentTypeRegistry,
    RegistryBuilder,
    UnknownArgumentTypeError,
)

__all__ = [
    "ArgumentTypeError",
    "ArgumentTypeParser",
    "ArgumentTypeRegistry",
    "GAME_TYPES",
    "PRIMITIVE_TYPES",
    "RegistryBuilder",
    "UnknownArgumentTypeError",
]
