# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Game-domain argument types: entity selectors, positions, items, and the like.

Most types in this family take no configuration. The exceptions are::

    time [min]                     minimum number of ticks, default 0
    score_holder [single|multiple] default single
"""

from __future__ import annotations

from cmdtree.argtypes.registry import ArgumentTypeError, ArgumentTypeParser
from cmdtree.model.types import ArgumentType

# ###############
# Public Interface
# ###############

SIMPLE_TYPE_NAMES: tuple[str, ...] = (
    "player",
    "players",
    "entity",
    "entities",
    "game_profile",
    "block_pos",
    "column_pos",
    "vec3",
    "vec2",
    "rotation",
    "block",
    "block_predicate",
    "item",
    "item_predicate",
    "color",
    "component",
    "message",
    "nbt",
    "uuid",
    "dimension",
    "objective",
    "team",
    "resource_location",
)


def parse_time(spec: str) -> ArgumentType:
    """Parse ``time [min]`` where *min* is a non-negative tick count."""
    words = spec.split()
    if len(words) > 1:
        raise ArgumentTypeError(f"Type 'time' takes at most one parameter, got {spec.strip()!r}")
    minimum = 0
    if words:
        try:
            minimum = int(words[0])
        except ValueError:
            raise ArgumentTypeError(f"Invalid minimum {words[0]!r} for type 'time'") from None
        if minimum < 0:
            raise ArgumentTypeError(f"Minimum for type 'time' must not be negative, got {minimum}")
    return ArgumentType(name="time", properties={"min": minimum})


def parse_score_holder(spec: str) -> ArgumentType:
    """Parse ``score_holder [single|multiple]``."""
    words = spec.split()
    if len(words) > 1 or (words and words[0] not in ("single", "multiple")):
        raise ArgumentTypeError(f"Expected 'single' or 'multiple' for type 'score_holder', got {spec.strip()!r}")
    multiple = bool(words) and words[0] == "multiple"
    return ArgumentType(name="score_holder", properties={"multiple": multiple})


# ################
# Implementation
# ################


def _simple(name: str) -> ArgumentTypeParser:
    """Build a parser for a type that accepts no configuration."""

    def parse(spec: str) -> ArgumentType:
        if spec.strip():
            raise ArgumentTypeError(f"Type {name!r} takes no parameters, got {spec.strip()!r}")
        return ArgumentType(name=name)

    return parse


# The family as registered by the default reader.
GAME_TYPES: dict[str, ArgumentTypeParser] = {name: _simple(name) for name in SIMPLE_TYPE_NAMES}
GAME_TYPES["time"] = parse_time
GAME_TYPES["score_holder"] = parse_score_holder
