# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic argument types: booleans, bounded numbers, and strings.

Type specifiers accepted by this family::

    bool
    integer [min [max]]      (also long, float, double)
    string [word|phrase|greedy]
"""

from __future__ import annotations

from collections.abc import Callable

from cmdtree.argtypes.registry import ArgumentTypeError, ArgumentTypeParser
from cmdtree.model.types import ArgumentType

# ###############
# Public Interface
# ###############

STRING_MODES: tuple[str, ...] = ("word", "phrase", "greedy")
DEFAULT_STRING_MODE = "phrase"


def parse_bool(spec: str) -> ArgumentType:
    """Parse a ``bool`` specification; no configuration is accepted."""
    if spec.strip():
        raise ArgumentTypeError(f"Type 'bool' takes no parameters, got {spec.strip()!r}")
    return ArgumentType(name="bool")


def parse_string(spec: str) -> ArgumentType:
    """Parse a ``string`` specification with an optional mode."""
    words = spec.split()
    if len(words) > 1:
        raise ArgumentTypeError(f"Type 'string' takes at most one parameter, got {spec.strip()!r}")
    mode = words[0] if words else DEFAULT_STRING_MODE
    if mode not in STRING_MODES:
        expected = ", ".join(STRING_MODES)
        raise ArgumentTypeError(f"Unknown string mode {mode!r}, expected one of: {expected}")
    return ArgumentType(name="string", properties={"mode": mode})


# ################
# Implementation
# ################


def _bounded(name: str, convert: Callable[[str], int | float]) -> ArgumentTypeParser:
    """Build a parser for a numeric type with optional ``min [max]`` bounds."""

    def parse(spec: str) -> ArgumentType:
        words = spec.split()
        if len(words) > 2:
            raise ArgumentTypeError(f"Type {name!r} takes at most two bounds, got {spec.strip()!r}")
        bounds: list[int | float] = []
        for word in words:
            try:
                bounds.append(convert(word))
            except ValueError:
                raise ArgumentTypeError(f"Invalid bound {word!r} for type {name!r}") from None
        properties: dict[str, int | float] = {}
        if bounds:
            properties["min"] = bounds[0]
        if len(bounds) == 2:
            if bounds[1] < bounds[0]:
                raise ArgumentTypeError(f"Maximum {bounds[1]} is less than minimum {bounds[0]} for type {name!r}")
            properties["max"] = bounds[1]
        return ArgumentType(name=name, properties=properties)

    return parse


# The family as registered by the default reader.
PRIMITIVE_TYPES: dict[str, ArgumentTypeParser] = {
    "bool": parse_bool,
    "integer": _bounded("integer", int),
    "long": _bounded("long", int),
    "float": _bounded("float", float),
    "double": _bounded("double", float),
    "string": parse_string,
}
