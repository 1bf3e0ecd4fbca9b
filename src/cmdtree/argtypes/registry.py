# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of argument type parsers.

Entries are accumulated in a :class:`RegistryBuilder` and frozen into an
:class:`ArgumentTypeRegistry` snapshot. A snapshot never changes after it is
built, so one snapshot can be shared by any number of concurrent parses.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from cmdtree.model.types import ArgumentType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

# Turns the configuration part of a type specifier into an ArgumentType.
ArgumentTypeParser = Callable[[str], ArgumentType]


class ArgumentTypeError(ValueError):
    """Raised by an argument type parser when a type specification is invalid."""


class UnknownArgumentTypeError(LookupError):
    """Raised when a type name has no registered parser.

    Attributes:
        type_name: The name that was looked up.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unknown argument type {type_name!r}")
        self.type_name = type_name


class ArgumentTypeRegistry:
    """An immutable snapshot of type-name to parser mappings."""

    def __init__(self, parsers: Mapping[str, ArgumentTypeParser]) -> None:
        self._parsers = MappingProxyType(dict(parsers))

    def resolve(self, name: str, spec: str = "") -> ArgumentType:
        """Parse *spec* with the parser registered under *name*.

        Args:
            name: The argument type name.
            spec: The remaining type specification text, possibly empty.

        Returns:
            The ArgumentType produced by the registered parser.

        Raises:
            UnknownArgumentTypeError: If no parser is registered for *name*.
            ArgumentTypeError: If the parser rejects *spec*.
        """
        try:
            parser = self._parsers[name]
        except KeyError:
            raise UnknownArgumentTypeError(name) from None
        return parser(spec)

    def names(self) -> list[str]:
        """Return the registered type names in registration order."""
        return list(self._parsers)

    def __contains__(self, name: object) -> bool:
        return name in self._parsers

    def __iter__(self) -> Iterator[str]:
        return iter(self._parsers)

    def __len__(self) -> int:
        return len(self._parsers)


class RegistryBuilder:
    """Accumulates argument type parsers before freezing them into a registry."""

    def __init__(self) -> None:
        self._parsers: dict[str, ArgumentTypeParser] = {}

    def register(self, name: str, parser: ArgumentTypeParser) -> RegistryBuilder:
        """Register *parser* under *name*, replacing any earlier registration."""
        if not name or any(ch.isspace() for ch in name):
            raise ValueError(f"Invalid argument type name: {name!r}")
        if name in self._parsers:
            logger.debug("Argument type %r overrides an earlier registration", name)
        self._parsers[name] = parser
        return self

    def register_all(self, parsers: Mapping[str, ArgumentTypeParser]) -> RegistryBuilder:
        """Register every entry of *parsers* in mapping order."""
        for name, parser in parsers.items():
            self.register(name, parser)
        return self

    def build(self) -> ArgumentTypeRegistry:
        """Freeze the current entries into an immutable registry snapshot."""
        logger.debug("Building argument type registry with %d type(s)", len(self._parsers))
        return ArgumentTypeRegistry(self._parsers)
