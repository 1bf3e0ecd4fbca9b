# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Public entry point for reading command files into command trees.

A :class:`CommandFileReader` owns a frozen argument-type registry and runs
the scanner, parser and assembler over one input at a time. Readers hold no
state between calls, so a single reader may be used from several threads.

Typical use::

    reader = (
        CommandFileReader.builder()
        .with_default_argument_types()
        .with_argument_types({"color": parse_color})
        .build()
    )
    tree = reader.parse_path("commands/give.cmd")
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Mapping
from typing import BinaryIO, TextIO

from cmdtree.argtypes.game import GAME_TYPES
from cmdtree.argtypes.primitive import PRIMITIVE_TYPES
from cmdtree.argtypes.registry import ArgumentTypeParser, ArgumentTypeRegistry, RegistryBuilder
from cmdtree.compiler.assembler import assemble
from cmdtree.compiler.errors import ReaderIOError
from cmdtree.compiler.parser import parse as parse_descriptors
from cmdtree.model.nodes import LiteralNode

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CommandFileReader:
    """Reads command files using a fixed set of argument types."""

    def __init__(self, registry: ArgumentTypeRegistry) -> None:
        self._registry = registry

    @staticmethod
    def builder() -> ReaderBuilder:
        """Return a builder with no argument types registered."""
        return ReaderBuilder()

    @property
    def registry(self) -> ArgumentTypeRegistry:
        """The argument-type registry snapshot used by this reader."""
        return self._registry

    def parse(self, stream: TextIO) -> LiteralNode:
        """Read a command file from a text stream.

        The stream is read to the end but not closed.

        Args:
            stream: A readable text stream positioned at the start of the file.

        Returns:
            The root literal node of the command tree.

        Raises:
            ReaderIOError: If the stream cannot be read or decoded.
            FormatError: If the content is not a valid command file.
        """
        try:
            source = stream.read()
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            raise ReaderIOError(f"Cannot read command file: {exc}") from exc
        root = assemble(parse_descriptors(source, self._registry))
        logger.debug("Parsed command tree %r with %d node(s)", root.name, sum(1 for _ in root.walk()))
        return root

    def parse_string(self, source: str) -> LiteralNode:
        """Read a command file from a string."""
        return self.parse(io.StringIO(source))

    def parse_bytes(self, data: bytes | BinaryIO, encoding: str = "utf-8") -> LiteralNode:
        """Read a command file from bytes or a binary stream.

        A caller-supplied binary stream is left open.
        """
        stream = io.BytesIO(data) if isinstance(data, bytes | bytearray) else data
        try:
            wrapper = io.TextIOWrapper(stream, encoding=encoding)
        except (OSError, ValueError) as exc:
            raise ReaderIOError(f"Cannot read command file: {exc}") from exc
        try:
            return self.parse(wrapper)
        finally:
            if not stream.closed:
                wrapper.detach()

    def parse_path(self, path: str | os.PathLike[str]) -> LiteralNode:
        """Read a command file from the filesystem.

        The file is always closed before returning, including on errors.
        """
        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise ReaderIOError(f"Cannot open command file {os.fspath(path)!r}: {exc}") from exc
        with handle:
            return self.parse(handle)


class ReaderBuilder:
    """Collects argument types before building an immutable reader.

    Registrations are applied in call order; a later registration of a type
    name replaces an earlier one.
    """

    def __init__(self) -> None:
        self._registry = RegistryBuilder()

    def with_argument_type(self, name: str, parser: ArgumentTypeParser) -> ReaderBuilder:
        """Register a single argument type parser."""
        self._registry.register(name, parser)
        return self

    def with_argument_types(self, parsers: Mapping[str, ArgumentTypeParser]) -> ReaderBuilder:
        """Register a family of argument type parsers."""
        self._registry.register_all(parsers)
        return self

    def with_default_argument_types(self) -> ReaderBuilder:
        """Register the primitive family, then the game family."""
        return self.with_argument_types(PRIMITIVE_TYPES).with_argument_types(GAME_TYPES)

    def build(self) -> CommandFileReader:
        """Freeze the registered argument types into a new reader."""
        return CommandFileReader(self._registry.build())


DEFAULT_READER = ReaderBuilder().with_default_argument_types().build()


def parse(stream: TextIO) -> LiteralNode:
    """Read a command file from a text stream with the default reader."""
    return DEFAULT_READER.parse(stream)


def parse_string(source: str) -> LiteralNode:
    """Read a command file from a string with the default reader."""
    return DEFAULT_READER.parse_string(source)


def parse_bytes(data: bytes | BinaryIO, encoding: str = "utf-8") -> LiteralNode:
    """Read a command file from bytes or a binary stream with the default reader."""
    return DEFAULT_READER.parse_bytes(data, encoding)


def parse_path(path: str | os.PathLike[str]) -> LiteralNode:
    """Read a command file from the filesystem with the default reader."""
    return DEFAULT_READER.parse_path(path)
