# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for command files: scanning, parsing, and tree assembly."""

from cmdtree.compiler.assembler import assemble
from cmdtree.compiler.errors import (
    DuplicateSiblingError,
    FormatError,
    InvalidTypeError,
    LexerError,
    ParseError,
    ReaderIOError,
    UnknownTypeError,
)
from cmdtree.compiler.reader import (
    DEFAULT_READER,
    CommandFileReader,
    ReaderBuilder,
    parse,
    parse_bytes,
    parse_path,
    parse_string,
)
from cmdtree.compiler.scanner import Token, TokenType, tokenize
from cmdtree.compiler.writer import dump, dump_path

__all__ = [
    "CommandFileReader",
    "DEFAULT_READER",
    "DuplicateSiblingError",
    "FormatError",
    "InvalidTypeError",
    "LexerError",
    "ParseError",
    "ReaderBuilder",
    "ReaderIOError",
    "Token",
    "TokenType",
    "UnknownTypeError",
    "assemble",
    "dump",
    "dump_path",
    "parse",
    "parse_bytes",
    "parse_path",
    "parse_string",
    "tokenize",
]
