# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for command files.

Converts raw source text into a flat sequence of tokens for the parser.
Nesting is expressed by indentation and reported as INDENT/DEDENT tokens.
"""

import enum
from dataclasses import dataclass

from cmdtree.compiler.errors import LexerError

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the scanner."""

    # Scope markers
    INDENT = "INDENT"
    DEDENT = "DEDENT"

    # Nodes
    LITERAL_NAME = "LITERAL_NAME"
    ARGUMENT_OPEN = "<"
    ARGUMENT_NAME = "ARGUMENT_NAME"
    TYPE_SPEC = "TYPE_SPEC"
    ARGUMENT_CLOSE = ">"

    # Layout
    NEWLINE = "NEWLINE"
    COMMENT = "COMMENT"

    # End of file
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token (comment text without the marker for COMMENT).
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


COMMENT_MARKER = "#"


def tokenize(source: str, *, keep_comments: bool = False) -> list[Token]:
    """Tokenize command file source text.

    Blank lines and comment lines never affect indentation. Every node line
    ends with a NEWLINE token, and all indentation levels still open at the end
    of the input are closed with DEDENT tokens before the final EOF.

    Args:
        source: The full text of a command file.
        keep_comments: Emit COMMENT tokens instead of dropping comments.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On malformed node lines or inconsistent indentation.
    """
    return _Scanner(source, keep_comments).tokenize()


# ################
# Implementation
# ################

_NAME_STOP = "<>#"


class _Scanner:
    """Internal line-oriented scanner state."""

    def __init__(self, source: str, keep_comments: bool) -> None:
        source = source.removeprefix("\ufeff")
        self._lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        self._keep_comments = keep_comments
        self._tokens: list[Token] = []
        # Widths of the currently open indentation levels; the bottom is column 0.
        self._indents: list[int] = [0]
        self._unit = 0
        self._indent_char = ""

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        for number, text in enumerate(self._lines, start=1):
            self._scan_line(text, number)
        eof_line = len(self._lines)
        eof_column = len(self._lines[-1]) + 1
        while len(self._indents) > 1:
            self._indents.pop()
            self._emit(TokenType.DEDENT, "", eof_line, eof_column)
        self._emit(TokenType.EOF, "", eof_line, eof_column)
        return self._tokens

    def _emit(self, token_type: TokenType, value: str, line: int, column: int) -> None:
        self._tokens.append(Token(token_type, value, line, column))

    # ------------------------------------------------------------------
    # Lines and indentation
    # ------------------------------------------------------------------

    def _scan_line(self, text: str, line: int) -> None:
        """Scan one physical line."""
        body = text.lstrip(" \t")
        if not body:
            return
        leading = text[: len(text) - len(body)]
        if body.startswith(COMMENT_MARKER):
            if self._keep_comments:
                self._emit(TokenType.COMMENT, body[1:].strip(), line, len(leading) + 1)
            return
        self._scan_indentation(leading, line)
        start = len(leading)
        if body[0] == "<":
            pos = self._scan_argument(text, start, line)
        else:
            pos = self._scan_literal(text, start, line)
        self._finish_line(text, pos, line)

    def _scan_indentation(self, leading: str, line: int) -> None:
        """Compare the indentation of a node line against the open levels."""
        if leading:
            if " " in leading and "\t" in leading:
                raise LexerError("Mixed tabs and spaces in indentation", line, 1)
            if self._indent_char and leading[0] != self._indent_char:
                raise LexerError("Inconsistent use of tabs and spaces for indentation", line, 1)
            self._indent_char = leading[0]

        width = len(leading)
        current = self._indents[-1]
        if width > current:
            if not self._unit:
                self._unit = width
            if width != current + self._unit:
                raise LexerError(
                    f"Indentation must increase by exactly {self._unit} character(s), got {width - current}",
                    line,
                    width + 1,
                )
            self._indents.append(width)
            self._emit(TokenType.INDENT, leading, line, 1)
        elif width < current:
            while self._indents[-1] > width:
                self._indents.pop()
                self._emit(TokenType.DEDENT, "", line, width + 1)
            if self._indents[-1] != width:
                raise LexerError("Dedent does not match any outer indentation level", line, width + 1)

    def _finish_line(self, text: str, pos: int, line: int) -> None:
        """Consume the rest of a node line: whitespace and an optional trailing comment."""
        while pos < len(text) and text[pos] in " \t":
            pos += 1
        if pos < len(text):
            if text[pos] != COMMENT_MARKER:
                raise LexerError(f"Unexpected text after node: {text[pos:].rstrip()!r}", line, pos + 1)
            if self._keep_comments:
                self._emit(TokenType.COMMENT, text[pos + 1 :].strip(), line, pos + 1)
        self._emit(TokenType.NEWLINE, "", line, len(text) + 1)

    # ------------------------------------------------------------------
    # Node scanners
    # ------------------------------------------------------------------

    def _scan_literal(self, text: str, start: int, line: int) -> int:
        """Scan a literal name and return the position after it."""
        pos = start
        while pos < len(text) and not text[pos].isspace() and text[pos] not in _NAME_STOP:
            pos += 1
        if pos < len(text) and (pos == start or text[pos] in "<>"):
            raise LexerError(f"Unexpected character {text[pos]!r} in literal name", line, pos + 1)
        self._emit(TokenType.LITERAL_NAME, text[start:pos], line, start + 1)
        return pos

    def _scan_argument(self, text: str, start: int, line: int) -> int:
        """Scan ``<name>:spec`` or ``<name:spec>`` and return the position after it."""
        self._emit(TokenType.ARGUMENT_OPEN, "<", line, start + 1)
        pos = start + 1
        while pos < len(text) and not text[pos].isspace() and text[pos] not in ">:#<":
            pos += 1
        name = text[start + 1 : pos]
        if pos >= len(text) or text[pos] == COMMENT_MARKER:
            raise LexerError("Unterminated argument declaration", line, start + 1)
        if text[pos].isspace() or text[pos] == "<":
            raise LexerError(f"Unexpected {text[pos]!r} in argument name", line, pos + 1)
        if not name:
            raise LexerError("Missing argument name", line, pos + 1)
        self._emit(TokenType.ARGUMENT_NAME, name, line, start + 2)

        if text[pos] == ">":
            close_column = pos + 1
            pos += 1
            if pos >= len(text) or text[pos] != ":":
                raise LexerError(f"Expected ':' and a type specifier after argument {name!r}", line, pos + 1)
            end = text.find(COMMENT_MARKER, pos + 1)
            if end == -1:
                end = len(text)
            self._scan_type_spec(text, pos + 1, end, name, line)
            self._emit(TokenType.ARGUMENT_CLOSE, ">", line, close_column)
            return end

        end = text.find(">", pos + 1)
        if end == -1:
            raise LexerError("Unterminated argument declaration", line, start + 1)
        self._scan_type_spec(text, pos + 1, end, name, line)
        self._emit(TokenType.ARGUMENT_CLOSE, ">", line, end + 1)
        return end + 1

    def _scan_type_spec(self, text: str, start: int, end: int, name: str, line: int) -> None:
        """Emit the raw type specifier found between *start* and *end*."""
        raw = text[start:end]
        spec = raw.strip()
        if not spec:
            raise LexerError(f"Missing type specifier for argument {name!r}", line, start + 1)
        for offset, ch in enumerate(raw):
            if ch in _NAME_STOP:
                raise LexerError(f"Unexpected {ch!r} in type specifier", line, start + offset + 1)
        column = start + (len(raw) - len(raw.lstrip())) + 1
        self._emit(TokenType.TYPE_SPEC, spec, line, column)
