# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while reading command files.

Every failure is either a :class:`ReaderIOError` (the input could not be read)
or a :class:`FormatError` (the input is not a valid command file).
"""

# ###############
# Public Interface
# ###############


class ReaderIOError(Exception):
    """Raised when the input stream cannot be fully read or decoded."""


class FormatError(Exception):
    """Base class for malformed command file input.

    Attributes:
        message: Description of the problem without the location prefix.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column


class LexerError(FormatError):
    """Raised when a line cannot be split into tokens."""


class ParseError(FormatError):
    """Raised when the token stream does not follow the command file grammar."""


class UnknownTypeError(ParseError):
    """Raised when an argument names a type that has no registered parser.

    Attributes:
        type_name: The unknown type name.
        argument_name: Name of the argument that declared it.
    """

    def __init__(self, type_name: str, argument_name: str, line: int, column: int) -> None:
        super().__init__(
            f"Unknown argument type {type_name!r} for argument {argument_name!r}",
            line,
            column,
        )
        self.type_name = type_name
        self.argument_name = argument_name


class InvalidTypeError(ParseError):
    """Raised when a registered type parser rejects an argument's type specifier.

    Attributes:
        argument_name: Name of the argument whose type was rejected.
    """

    def __init__(self, message: str, argument_name: str, line: int, column: int) -> None:
        super().__init__(f"Invalid type for argument {argument_name!r}: {message}", line, column)
        self.argument_name = argument_name


class DuplicateSiblingError(FormatError):
    """Raised when two children of the same node share a name.

    Attributes:
        parent_path: Space-separated names from the root to the parent node.
        name: The duplicated child name.
    """

    def __init__(self, parent_path: str, name: str, line: int, column: int) -> None:
        super().__init__(f"Duplicate child {name!r} under {parent_path!r}", line, column)
        self.parent_path = parent_path
        self.name = name
