# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for command files.

Converts the token stream produced by the scanner into a tree of node
descriptors. Grammar::

    file      := node EOF
    node      := literal | argument
    literal   := LITERAL_NAME NEWLINE? children?
    argument  := ARGUMENT_OPEN ARGUMENT_NAME TYPE_SPEC ARGUMENT_CLOSE NEWLINE? children?
    children  := INDENT node+ DEDENT

Argument types are resolved through the registry as soon as they are read.
Sibling names are not checked here; see :mod:`cmdtree.compiler.assembler`.
"""

from cmdtree.argtypes.registry import ArgumentTypeRegistry, UnknownArgumentTypeError
from cmdtree.compiler.descriptors import ArgumentDescriptor, LiteralDescriptor, NodeDescriptor
from cmdtree.compiler.errors import InvalidTypeError, ParseError, UnknownTypeError
from cmdtree.compiler.scanner import Token, TokenType, tokenize
from cmdtree.model.types import ArgumentType

# ###############
# Public Interface
# ###############


def parse(source: str, registry: ArgumentTypeRegistry) -> LiteralDescriptor:
    """Parse command file source text into a descriptor tree.

    Args:
        source: The full text of a command file.
        registry: The argument types available to argument declarations.

    Returns:
        The descriptor of the single root literal.

    Raises:
        LexerError: If the source cannot be tokenized.
        ParseError: If the source is syntactically invalid or an argument type
            cannot be resolved.
    """
    tokens = tokenize(source)
    return _Parser(tokens, registry).parse()


def split_type_spec(type_spec: str) -> tuple[str, str]:
    """Split a type specifier into the type name and the remaining specification.

    >>> split_type_spec("integer 0 100")
    ('integer', '0 100')
    """
    parts = type_spec.split(None, 1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


# ################
# Implementation
# ################

_LABELS: dict[TokenType, str] = {
    TokenType.INDENT: "indentation",
    TokenType.DEDENT: "dedent",
    TokenType.LITERAL_NAME: "literal",
    TokenType.ARGUMENT_OPEN: "'<'",
    TokenType.ARGUMENT_NAME: "argument name",
    TokenType.TYPE_SPEC: "type specifier",
    TokenType.ARGUMENT_CLOSE: "'>'",
    TokenType.NEWLINE: "end of line",
    TokenType.COMMENT: "comment",
    TokenType.EOF: "end of file",
}


def _describe(tok: Token) -> str:
    """Describe a token for an error message."""
    if tok.type in (TokenType.LITERAL_NAME, TokenType.ARGUMENT_NAME, TokenType.TYPE_SPEC):
        return repr(tok.value)
    return _LABELS[tok.type]


class _Parser:
    """Parser for command file token streams."""

    def __init__(self, tokens: list[Token], registry: ArgumentTypeRegistry) -> None:
        self._tokens = tokens
        self._registry = registry
        self._pos = 0

    def parse(self) -> LiteralDescriptor:
        """Parse the full token stream and return the root descriptor."""
        tok = self._current()
        if self._at_end():
            raise ParseError("Expected a root command, but the file is empty", tok.line, tok.column)
        if self._check(TokenType.INDENT):
            raise ParseError("Unexpected indentation before the root command", tok.line, tok.column)
        if self._check(TokenType.ARGUMENT_OPEN):
            raise ParseError("The root command must be a literal, not an argument", tok.line, tok.column)
        root = self._parse_tree()
        if not self._at_end():
            extra = self._current()
            raise ParseError(
                f"Only one root command is allowed, got another top-level {_describe(extra)}",
                extra.line,
                extra.column,
            )
        assert isinstance(root, LiteralDescriptor)
        return root

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._current().type == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without consuming)."""
        return self._current().type in types

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        tok = self._current()
        if tok.type not in types:
            expected = " or ".join(_LABELS[t] for t in types)
            raise ParseError(f"Expected {expected}, got {_describe(tok)}", tok.line, tok.column)
        return self._advance()

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def _parse_tree(self) -> NodeDescriptor:
        """Parse one node together with all of its indented descendants.

        Nesting is tracked on an explicit stack of open nodes: INDENT opens
        the node read last, DEDENT closes the innermost open node. Every node
        read while a node is open becomes its child.
        """
        top = self._parse_node()
        last = top
        open_nodes: list[NodeDescriptor] = []
        while True:
            if self._check(TokenType.INDENT):
                self._advance()
                open_nodes.append(last)
            elif open_nodes and self._check(TokenType.DEDENT):
                self._advance()
                open_nodes.pop()
                continue
            if not open_nodes:
                return top
            last = self._parse_node()
            open_nodes[-1].children.append(last)

    def _parse_node(self) -> NodeDescriptor:
        """Parse a single literal or argument line, without its children."""
        tok = self._current()
        node: NodeDescriptor
        if tok.type == TokenType.LITERAL_NAME:
            self._advance()
            node = LiteralDescriptor(name=tok.value, line=tok.line, column=tok.column)
        elif tok.type == TokenType.ARGUMENT_OPEN:
            node = self._parse_argument()
        else:
            raise ParseError(f"Expected a literal or an argument, got {_describe(tok)}", tok.line, tok.column)
        if self._check(TokenType.NEWLINE):
            self._advance()
        return node

    def _parse_argument(self) -> ArgumentDescriptor:
        """Parse: < name type-spec > and resolve the type through the registry."""
        open_tok = self._expect(TokenType.ARGUMENT_OPEN)
        name = self._expect(TokenType.ARGUMENT_NAME).value
        spec_tok = self._expect(TokenType.TYPE_SPEC)
        self._expect(TokenType.ARGUMENT_CLOSE)

        type_name, remaining = split_type_spec(spec_tok.value)
        try:
            argument_type = self._registry.resolve(type_name, remaining)
        except UnknownArgumentTypeError as exc:
            if exc.type_name != type_name:
                raise InvalidTypeError(str(exc), name, spec_tok.line, spec_tok.column) from exc
            raise UnknownTypeError(type_name, name, spec_tok.line, spec_tok.column) from None
        except Exception as exc:
            # Any other failure inside a registered parser is reported at the specifier.
            raise InvalidTypeError(str(exc) or type(exc).__name__, name, spec_tok.line, spec_tok.column) from exc
        if not isinstance(argument_type, ArgumentType):
            raise InvalidTypeError(
                f"parser for type {type_name!r} returned {type(argument_type).__name__}, expected ArgumentType",
                name,
                spec_tok.line,
                spec_tok.column,
            )
        return ArgumentDescriptor(
            name=name,
            type_spec=spec_tok.value,
            argument_type=argument_type,
            line=open_tok.line,
            column=open_tok.column,
        )
