"""Shared test helpers for the declparse test suite."""

from __future__ import annotations

from declparse.ast_nodes import Identifier, Invalid
from declparse.parser import Parser
from declparse.tokens import Token, TokenKind, from_atoms, ident, punct


def parse(source: str) -> list:
    """Parse whitespace-separated atoms, return the top-level nodes."""
    return Parser(from_atoms(source.split())).parse()


def parser_for(source: str) -> Parser:
    """Parse whitespace-separated atoms, return the parser for inspection."""
    parser = Parser(from_atoms(source.split()))
    parser.parse()
    return parser


def I(name: str) -> Identifier:  # noqa: E743
    return Identifier(ident(name))


def bad(kind: TokenKind | str) -> Invalid:
    """Invalid node around a punctuation kind or an identifier name."""
    token = punct(kind) if isinstance(kind, TokenKind) else ident(kind)
    return Invalid(token)


COLON: Token = punct(TokenKind.COLON)
COMMA: Token = punct(TokenKind.COMMA)
LPAREN: Token = punct(TokenKind.LPAREN)
RPAREN: Token = punct(TokenKind.RPAREN)
