"""Token kinds and token representation for the declaration parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable


class TokenKind(Enum):
    # Punctuation
    COLON = auto()
    COMMA = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Identifiers
    IDENTIFIER = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str

    def __str__(self) -> str:
        return self.value


PUNCTUATION: dict[str, TokenKind] = {
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_PUNCT_TEXT: dict[TokenKind, str] = {kind: text for text, kind in PUNCTUATION.items()}


def ident(text: str) -> Token:
    return Token(TokenKind.IDENTIFIER, text)


def punct(kind: TokenKind) -> Token:
    """Build a punctuation token. Raises ValueError for IDENTIFIER."""
    if kind not in _PUNCT_TEXT:
        raise ValueError(f"{kind.name} is not a punctuation kind")
    return Token(kind, _PUNCT_TEXT[kind])


def from_atoms(atoms: Iterable[str]) -> list[Token]:
    """Turn atom strings into tokens.

    ``":"``, ``","``, ``"("`` and ``")"`` become punctuation; every other
    atom is an identifier, so ``from_atoms(["x", ":", "f32"])`` reads the
    way the tokens are written.
    """
    tokens: list[Token] = []
    for atom in atoms:
        kind = PUNCTUATION.get(atom)
        tokens.append(Token(kind, atom) if kind is not None else ident(atom))
    return tokens


def read_atoms(text: str) -> list[Token]:
    """Split whitespace-separated atoms and convert them with from_atoms."""
    return from_atoms(text.split())
