"""Parser for the declaration syntax.

Transforms a token stream into a list of top-level nodes with a single-pass
Pratt expression parser. Commas build flat lists, ``:`` introduces a typed
runtime declaration and ``::`` a compile-time one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from declparse.ast_nodes import (
    ConstDecl,
    ExprList,
    Identifier,
    Invalid,
    Node,
    RuntimeDecl,
    explode,
)
from declparse.errors import (
    Diagnostic,
    DiagnosticLabel,
    Severity,
    UnexpectedEndOfInput,
)
from declparse.tokens import Token, TokenKind, from_atoms

# ── Binding powers for Pratt parser ─────────────────────────────

_LPAREN_BP = 20
_COLON_BP = 30
_COMMA_BP = 40


@dataclass
class ParserState:
    """Context flags that alter binding power.

    ``disallow_comma`` is set once a ``:`` is seen so a following comma ends
    the declaration instead of joining its type. Only entering a group clears
    it again.
    """

    disallow_comma: bool = False


def binding_power(token: Token, state: ParserState) -> int:
    """Left binding power of ``token``; 0 means it never continues an expression."""
    if token.kind == TokenKind.LPAREN:
        return _LPAREN_BP
    if token.kind == TokenKind.COLON:
        return _COLON_BP
    if token.kind == TokenKind.COMMA:
        return 0 if state.disallow_comma else _COMMA_BP
    return 0


class Parser:
    """Parses a list of tokens into declaration and list nodes."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.state = ParserState()
        self.diagnostics: list[Diagnostic] = []

    # ── Token access ─────────────────────────────────────────────

    def _peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _at(self, kind: TokenKind) -> bool:
        tok = self._peek()
        return tok is not None and tok.kind == kind

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _report(self, severity: Severity, code: str, message: str,
                position: int, token: Token) -> None:
        self.diagnostics.append(
            Diagnostic(
                severity=severity,
                code=code,
                message=message,
                labels=[DiagnosticLabel(position=position, token=token)],
            )
        )

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    # ── Top-level parsing ────────────────────────────────────────

    def parse(self) -> list[Node]:
        """Parse expressions until the token stream is exhausted."""
        nodes: list[Node] = []
        while self._peek() is not None:
            nodes.append(self.parse_expression())
        return nodes

    # ── Expressions ──────────────────────────────────────────────

    def parse_expression(self, min_bp: int = 0) -> Node:
        """Parse an expression using Pratt parsing with binding powers."""
        tok = self._peek()
        if tok is None:
            raise UnexpectedEndOfInput(self.pos)

        left = self.nud(tok)
        while True:
            tok = self._peek()
            if tok is None or binding_power(tok, self.state) <= min_bp:
                break
            left = self.led(tok, left)
        return left

    def nud(self, token: Token) -> Node:
        """Prefix rule: build the node that ``token`` starts."""
        if token.kind == TokenKind.IDENTIFIER:
            self._advance()
            return Identifier(token)

        if token.kind == TokenKind.LPAREN:
            self._advance()
            return self._parse_group()

        if token.kind == TokenKind.COMMA:
            # Stray separators are skipped, not reported.
            while self._at(TokenKind.COMMA):
                self._advance()
            return self.parse_expression()

        position = self.pos
        self._advance()
        self._report(
            Severity.WARNING, "W202",
            f"unexpected {token.value!r} where an expression should start",
            position, token,
        )
        return Invalid(token)

    def _parse_group(self) -> Node:
        """Parse the inside of ``( ... )``; the opening paren is consumed."""
        saved = self.state
        self.state = ParserState()
        try:
            expr = self.parse_expression()
            if self._at(TokenKind.COMMA):
                items = explode(expr)
                while self._at(TokenKind.COMMA):
                    self._advance()
                    items.extend(explode(self.parse_expression()))
                expr = ExprList(items)

            position = self.pos
            closing = self._peek()
            if closing is None:
                raise UnexpectedEndOfInput(position)
            self._advance()
            if closing.kind != TokenKind.RPAREN:
                self._report(
                    Severity.ERROR, "E201",
                    f"expected ')', got {closing.value!r}",
                    position, closing,
                )
                return Invalid(closing)
            return expr
        finally:
            self.state = saved

    def led(self, token: Token, left: Node) -> Node:
        """Infix rule: extend ``left`` with the construct ``token`` introduces."""
        if token.kind == TokenKind.COMMA:
            # Operands stop at the next comma; the run is collected here so a
            # chain of any length builds one flat list without recursing.
            rbp = binding_power(token, self.state) - 1
            items = explode(left)
            while True:
                self._advance()
                items.extend(explode(self.parse_expression(rbp + 1)))
                tok = self._peek()
                if (tok is None or tok.kind != TokenKind.COMMA
                        or binding_power(tok, self.state) <= rbp):
                    break
            return ExprList(items)

        if token.kind == TokenKind.COLON:
            self._advance()
            bp = binding_power(token, self.state)
            self.state.disallow_comma = True

            if self._at(TokenKind.COLON):
                self._advance()
                value = self.parse_expression(bp)
                return ConstDecl(names=explode(left), type=None, values=explode(value))

            type_expr = self.parse_expression(bp)
            # TODO: parse an initializer after the type (`x : T = v`) once the
            # token set has an assignment operator.
            return RuntimeDecl(names=explode(left), type=type_expr, values=[])

        position = self.pos
        self._advance()
        self._report(
            Severity.WARNING, "W203",
            f"{token.value!r} cannot follow an expression",
            position, token,
        )
        return Invalid(token)


def parse_atoms(atoms: Iterable[str]) -> list[Node]:
    """Parse atom strings (see ``tokens.from_atoms``) into top-level nodes."""
    return Parser(from_atoms(atoms)).parse()
