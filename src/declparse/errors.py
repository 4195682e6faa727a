"""Rust-style colored diagnostic rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declparse.tokens import Token


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
    Severity.NOTE: "\033[1;36m",     # bold cyan
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class DiagnosticLabel:
    """Points at a token by its 0-based index in the input stream."""

    position: int
    token: Token | None = None
    message: str = ""


@dataclass
class Diagnostic:
    """A single diagnostic message with optional labels and notes."""

    severity: Severity
    code: str
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def render(self, diag: Diagnostic) -> str:
        lines: list[str] = []
        sev = diag.severity
        color = _COLORS[sev]

        # Header: error[E201]: message
        lines.append(
            f"{self._c(color)}{sev.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )

        for label in diag.labels:
            loc = f"token {label.position}"
            if label.token is not None:
                loc += f" ({label.token.value!r})"
            lines.append(f"  {self._c(_BLUE)}-->{self._c(_RESET)} {loc}")
            if label.message:
                lines.append(
                    f"  {self._c(_BLUE)}   |{self._c(_RESET)}   "
                    f"{self._c(color)}{label.message}{self._c(_RESET)}"
                )

        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")

        return "\n".join(lines)


class CompileError(Exception):
    """Parse failure carrying one or more diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics]
        super().__init__(f"{len(diagnostics)} error(s): {'; '.join(messages)}")


class UnexpectedEndOfInput(CompileError):
    """An expression was required but the token stream was exhausted."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__([
            Diagnostic(
                severity=Severity.ERROR,
                code="E200",
                message="unexpected end of input: expected an expression",
                labels=[DiagnosticLabel(position=position)],
            )
        ])
