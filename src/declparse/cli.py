"""declparse command line."""

from __future__ import annotations

from pathlib import Path

import click

from declparse import __version__
from declparse.ast_nodes import Invalid, Node, walk
from declparse.config import DeclparseConfig, resolve_config
from declparse.errors import CompileError, DiagnosticRenderer, Severity
from declparse.parser import Parser
from declparse.printer import TreePrinter
from declparse.tokens import Token, from_atoms, read_atoms


def _load_tokens(atoms: tuple[str, ...], file_: str | None) -> list[Token]:
    if file_ is not None:
        if atoms:
            raise click.UsageError("give atoms or --file, not both")
        return read_atoms(Path(file_).read_text())
    return from_atoms(atoms)


def _parse_or_exit(
    tokens: list[Token], config: DeclparseConfig,
) -> tuple[list[Node], Parser]:
    """Parse tokens, rendering diagnostics to stderr. Exits 1 on fatal errors."""
    renderer = DiagnosticRenderer(color=config.render.color)
    parser = Parser(tokens)
    try:
        nodes = parser.parse()
    except CompileError as e:
        for diag in parser.diagnostics + e.diagnostics:
            click.echo(renderer.render(diag), err=True)
        raise SystemExit(1)

    for diag in parser.diagnostics:
        click.echo(renderer.render(diag), err=True)
    return nodes, parser


def _count_invalid(nodes: list[Node]) -> int:
    return sum(
        1 for node in nodes for sub in walk(node) if isinstance(sub, Invalid)
    )


def _config_for(file_: str | None) -> DeclparseConfig:
    return resolve_config(Path(file_) if file_ else None)


@click.group()
@click.version_option(__version__, prog_name="declparse")
def main() -> None:
    """Parse declaration token streams into syntax trees."""


@main.command()
@click.argument("atoms", nargs=-1)
@click.option("--file", "file_", type=click.Path(exists=True, dir_okay=False),
              help="Read whitespace-separated atoms from a file.")
@click.option("--strict/--no-strict", default=None,
              help="Exit with status 1 on invalid nodes or errors.")
def parse(atoms: tuple[str, ...], file_: str | None, strict: bool | None) -> None:
    """Parse atoms and print the tree."""
    config = _config_for(file_)
    if strict is None:
        strict = config.parse.strict

    nodes, parser = _parse_or_exit(_load_tokens(atoms, file_), config)
    output = TreePrinter().render_all(nodes)
    if output:
        click.echo(output)

    if strict and (parser.has_errors() or _count_invalid(nodes)):
        raise SystemExit(1)


@main.command()
@click.argument("atoms", nargs=-1)
@click.option("--file", "file_", type=click.Path(exists=True, dir_okay=False),
              help="Read whitespace-separated atoms from a file.")
def check(atoms: tuple[str, ...], file_: str | None) -> None:
    """Parse atoms and report whether the tree is well formed."""
    config = _config_for(file_)
    nodes, parser = _parse_or_exit(_load_tokens(atoms, file_), config)

    invalid = _count_invalid(nodes)
    errors = sum(1 for d in parser.diagnostics if d.severity == Severity.ERROR)
    if invalid or errors:
        click.echo(f"{invalid} invalid node(s), {errors} error(s)", err=True)
        raise SystemExit(1)
    click.echo(f"ok: {len(nodes)} top-level node(s)")


@main.command()
@click.argument("atoms", nargs=-1)
@click.option("--file", "file_", type=click.Path(exists=True, dir_okay=False),
              help="Read whitespace-separated atoms from a file.")
def view(atoms: tuple[str, ...], file_: str | None) -> None:
    """Dump the node structure of parsed atoms."""
    config = _config_for(file_)
    nodes, _ = _parse_or_exit(_load_tokens(atoms, file_), config)
    for node in nodes:
        _dump_ast(node, 0)


def _dump_ast(node: object, depth: int) -> None:
    """Print a readable AST dump."""
    indent = "  " * depth
    name = type(node).__name__

    if hasattr(node, "__dataclass_fields__"):
        fields = node.__dataclass_fields__  # type: ignore[union-attr]
        click.echo(f"{indent}{name}")
        for field_name in fields:
            value = getattr(node, field_name)
            if isinstance(value, Token):
                click.echo(f"{indent}  {field_name}: {value.value!r}")
            elif isinstance(value, list):
                if value:
                    click.echo(f"{indent}  {field_name}:")
                    for item in value:
                        _dump_ast(item, depth + 2)
                else:
                    click.echo(f"{indent}  {field_name}: []")
            elif hasattr(value, "__dataclass_fields__"):
                click.echo(f"{indent}  {field_name}:")
                _dump_ast(value, depth + 2)
            elif value is not None:
                click.echo(f"{indent}  {field_name}: {value!r}")
    else:
        click.echo(f"{indent}{name}: {node!r}")
