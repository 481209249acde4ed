"""
algtrees CLI: inspect, evaluate and sort expressions and trees.

Documents are YAML files (see algtrees.core.specs for the accepted formats).
Every command takes a document path or a bare name resolved under ./data,
and an optional entry name; without one the command runs on every entry.
"""

from __future__ import annotations

from typing import List, Mapping, Tuple, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from algtrees.cli.formatters import build_evaluation_table, build_label_tree, format_assignment
from algtrees.cli.load_helpers import load_or_exit
from algtrees.cli.services import affine, evaluate_expressions, parse_assignments, select_entries
from algtrees.io.loaders import load_expression_document, load_tree_document
from algtrees.utils.logging import configure_logging

T = TypeVar("T")

GREETING = "Hello, algtrees!"

app = typer.Typer(help="algtrees CLI: inspect, evaluate and sort expressions and trees.")
expr_app = typer.Typer(help="Inspect and evaluate expression documents.")
tree_app = typer.Typer(help="Inspect, transform and sort tree documents.")
app.add_typer(expr_app, name="expr")
app.add_typer(tree_app, name="tree")
console = Console()

FILE_HELP = "Document path, or a bare name resolved under ./data"
NAME_HELP = "Entry name (default: every entry)"
VERBOSE_HELP = "Display the underlying error on loader failures"


def _select_or_exit(entries: Mapping[str, T], name: str | None, kind: str) -> List[Tuple[str, T]]:
    try:
        return select_entries(entries, name)
    except KeyError:
        known = ", ".join(entries) or "none"
        console.print(f"[red]No {kind} named[/red] {escape(str(name))} (known: {escape(known)})")
        raise typer.Exit(code=2)


def _emit(name: str, text: str) -> None:
    console.print(f"{escape(name)}: {escape(text)}", soft_wrap=True, highlight=False)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    """Inspect, evaluate and sort expressions and trees."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)


@app.command()
def hello() -> None:
    """Print a greeting."""
    console.print(GREETING)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@expr_app.command("show")
def expr_show(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Print expressions in infix notation."""
    doc = load_or_exit(load_expression_document, file, console=console, verbose_errors=verbose)
    for entry_name, expr in _select_or_exit(doc.expressions, name, "expression"):
        _emit(entry_name, expr.show())


@expr_app.command("vars")
def expr_vars(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """List the variables of each expression."""
    doc = load_or_exit(load_expression_document, file, console=console, verbose_errors=verbose)
    for entry_name, expr in _select_or_exit(doc.expressions, name, "expression"):
        _emit(entry_name, "{" + ", ".join(sorted(expr.vars())) + "}")


@expr_app.command("has")
def expr_has(
    file: str = typer.Argument(..., help=FILE_HELP),
    variable: str = typer.Argument(..., help="Variable name to look for"),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Report whether each expression mentions a variable."""
    doc = load_or_exit(load_expression_document, file, console=console, verbose_errors=verbose)
    for entry_name, expr in _select_or_exit(doc.expressions, name, "expression"):
        _emit(entry_name, "yes" if expr.has(variable) else "no")


@expr_app.command("eval")
def expr_eval(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    assign: list[str] = typer.Option([], "--assign", "-a", help="name=value pairs, override the document"),
    default: int | None = typer.Option(None, "--default", help="Value for unassigned variables"),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Evaluate expressions with the document's assignment and any overrides."""
    try:
        overrides = parse_assignments(assign)
    except ValueError as exc:
        console.print(f"[red]Bad --assign[/red]: {escape(str(exc))}")
        raise typer.Exit(code=2)

    doc = load_or_exit(load_expression_document, file, console=console, verbose_errors=verbose)
    entries = _select_or_exit(doc.expressions, name, "expression")
    results = evaluate_expressions(doc, entries, overrides, default)

    fallback = doc.default if default is None else default
    console.print(
        f"[bold]Assignment:[/bold] {escape(format_assignment({**doc.assignment, **overrides}))} (default {fallback})"
    )
    console.print(build_evaluation_table(results))


# ---------------------------------------------------------------------------
# Trees
# ---------------------------------------------------------------------------


@tree_app.command("show")
def tree_show(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Draw each tree."""
    doc = load_or_exit(load_tree_document, file, console=console, verbose_errors=verbose)
    for entry_name, tree in _select_or_exit(doc.trees, name, "tree"):
        console.print(build_label_tree(tree, title=entry_name))


@tree_app.command("has")
def tree_has(
    file: str = typer.Argument(..., help=FILE_HELP),
    value: int = typer.Argument(..., help="Label to look for (use -- before a negative label)"),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Report whether each tree contains a label.

    Negative labels look like options, so separate them with --:
    algtrees tree has trees -- -3
    """
    doc = load_or_exit(load_tree_document, file, console=console, verbose_errors=verbose)
    for entry_name, tree in _select_or_exit(doc.trees, name, "tree"):
        _emit(entry_name, "yes" if tree.has(value) else "no")


@tree_app.command("count-leaves")
def tree_count_leaves(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Count the leaves of each tree."""
    doc = load_or_exit(load_tree_document, file, console=console, verbose_errors=verbose)
    for entry_name, tree in _select_or_exit(doc.trees, name, "tree"):
        _emit(entry_name, str(tree.count_leaves()))


@tree_app.command("map")
def tree_map(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    scale: int = typer.Option(1, "--scale", help="Multiply every label by this"),
    offset: int = typer.Option(0, "--offset", help="Then add this to every label"),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Apply label -> scale * label + offset to each tree."""
    doc = load_or_exit(load_tree_document, file, console=console, verbose_errors=verbose)
    transform = affine(scale, offset)
    for entry_name, tree in _select_or_exit(doc.trees, name, "tree"):
        _emit(entry_name, str(tree.map(transform)))


@tree_app.command("sort")
def tree_sort(
    file: str = typer.Argument(..., help=FILE_HELP),
    name: str | None = typer.Argument(None, help=NAME_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help=VERBOSE_HELP),
) -> None:
    """Sort each tree so its pre-order reading is ascending."""
    doc = load_or_exit(load_tree_document, file, console=console, verbose_errors=verbose)
    for entry_name, tree in _select_or_exit(doc.trees, name, "tree"):
        _emit(entry_name, str(tree.sort()))


__all__ = ["app"]
