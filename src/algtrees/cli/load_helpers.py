from __future__ import annotations

"""Loading documents with CLI-friendly errors."""

from typing import Callable, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from algtrees.cli.paths import find_document
from algtrees.io.loaders import LoaderError

T = TypeVar("T")


def load_or_exit(
    loader_fn: Callable[[str], T],
    name_or_path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> T:
    try:
        path = find_document(name_or_path)
    except FileNotFoundError as err:
        console.print(f"[red]{escape(str(err))}[/red]")
        raise typer.Exit(code=1)
    try:
        return loader_fn(path)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load data:[/red] {escape(err.message)}\n{escape(str(err.cause))}")
        else:
            console.print(f"[red]Failed to load data:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
