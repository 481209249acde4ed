"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree as RichTree

from algtrees.cli.services import Evaluation
from algtrees.core.tree import Node, Tree


def format_assignment(assignment: Mapping[str, int]) -> str:
    if not assignment:
        return "(empty)"
    return ", ".join(f"{name}={value}" for name, value in sorted(assignment.items()))


def build_evaluation_table(results: Sequence[Evaluation]) -> Table:
    table = Table(title="Evaluation")
    table.add_column("Name")
    table.add_column("Expression")
    table.add_column("Value", justify="right")
    for row in results:
        table.add_row(escape(row.name), escape(row.expression), str(row.value))
    return table


def build_label_tree(tree: Tree, title: str | None = None) -> RichTree:
    """Render a tree with one rich branch per node; internal nodes are bold."""
    root = RichTree(escape(title) if title else _label(tree))
    if title:
        _attach(root.add(_label(tree)), tree)
    else:
        _attach(root, tree)
    return root


def _attach(branch: RichTree, tree: Tree) -> None:
    if isinstance(tree, Node):
        for child in tree.children:
            _attach(branch.add(_label(child)), child)


def _label(tree: Tree) -> str:
    if isinstance(tree, Node):
        return f"[bold]{tree.value}[/bold]"
    return str(tree.value)


__all__ = ["build_evaluation_table", "build_label_tree", "format_assignment"]
