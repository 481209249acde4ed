from __future__ import annotations

"""Higher-level helpers used by CLI commands."""

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

from algtrees.core.expr import Expr
from algtrees.core.specs import ExpressionDocument
from algtrees.utils.logging import log_calls

T = TypeVar("T")


class Evaluation(BaseModel):
    """Result of evaluating one named expression."""

    name: str
    expression: str
    value: int


def select_entries(entries: Mapping[str, T], name: Optional[str]) -> List[Tuple[str, T]]:
    """Return the single named entry, or every entry in document order when ``name`` is None.

    Raises:
        KeyError: If ``name`` is not in ``entries``
    """
    if name is None:
        return list(entries.items())
    if name not in entries:
        raise KeyError(name)
    return [(name, entries[name])]


def parse_assignments(items: Sequence[str]) -> Dict[str, int]:
    """Parse ``name=value`` pairs into an assignment.

    Raises:
        ValueError: If an item has no '=' or its value is not an integer
    """
    assignment: Dict[str, int] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"expected name=value, got '{item}'")
        key, raw = item.split("=", 1)
        try:
            assignment[key.strip()] = int(raw.strip())
        except ValueError:
            raise ValueError(f"value for '{key.strip()}' is not an integer: '{raw.strip()}'") from None
    return assignment


@log_calls()
def evaluate_expressions(
    document: ExpressionDocument,
    entries: Sequence[Tuple[str, Expr]],
    overrides: Mapping[str, int],
    default: Optional[int] = None,
) -> List[Evaluation]:
    """Evaluate ``entries`` against the document's assignment merged with ``overrides``."""
    assignment = {**document.assignment, **overrides}
    fallback = document.default if default is None else default
    return [
        Evaluation(name=name, expression=expr.show(), value=expr.eval(assignment, fallback))
        for name, expr in entries
    ]


def affine(scale: int, offset: int) -> Callable[[int], int]:
    """Return the label transformation v -> scale * v + offset."""

    def _apply(value: int) -> int:
        return scale * value + offset

    return _apply


__all__ = ["Evaluation", "affine", "evaluate_expressions", "parse_assignments", "select_entries"]
