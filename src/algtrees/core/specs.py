from __future__ import annotations

"""Building expressions and trees from plain data.

This module is the one place that turns the raw structures found in YAML
documents (or any dict/list/scalar data) into runtime `Expr` and `Tree`
values. Two spellings are accepted:

- canonical: exactly what ``model_dump()`` produces, tagged by ``type``
- shorthand: ints, strings and small mappings that are quicker to write

Shorthand for expressions:
    8                        -> Num(8)
    x                        -> Var("x")
    {add: [x, 1]}            -> Add(Var("x"), Num(1))
    {mul: [2, {add: [x, y]}]} -> Mul(Num(2), Add(Var("x"), Var("y")))

Shorthand for trees:
    8                                -> Leaf(8)
    {value: 1, children: [3, 2]}     -> Node(1, [Leaf(3), Leaf(2)])
    {value: 4}                       -> Node(4, [])
"""

import logging
from typing import Annotated, Any, Dict, Mapping, Sequence

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt, TypeAdapter, field_validator

from algtrees.core.expr import Expr, ExprNode
from algtrees.core.tree import Tree, TreeNode

logger = logging.getLogger(__name__)

BINARY_OPERATORS = ("add", "mul")

_EXPR_ADAPTER: TypeAdapter[Expr] = TypeAdapter(Annotated[ExprNode, Field(discriminator="type")])
_TREE_ADAPTER: TypeAdapter[Tree] = TypeAdapter(Annotated[TreeNode, Field(discriminator="type")])


# ---------------------------------------------------------------------------
# Shorthand normalisation
# ---------------------------------------------------------------------------


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def normalize_expr(raw: Any) -> Any:
    """
    Rewrite expression shorthand into canonical tagged data.

    Already-built `Expr` values pass through untouched.

    Raises:
        ValueError: If ``raw`` has no expression reading
    """
    if isinstance(raw, Expr):
        return raw
    if _is_int(raw):
        return {"type": "num", "value": raw}
    if isinstance(raw, str):
        return {"type": "var", "name": raw}
    if isinstance(raw, Mapping):
        if "type" in raw:
            data = dict(raw)
            if data["type"] in BINARY_OPERATORS:
                for side in ("left", "right"):
                    if side in data:
                        data[side] = normalize_expr(data[side])
            return data
        if len(raw) == 1:
            ((op, operands),) = raw.items()
            if op in BINARY_OPERATORS:
                if not _is_sequence(operands) or len(operands) != 2:
                    raise ValueError(f"'{op}' expects exactly two operands, got {operands!r}")
                return {
                    "type": op,
                    "left": normalize_expr(operands[0]),
                    "right": normalize_expr(operands[1]),
                }
    raise ValueError(f"Cannot build an expression from {raw!r}")


def normalize_tree(raw: Any) -> Any:
    """
    Rewrite tree shorthand into canonical tagged data.

    Raises:
        ValueError: If ``raw`` has no tree reading
    """
    if isinstance(raw, Tree):
        return raw
    if _is_int(raw):
        return {"type": "leaf", "value": raw}
    if isinstance(raw, Mapping):
        data = dict(raw)
        kind = data.setdefault("type", "node")
        if kind == "node" and "children" in data:
            children = data["children"]
            if children is None:
                data["children"] = []
            elif not _is_sequence(children):
                raise ValueError(f"Node children must be a list, got {children!r}")
            else:
                data["children"] = [normalize_tree(child) for child in children]
        return data
    raise ValueError(f"Cannot build a tree from {raw!r}")


def build_expr(raw: Any) -> Expr:
    """Build an expression from shorthand or canonical data."""
    if isinstance(raw, Expr):
        return raw
    return _EXPR_ADAPTER.validate_python(normalize_expr(raw))


def build_tree(raw: Any) -> Tree:
    """Build a tree from shorthand or canonical data."""
    if isinstance(raw, Tree):
        return raw
    return _TREE_ADAPTER.validate_python(normalize_tree(raw))


# ---------------------------------------------------------------------------
# Document schemas
# ---------------------------------------------------------------------------

# Entries are normalised one by one so validation errors are located by entry name.
ExprEntry = Annotated[ExprNode, BeforeValidator(normalize_expr)]
TreeEntry = Annotated[TreeNode, BeforeValidator(normalize_tree)]


class _BaseSpec(BaseModel):
    """Base settings shared by all document models."""

    model_config = ConfigDict(extra="forbid")


class ExpressionDocument(_BaseSpec):
    """A named set of expressions plus the environment to evaluate them in."""

    assignment: Dict[str, StrictInt] = Field(default_factory=dict)
    default: StrictInt = 0
    expressions: Dict[str, ExprEntry] = Field(default_factory=dict)

    @field_validator("assignment", mode="before")
    @classmethod
    def _empty_assignment(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("expressions", mode="before")
    @classmethod
    def _named_expressions(cls, value: Any) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("expressions must map names to expressions")
        logger.debug("Reading %d expression entr(ies)", len(value))
        return {str(name): raw for name, raw in value.items()}


class TreeDocument(_BaseSpec):
    """A named set of trees."""

    trees: Dict[str, TreeEntry] = Field(default_factory=dict)

    @field_validator("trees", mode="before")
    @classmethod
    def _named_trees(cls, value: Any) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("trees must map names to trees")
        logger.debug("Reading %d tree entr(ies)", len(value))
        return {str(name): raw for name, raw in value.items()}


__all__ = [
    "ExpressionDocument",
    "TreeDocument",
    "build_expr",
    "build_tree",
    "normalize_expr",
    "normalize_tree",
]
