"""
Arithmetic expression values.

An expression is one of four immutable variants:
- Num: an integer literal
- Var: a named variable
- Add: the sum of two sub-expressions
- Mul: the product of two sub-expressions

Examples:
    Num(8)                                  # 8
    Add(Var("x"), Num(1))                   # x + 1
    Mul(Num(2), Add(Var("x"), Var("y")))    # 2 * (x + y)

Every variant carries a literal ``type`` tag so ``model_dump()`` output
validates back into the same value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Literal, Mapping, Set, Tuple, Union

from pydantic import StrictInt

from algtrees.core.base import ValueModel


class Expr(ValueModel, ABC):
    """Base class for all expression variants."""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return True if ``name`` occurs as a variable anywhere in the expression."""
        raise NotImplementedError

    @abstractmethod
    def vars(self) -> Set[str]:
        """Return the set of variable names in the expression."""
        raise NotImplementedError

    @abstractmethod
    def eval(self, assignment: Mapping[str, int], default: int) -> int:
        """
        Evaluate the expression.

        Args:
            assignment: Variable values by name (never modified)
            default: Value used for any variable missing from ``assignment``

        Returns:
            The integer value of the expression
        """
        raise NotImplementedError

    @abstractmethod
    def show(self) -> str:
        """Render the expression in infix notation."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.show()


class Num(Expr):
    type: Literal["num"] = "num"
    value: StrictInt

    positional_fields: ClassVar[Tuple[str, ...]] = ("value",)

    def has(self, name: str) -> bool:
        return False

    def vars(self) -> Set[str]:
        return set()

    def eval(self, assignment: Mapping[str, int], default: int) -> int:
        return self.value

    def show(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Num({self.value})"


class Var(Expr):
    type: Literal["var"] = "var"
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name",)

    def has(self, name: str) -> bool:
        return self.name == name

    def vars(self) -> Set[str]:
        return {self.name}

    def eval(self, assignment: Mapping[str, int], default: int) -> int:
        return assignment.get(self.name, default)

    def show(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Var({self.name!r})"


class _BinaryExpr(Expr):
    """Shared behaviour of the two-operand variants."""

    left: ExprNode
    right: ExprNode

    positional_fields: ClassVar[Tuple[str, ...]] = ("left", "right")

    def has(self, name: str) -> bool:
        return self.left.has(name) or self.right.has(name)

    def vars(self) -> Set[str]:
        return self.left.vars() | self.right.vars()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.left!r}, {self.right!r})"


class Add(_BinaryExpr):
    type: Literal["add"] = "add"

    def eval(self, assignment: Mapping[str, int], default: int) -> int:
        return self.left.eval(assignment, default) + self.right.eval(assignment, default)

    def show(self) -> str:
        # Sums bind loosest, so their operands never need grouping.
        return f"{self.left.show()} + {self.right.show()}"


class Mul(_BinaryExpr):
    type: Literal["mul"] = "mul"

    def eval(self, assignment: Mapping[str, int], default: int) -> int:
        return self.left.eval(assignment, default) * self.right.eval(assignment, default)

    def show(self) -> str:
        return f"{_grouped(self.left)} * {_grouped(self.right)}"


def _grouped(operand: Expr) -> str:
    """Render a product operand, parenthesising it only when it is a sum."""
    if isinstance(operand, Add):
        return f"({operand.show()})"
    return operand.show()


ExprNode = Union[Num, Var, Add, Mul]

Add.model_rebuild()
Mul.model_rebuild()


__all__ = ["Expr", "ExprNode", "Num", "Var", "Add", "Mul"]
