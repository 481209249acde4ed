"""Recursive expression and tree values with pure operations."""

from algtrees.core import Add, Expr, Leaf, Mul, Node, Num, Tree, Var

__version__ = "1.0.0"

__all__ = ["Expr", "Num", "Var", "Add", "Mul", "Tree", "Leaf", "Node", "__version__"]
