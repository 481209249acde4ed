from .expr import Add, Expr, ExprNode, Mul, Num, Var
from .tree import Leaf, Node, Tree, TreeNode

__all__ = [
    "Expr",
    "ExprNode",
    "Num",
    "Var",
    "Add",
    "Mul",
    "Tree",
    "TreeNode",
    "Leaf",
    "Node",
]
