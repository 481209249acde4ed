"""
Labelled tree values.

A tree is either:
- Leaf: a childless node carrying an integer label
- Node: a labelled internal node with an ordered (possibly empty) tuple of children

Example:
    #    7
    #   / \\
    #  2   3
    #     / \\
    #    5   1
    #   / \\
    #  1   8
    Node(7, [Leaf(2), Node(3, [Node(5, [Leaf(1), Leaf(8)]), Leaf(1)])])

All operations return new trees; nothing is modified in place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterator, List, Literal, Tuple, Union

from pydantic import StrictInt

from algtrees.core.base import ValueModel


class Tree(ValueModel, ABC):
    """Base class for both tree variants."""

    value: StrictInt

    positional_fields: ClassVar[Tuple[str, ...]] = ("value",)

    @abstractmethod
    def has(self, value: int) -> bool:
        """Return True if ``value`` labels this node or any descendant."""
        raise NotImplementedError

    @abstractmethod
    def map(self, f: Callable[[int], int]) -> "TreeNode":
        """Apply ``f`` to every label, keeping the shape unchanged."""
        raise NotImplementedError

    @abstractmethod
    def count_leaves(self) -> int:
        """Count the Leaf nodes. A childless Node is not a leaf."""
        raise NotImplementedError

    @abstractmethod
    def same_shape(self, other: "Tree") -> bool:
        """Compare the leaf/node pattern and arity of two trees, ignoring labels."""
        raise NotImplementedError

    @abstractmethod
    def iter_preorder(self) -> Iterator[int]:
        """Yield labels in pre-order: own label first, then children left to right."""
        raise NotImplementedError

    @abstractmethod
    def _relabel(self, labels: Iterator[int]) -> "TreeNode":
        raise NotImplementedError

    def preorder(self) -> List[int]:
        return list(self.iter_preorder())

    def sort(self) -> "TreeNode":
        """
        Redistribute labels so the pre-order reading is ascending.

        The labels are collected in pre-order and sorted, then handed back
        out through one shared iterator while walking the original shape in
        pre-order. Values move across subtree boundaries; the shape does not
        change.

        Example:
            Node(1, [Leaf(3), Leaf(2)]).sort() == Node(1, [Leaf(2), Leaf(3)])
        """
        return self._relabel(iter(sorted(self.iter_preorder())))


class Leaf(Tree):
    type: Literal["leaf"] = "leaf"

    def has(self, value: int) -> bool:
        return self.value == value

    def map(self, f: Callable[[int], int]) -> "Leaf":
        return Leaf(f(self.value))

    def count_leaves(self) -> int:
        return 1

    def same_shape(self, other: Tree) -> bool:
        return isinstance(other, Leaf)

    def iter_preorder(self) -> Iterator[int]:
        yield self.value

    def _relabel(self, labels: Iterator[int]) -> "Leaf":
        return Leaf(next(labels))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Leaf({self.value})"


class Node(Tree):
    type: Literal["node"] = "node"
    children: Tuple[TreeNode, ...] = ()

    positional_fields: ClassVar[Tuple[str, ...]] = ("value", "children")

    def has(self, value: int) -> bool:
        return self.value == value or any(child.has(value) for child in self.children)

    def map(self, f: Callable[[int], int]) -> "Node":
        return Node(f(self.value), [child.map(f) for child in self.children])

    def count_leaves(self) -> int:
        return sum(child.count_leaves() for child in self.children)

    def same_shape(self, other: Tree) -> bool:
        if not isinstance(other, Node) or len(other.children) != len(self.children):
            return False
        return all(mine.same_shape(theirs) for mine, theirs in zip(self.children, other.children))

    def iter_preorder(self) -> Iterator[int]:
        yield self.value
        for child in self.children:
            yield from child.iter_preorder()

    def _relabel(self, labels: Iterator[int]) -> "Node":
        # The node takes its label before any child draws from the iterator.
        head = next(labels)
        return Node(head, [child._relabel(labels) for child in self.children])

    def __str__(self) -> str:
        return f"{self.value}({', '.join(str(child) for child in self.children)})"

    def __repr__(self) -> str:
        return f"Node({self.value}, {list(self.children)!r})"


TreeNode = Union[Leaf, Node]

Node.model_rebuild()


__all__ = ["Tree", "TreeNode", "Leaf", "Node"]
