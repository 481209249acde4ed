"""
Shared fixtures: the reference expressions and trees, plus a YAML document writer.
"""

from pathlib import Path

import pytest
import yaml

from algtrees.core.expr import Add, Mul, Num, Var
from algtrees.core.tree import Leaf, Node

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def expr1():
    """8"""
    return Num(8)


@pytest.fixture
def expr2():
    """x + 1"""
    return Add(Var("x"), Num(1))


@pytest.fixture
def expr3():
    """2 * (x + y)"""
    return Mul(Num(2), Add(Var("x"), Var("y")))


@pytest.fixture
def assignment():
    return {"x": 3, "y": 5}


@pytest.fixture
def tree1():
    return Leaf(8)


@pytest.fixture
def tree2():
    #   1
    #  / \
    # 3   2
    return Node(1, [Leaf(3), Leaf(2)])


@pytest.fixture
def tree3():
    #    7
    #   / \
    #  2   3
    #     / \
    #    5   1
    #   / \
    #  1   8
    return Node(
        7,
        [
            Leaf(2),
            Node(
                3,
                [
                    Node(5, [Leaf(1), Leaf(8)]),
                    Leaf(1),
                ],
            ),
        ],
    )


@pytest.fixture
def write_document(tmp_path):
    """Write ``data`` as YAML under tmp_path and return the file path as a string."""

    def _write(data, name="document.yaml"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def repo_root():
    return REPO_ROOT
