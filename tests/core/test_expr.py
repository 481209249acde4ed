"""
Tests for expression values.

Tests cover:
- has / vars
- eval with assignments and defaults
- show and its parenthesisation rule
- immutability, equality and model round-trips
"""

import pytest
from pydantic import ValidationError

from algtrees.core.expr import Add, Expr, Mul, Num, Var
from algtrees.core.specs import build_expr


class TestHas:
    """Tests for variable membership."""

    def test_reference_expressions(self, expr1, expr2, expr3):
        assert expr1.has("x") is False
        assert expr2.has("x") is True
        assert expr3.has("y") is True

    def test_missing_variable(self, expr3):
        assert expr3.has("z") is False

    def test_found_in_either_operand(self):
        """Membership looks at both sides of every operator."""
        assert Mul(Var("a"), Num(1)).has("a")
        assert Mul(Num(1), Var("a")).has("a")

    @pytest.mark.parametrize("name", ["x", "y", "z"])
    def test_agrees_with_vars(self, expr1, expr2, expr3, name):
        for expr in (expr1, expr2, expr3):
            assert expr.has(name) == (name in expr.vars())


class TestVars:
    """Tests for variable-set extraction."""

    def test_reference_expressions(self, expr1, expr2, expr3):
        assert expr1.vars() == set()
        assert expr2.vars() == {"x"}
        assert expr3.vars() == {"x", "y"}

    def test_duplicates_collapse(self):
        assert Add(Var("x"), Mul(Var("x"), Var("x"))).vars() == {"x"}


class TestEval:
    """Tests for evaluation."""

    def test_reference_expressions(self, expr1, expr2, expr3, assignment):
        assert expr1.eval(assignment, 0) == 8
        assert expr2.eval(assignment, 0) == 4
        assert expr3.eval(assignment, 0) == 16

    def test_num_ignores_assignment(self):
        assert Num(8).eval({}, 0) == 8

    def test_missing_variable_uses_default(self, expr3):
        assert expr3.eval({"x": 3}, 10) == 26
        assert expr3.eval({}, 1) == 4

    def test_default_irrelevant_when_fully_assigned(self, expr3, assignment):
        assert expr3.eval(assignment, 0) == expr3.eval(assignment, 999)

    def test_assignment_not_modified(self, expr3):
        assignment = {"x": 3}
        expr3.eval(assignment, 7)
        assert assignment == {"x": 3}

    def test_negative_and_large_values(self):
        big = 10**30
        assert Mul(Num(big), Num(-2)).eval({}, 0) == -2 * big


class TestShow:
    """Tests for infix rendering."""

    def test_reference_expressions(self, expr1, expr2, expr3):
        assert expr1.show() == "8"
        assert expr2.show() == "x + 1"
        assert expr3.show() == "2 * (x + y)"

    def test_str_matches_show(self, expr3):
        assert str(expr3) == "2 * (x + y)"

    def test_sum_operands_never_grouped(self):
        expr = Add(Add(Var("a"), Var("b")), Mul(Var("c"), Var("d")))
        assert expr.show() == "a + b + c * d"

    def test_both_product_operands_grouped(self):
        expr = Mul(Add(Var("a"), Num(1)), Add(Var("b"), Num(2)))
        assert expr.show() == "(a + 1) * (b + 2)"

    def test_grouping_only_looks_at_immediate_child(self):
        """A product under a product is not grouped, even if it contains a sum."""
        expr = Mul(Mul(Num(2), Add(Var("x"), Var("y"))), Num(3))
        assert expr.show() == "2 * (x + y) * 3"

    def test_negative_number(self):
        assert Add(Num(-1), Var("x")).show() == "-1 + x"


class TestModel:
    """Tests for construction, immutability and serialisation."""

    def test_structural_equality(self, expr3):
        assert expr3 == Mul(Num(2), Add(Var("x"), Var("y")))
        assert expr3 != Mul(Num(2), Add(Var("y"), Var("x")))

    def test_keyword_construction(self):
        assert Add(left=Var("x"), right=Num(1)) == Add(Var("x"), Num(1))

    def test_missing_field_is_validation_error(self):
        with pytest.raises(ValidationError):
            Num()
        with pytest.raises(ValidationError):
            Add(Var("x"))

    def test_too_many_positional_arguments(self):
        with pytest.raises(TypeError, match="at most 1 positional"):
            Var("x", "y")

    def test_positional_and_keyword_clash(self):
        with pytest.raises(TypeError, match="multiple values for 'value'"):
            Num(1, value=2)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Num(1, left=Num(5))

    def test_frozen(self, expr2):
        with pytest.raises(ValidationError):
            expr2.left = Num(0)

    def test_hashable(self):
        assert len({Num(1), Num(1), Var("x")}) == 2

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Expr()

    def test_num_rejects_non_int(self):
        with pytest.raises(ValidationError):
            Num("8")
        with pytest.raises(ValidationError):
            Num(True)

    def test_binary_rejects_non_expression(self):
        with pytest.raises(ValidationError):
            Add(Var("x"), 1)

    def test_dump_round_trip(self, expr3):
        data = expr3.model_dump()
        assert data["type"] == "mul"
        assert data["right"]["left"] == {"type": "var", "name": "x"}
        assert build_expr(data) == expr3
        assert Mul.model_validate(data) == expr3

    def test_repr(self, expr2):
        assert repr(expr2) == "Add(Var('x'), Num(1))"
