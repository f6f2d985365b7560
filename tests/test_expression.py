"""
Tests for the expression model and evaluator.
"""

import pytest

from backend.gottlob.logic.evaluator import ExpressionEvaluator
from backend.gottlob.logic.expression import (
    And,
    Biconditional,
    Conditional,
    DoesNotProve,
    Necessary,
    Negated,
    Or,
    Possible,
    Proves,
    Variable,
    _default_evaluator,
    _default_printer,
)
from backend.gottlob.logic.parser import parse_infix
from backend.gottlob.logic.powerset import PowerSet
from backend.gottlob.logic.printer import ExpressionPrinter

p = Variable("p")
q = Variable("q")
r = Variable("r")


class TestVariable:
    """Tests for Variable."""

    def test_equality_and_hash(self):
        """Test that variables compare by their character."""
        assert Variable("p") == p
        assert hash(Variable("p")) == hash(p)
        assert len({Variable("p"), p, q}) == 2

    def test_ordering(self):
        """Test that variables order by their character."""
        assert sorted([r, p, q]) == [p, q, r]

    def test_single_character(self):
        """Test that multi-character names are rejected."""
        with pytest.raises(ValueError):
            Variable("pq")

    def test_immutable(self):
        """Test that a variable cannot be changed."""
        with pytest.raises(AttributeError):
            p.name = "q"


class TestVariables:
    """Tests for collecting variables."""

    def test_single(self):
        """Test a lone variable."""
        assert p.variables() == {p}

    def test_union_over_tree(self):
        """Test that repeated variables are collected once."""
        expr = Biconditional(And(p, Negated(q)), Or(q, Conditional(r, p)))
        assert expr.variables() == {p, q, r}

    def test_modal_operands(self):
        """Test that modal operators are traversed."""
        assert Necessary(Possible(And(p, q))).variables() == {p, q}

    def test_deep_tree(self):
        """Test a tree far deeper than the recursion limit."""
        expr = r
        for _ in range(5000):
            expr = And(Negated(expr), p)
        assert expr.variables() == {p, r}


class TestEvaluate:
    """Tests for ExpressionEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return ExpressionEvaluator()

    def test_variable(self, evaluator):
        """Test that a variable is true iff it is in the assignment."""
        assert evaluator.evaluate(p, {p}) is True
        assert evaluator.evaluate(p, set()) is False

    @pytest.mark.parametrize(
        "trues,expected",
        [(set(), True), ({"p"}, False), ({"q"}, True), ({"p", "q"}, True)],
    )
    def test_conditional(self, evaluator, trues, expected):
        """Test material implication."""
        assignment = {Variable(v) for v in trues}
        assert evaluator.evaluate(Conditional(p, q), assignment) is expected

    @pytest.mark.parametrize(
        "trues,expected",
        [(set(), True), ({"p"}, False), ({"q"}, False), ({"p", "q"}, True)],
    )
    def test_biconditional(self, evaluator, trues, expected):
        """Test that biconditional is equality of truth values."""
        assignment = {Variable(v) for v in trues}
        assert evaluator.evaluate(Biconditional(p, q), assignment) is expected

    def test_and_or_negation(self, evaluator):
        """Test the remaining connectives."""
        assert evaluator.evaluate(And(p, q), {p, q}) is True
        assert evaluator.evaluate(And(p, q), {p}) is False
        assert evaluator.evaluate(Or(p, q), {q}) is True
        assert evaluator.evaluate(Or(p, q), set()) is False
        assert evaluator.evaluate(Negated(Negated(p)), {p}) is True

    def test_eval_method(self):
        """Test Expression.eval delegates to the evaluator."""
        assert Or(p, Negated(q)).eval(set()) is True

    def test_shared_default_instances(self):
        """Test that Expression methods reuse one evaluator and one printer."""
        assert _default_evaluator() is _default_evaluator()
        assert isinstance(_default_evaluator(), ExpressionEvaluator)
        assert _default_printer() is _default_printer()
        assert isinstance(_default_printer(), ExpressionPrinter)

    def test_deep_tree(self, evaluator):
        """Test a tree far deeper than the recursion limit."""
        expr = r
        for _ in range(5000):
            expr = Conditional(p, Negated(Negated(expr)))
        assert evaluator.evaluate(expr, {r}) is True
        assert evaluator.evaluate(expr, {p}) is False
        assert expr.eval(set()) is True

    def test_deep_modal_not_evaluated(self, evaluator):
        """Test that a modal operator deep in the tree is still rejected."""
        expr = Necessary(p)
        for _ in range(5000):
            expr = Negated(expr)
        with pytest.raises(NotImplementedError):
            evaluator.evaluate(expr, {p})

    def test_modal_not_evaluated(self, evaluator):
        """Test that modal operators have no truth-functional value."""
        with pytest.raises(NotImplementedError):
            evaluator.evaluate(Necessary(p), {p})

    def test_find_counterexample(self, evaluator):
        """Test that the falsifying assignment is reported."""
        assert evaluator.find_counterexample(Or(p, q)) == frozenset()
        assert evaluator.find_counterexample(Or(p, Negated(p))) is None

    def test_is_satisfiable(self, evaluator):
        """Test satisfiability."""
        assert evaluator.is_satisfiable(And(p, q)) is True
        assert evaluator.is_satisfiable(And(p, Negated(p))) is False


class TestTautology:
    """Tests for tautology checking."""

    @pytest.mark.parametrize(
        "text",
        [
            "p ^ q -> p",
            "p v ~p",
            "~(p ^ q) <-> (~p v ~q)",
            "~(p ^ q) <-> ~p v ~q",
            "p -> q -> p",
            "(p -> q) ^ (q -> r) -> (p -> r)",
        ],
    )
    def test_tautologies(self, text):
        """Test formulas true under every assignment."""
        assert parse_infix(text).is_tautology() is True

    @pytest.mark.parametrize("text", ["p ^ q", "p", "p -> q", "p ^ ~p", "p v q"])
    def test_non_tautologies(self, text):
        """Test that a formula false under some assignment is rejected."""
        assert parse_infix(text).is_tautology() is False

    def test_satisfiable_is_not_enough(self):
        """Test that one satisfying assignment does not make a tautology."""
        expr = parse_infix("p ^ q")
        assert expr.eval({p, q}) is True
        assert expr.is_tautology() is False

    @pytest.mark.parametrize("text", ["p ^ q -> p", "p ^ q", "p <-> ~q", "(p v q) ^ r"])
    def test_matches_universal_quantification(self, text):
        """Test is_tautology against evaluation over every subset."""
        expr = parse_infix(text)
        expected = all(expr.eval(s) for s in PowerSet(expr.variables()))
        assert expr.is_tautology() is expected

    def test_deep_tautology(self):
        """Test a tautology nested far deeper than the recursion limit."""
        expr = Or(r, Negated(r))
        for _ in range(3000):
            expr = Conditional(p, expr)
        assert expr.is_tautology() is True


class TestTheorem:
    """Tests for the Theorem variants."""

    def test_variants(self):
        """Test the judgment flag of each variant."""
        assert Proves((p,), q).proves is True
        assert DoesNotProve((p,), q).proves is False

    def test_variants_differ(self):
        """Test that Proves and DoesNotProve never compare equal."""
        assert Proves((p,), q) != DoesNotProve((p,), q)
        assert Proves([p], q) == Proves((p,), q)

    def test_empty_assumptions(self):
        """Test that assumptions may be empty."""
        theorem = Proves((), p)
        assert theorem.assumptions == ()
        assert theorem.expressions() == [p]

    def test_variables(self):
        """Test variables across assumptions and conclusion."""
        assert Proves((p, Necessary(q)), r).variables() == {p, q, r}
