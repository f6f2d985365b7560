"""
Expression Evaluator.

Evaluates expressions under truth assignments and decides tautologies
by exhaustive enumeration of assignments.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterator, List, Optional, Tuple

from .expression import (
    And,
    Biconditional,
    Conditional,
    Expression,
    Negated,
    Or,
    Variable,
    MODAL_TYPES,
)
from .powerset import PowerSet

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """
    Two-valued evaluator for propositional expressions.

    An assignment is the set of variables taken to be true; every other
    variable is false. Modal operators have no truth-functional meaning
    here and are rejected.
    """

    def evaluate(self, expr: Expression, trues: AbstractSet[Variable]) -> bool:
        """
        Evaluate an expression.

        Args:
            expr: The expression to evaluate.
            trues: Variables considered true.

        Returns:
            The truth value.

        Raises:
            NotImplementedError: If the expression contains a modal operator.
        """
        values: List[bool] = []
        stack: List[Tuple[Expression, bool]] = [(expr, False)]
        while stack:
            node, ready = stack.pop()
            if isinstance(node, Variable):
                values.append(node in trues)
                continue

            if isinstance(node, MODAL_TYPES):
                raise NotImplementedError(
                    f"{type(node).__name__} has no truth-functional semantics"
                )

            if not isinstance(node, (Negated, And, Or, Conditional, Biconditional)):
                raise TypeError(f"Not an expression: {node!r}")

            if not ready:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
                continue

            if isinstance(node, Negated):
                values.append(not values.pop())
                continue

            right = values.pop()
            left = values.pop()
            values.append(self._connect(node, left, right))

        return values[0]

    @staticmethod
    def _connect(expr: Expression, left: bool, right: bool) -> bool:
        if isinstance(expr, And):
            return left and right
        if isinstance(expr, Or):
            return left or right
        if isinstance(expr, Conditional):
            return not left or right
        return left == right

    def assignments(self, expr: Expression) -> Iterator[frozenset]:
        """Every assignment over the expression's variables, empty set first."""
        return PowerSet(sorted(expr.variables()))

    def evaluate_all(self, expr: Expression) -> List[Tuple[frozenset, bool]]:
        """Pair each assignment with the value it gives the expression."""
        return [(trues, self.evaluate(expr, trues)) for trues in self.assignments(expr)]

    def find_counterexample(self, expr: Expression) -> Optional[frozenset]:
        """Return the first assignment making ``expr`` false, if any."""
        for trues in self.assignments(expr):
            if not self.evaluate(expr, trues):
                return trues
        return None

    def is_tautology(self, expr: Expression) -> bool:
        """
        True iff the expression holds under every assignment.

        An expression without variables is checked under the empty
        assignment only.
        """
        logger.debug("checking tautology over %d variable(s)", len(expr.variables()))
        return all(self.evaluate(expr, trues) for trues in self.assignments(expr))

    def is_satisfiable(self, expr: Expression) -> bool:
        """True iff some assignment makes the expression true."""
        return any(self.evaluate(expr, trues) for trues in self.assignments(expr))
