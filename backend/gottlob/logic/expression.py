"""
Expression model for propositional and modal formulas.

Expressions are immutable trees built bottom-up by the parsers. Equality
is structural, so two parses of the same formula compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import AbstractSet, ClassVar, FrozenSet, List, Tuple


class Expression:
    """Base class for every formula node."""

    @property
    def children(self) -> Tuple["Expression", ...]:
        """Direct sub-expressions, left to right."""
        return ()

    def variables(self) -> FrozenSet["Variable"]:
        """Collect every distinct variable appearing in this expression."""
        found = set()
        stack: List[Expression] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Variable):
                found.add(node)
            else:
                stack.extend(node.children)
        return frozenset(found)

    def eval(self, trues: AbstractSet["Variable"]) -> bool:
        """
        Evaluate under an assignment.

        Args:
            trues: The variables considered true; all others are false.

        Returns:
            The truth value of the expression.
        """
        return _default_evaluator().evaluate(self, trues)

    def is_tautology(self) -> bool:
        """Truth-table check; exponential in the number of variables."""
        return _default_evaluator().is_tautology(self)

    def __str__(self) -> str:
        return _default_printer().render(self)


@dataclass(frozen=True, order=True)
class Variable(Expression):
    """A single-character propositional variable."""

    name: str

    def __post_init__(self):
        if len(self.name) != 1:
            raise ValueError(f"Variable name must be one character, got {self.name!r}")

    def variables(self) -> FrozenSet["Variable"]:
        return frozenset([self])

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """A connective applied to a single operand."""

    operand: Expression

    @property
    def children(self) -> Tuple[Expression, ...]:
        return (self.operand,)


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """A connective joining two operands."""

    left: Expression
    right: Expression

    @property
    def children(self) -> Tuple[Expression, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class Negated(UnaryExpression):
    pass


@dataclass(frozen=True)
class Necessary(UnaryExpression):
    """Modal box. Only produced by the modal dialect."""

    pass


@dataclass(frozen=True)
class Possible(UnaryExpression):
    """Modal diamond. Only produced by the modal dialect."""

    pass


@dataclass(frozen=True)
class And(BinaryExpression):
    pass


@dataclass(frozen=True)
class Or(BinaryExpression):
    pass


@dataclass(frozen=True)
class Conditional(BinaryExpression):
    pass


@dataclass(frozen=True)
class Biconditional(BinaryExpression):
    pass


MODAL_TYPES = (Necessary, Possible)


@dataclass(frozen=True)
class Theorem:
    """
    A sequent judgment over formulas.

    The order of assumptions is kept for display; it carries no logical
    weight. Build one of the ``Proves`` or ``DoesNotProve`` variants.
    """

    assumptions: Tuple[Expression, ...]
    conclusion: Expression

    proves: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, "assumptions", tuple(self.assumptions))

    def expressions(self) -> List[Expression]:
        """Assumptions followed by the conclusion."""
        return [*self.assumptions, self.conclusion]

    def variables(self) -> FrozenSet[Variable]:
        found: FrozenSet[Variable] = frozenset()
        for expr in self.expressions():
            found = found | expr.variables()
        return found

    def __str__(self) -> str:
        return _default_printer().render_theorem(self)


@dataclass(frozen=True)
class Proves(Theorem):
    """assumptions ⊢ conclusion"""

    proves: ClassVar[bool] = True


@dataclass(frozen=True)
class DoesNotProve(Theorem):
    """assumptions ⊬ conclusion"""

    proves: ClassVar[bool] = False


# The evaluator and printer modules import this one, so the shared
# instances are built on first use.
@lru_cache(maxsize=None)
def _default_evaluator():
    from .evaluator import ExpressionEvaluator

    return ExpressionEvaluator()


@lru_cache(maxsize=None)
def _default_printer():
    from .printer import ExpressionPrinter

    return ExpressionPrinter()
