"""
Logic engine for Gottlob.

Provides expression parsing, evaluation, rendering and validity
checking for classical and modal formulas.
"""

from .analyzer import TruthTableAnalyzer, TruthTableResult, TruthTableRow
from .engine import (
    ClassicalLogic,
    Logic,
    LogicKind,
    LogicResult,
    ModalLogic,
    get_logic,
    is_valid_theorem,
)
from .evaluator import ExpressionEvaluator
from .expression import (
    And,
    Biconditional,
    Conditional,
    DoesNotProve,
    Expression,
    Necessary,
    Negated,
    Or,
    Possible,
    Proves,
    Theorem,
    Variable,
)
from .parser import (
    ExpressionParser,
    ReversePolishParser,
    SequentParser,
    parse_infix,
    parse_reverse_polish,
    parse_sequent,
)
from .powerset import PowerSet, powerset
from .printer import ExpressionPrinter, display

__all__ = [
    "And",
    "Biconditional",
    "ClassicalLogic",
    "Conditional",
    "DoesNotProve",
    "Expression",
    "ExpressionEvaluator",
    "ExpressionParser",
    "ExpressionPrinter",
    "Logic",
    "LogicKind",
    "LogicResult",
    "ModalLogic",
    "Necessary",
    "Negated",
    "Or",
    "Possible",
    "PowerSet",
    "Proves",
    "ReversePolishParser",
    "SequentParser",
    "Theorem",
    "TruthTableAnalyzer",
    "TruthTableResult",
    "TruthTableRow",
    "Variable",
    "display",
    "get_logic",
    "is_valid_theorem",
    "parse_infix",
    "parse_reverse_polish",
    "parse_sequent",
    "powerset",
]
