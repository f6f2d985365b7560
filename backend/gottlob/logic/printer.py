"""
Canonical rendering of expressions and theorems.

Chains of the same associative connective are flattened into a single
parenthesized group, so ``And(And(a, b), c)`` prints as ``(a ∧ b ∧ c)``.
Every binary group is parenthesized, including the outermost one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple, Type

from .expression import (
    And,
    BinaryExpression,
    Biconditional,
    Conditional,
    Expression,
    Necessary,
    Negated,
    Or,
    Possible,
    Theorem,
    UnaryExpression,
    Variable,
)


@dataclass(frozen=True)
class GlyphTable:
    """Display symbols for each connective."""

    negation: str
    conjunction: str
    disjunction: str
    conditional: str
    biconditional: str
    necessary: str
    possible: str
    proves: str
    does_not_prove: str

    def for_type(self, expr_type: Type[Expression]) -> str:
        return getattr(self, _GLYPH_FIELDS[expr_type])


_GLYPH_FIELDS: Dict[Type[Expression], str] = {
    Negated: "negation",
    And: "conjunction",
    Or: "disjunction",
    Conditional: "conditional",
    Biconditional: "biconditional",
    Necessary: "necessary",
    Possible: "possible",
}

UNICODE_GLYPHS = GlyphTable(
    negation="¬",
    conjunction="∧",
    disjunction="∨",
    conditional="→",
    biconditional="↔",
    necessary="◻",
    possible="◇",
    proves="⊢",
    does_not_prove="⊬",
)

ASCII_GLYPHS = GlyphTable(
    negation="~",
    conjunction="^",
    disjunction="v",
    conditional="->",
    biconditional="<->",
    necessary="[]",
    possible="<>",
    proves="|-",
    does_not_prove="|/-",
)

GLYPH_TABLES: Dict[str, GlyphTable] = {
    "unicode": UNICODE_GLYPHS,
    "ascii": ASCII_GLYPHS,
}

# Connectives whose nested chains print as one flat group.
FLATTENED_TYPES = (And, Or, Biconditional)


class ExpressionPrinter:
    """Renders expressions and theorems to canonical text."""

    def __init__(self, glyphs: GlyphTable = UNICODE_GLYPHS):
        self.glyphs = glyphs

    @classmethod
    def for_notation(cls, notation: str) -> "ExpressionPrinter":
        """Build a printer from a notation name ("unicode" or "ascii")."""
        try:
            return cls(GLYPH_TABLES[notation])
        except KeyError:
            raise ValueError(
                f"Unknown notation: {notation!r}. Expected one of {sorted(GLYPH_TABLES)}"
            ) from None

    def render(self, expr: Expression) -> str:
        # Post-order walk with an explicit stack; formulas may nest deeper
        # than the interpreter's recursion limit.
        rendered: List[str] = []
        stack: List[Tuple[Expression, bool]] = [(expr, False)]
        while stack:
            node, ready = stack.pop()
            if isinstance(node, Variable):
                rendered.append(node.name)
                continue
            operands = self._operands(node)
            if not ready:
                stack.append((node, True))
                stack.extend((operand, False) for operand in reversed(operands))
                continue
            parts = rendered[len(rendered) - len(operands):]
            del rendered[len(rendered) - len(operands):]
            rendered.append(self._compose(node, parts))
        return rendered[0]

    @staticmethod
    def _operands(expr: Expression) -> List[Expression]:
        if isinstance(expr, FLATTENED_TYPES):
            return flatten(expr, type(expr))
        if isinstance(expr, (UnaryExpression, Conditional)):
            return list(expr.children)
        raise TypeError(f"Not an expression: {expr!r}")

    def _compose(self, expr: Expression, parts: List[str]) -> str:
        if isinstance(expr, Negated):
            # Binary operands carry their own parentheses already.
            if isinstance(expr.operand, (Variable, Negated, BinaryExpression)):
                return self.glyphs.negation + parts[0]
            return f"{self.glyphs.negation}({parts[0]})"

        if isinstance(expr, UnaryExpression):
            return self.glyphs.for_type(type(expr)) + parts[0]

        glue = f" {self.glyphs.for_type(type(expr))} "
        return f"({glue.join(parts)})"

    def render_theorem(self, theorem: Theorem) -> str:
        """Render as ``a, b ⊢ c``; with no assumptions, ``⊢ c``."""
        judgment = self.glyphs.proves if theorem.proves else self.glyphs.does_not_prove
        parts = []
        if theorem.assumptions:
            parts.append(", ".join(self.render(a) for a in theorem.assumptions))
        parts.append(judgment)
        parts.append(self.render(theorem.conclusion))
        return " ".join(parts)


def flatten(expr: Expression, expr_type: Type[BinaryExpression]) -> List[Expression]:
    """Unfold nested ``expr_type`` nodes into their operands, left to right."""
    operands: List[Expression] = []
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, expr_type):
            stack.append(node.right)
            stack.append(node.left)
        else:
            operands.append(node)
    return operands


def display(item) -> str:
    """Canonical Unicode rendering of an expression or theorem."""
    printer = ExpressionPrinter()
    if isinstance(item, Theorem):
        return printer.render_theorem(item)
    return printer.render(item)
