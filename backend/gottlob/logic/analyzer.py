"""
Truth-Table Analyzer.

Tabulates an expression over every assignment of its variables and
classifies it as a tautology, a contradiction, or contingent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .evaluator import ExpressionEvaluator
from .expression import Expression

logger = logging.getLogger(__name__)


@dataclass
class TruthTableRow:
    """One assignment and the value it produces."""

    assignment: Dict[str, bool]
    value: bool


@dataclass
class TruthTableResult:
    """Result of truth-table analysis."""

    expression: str
    variables: List[str] = field(default_factory=list)
    rows: List[TruthTableRow] = field(default_factory=list)

    @property
    def is_tautology(self) -> bool:
        return bool(self.rows) and all(row.value for row in self.rows)

    @property
    def is_satisfiable(self) -> bool:
        return any(row.value for row in self.rows)

    @property
    def is_contradiction(self) -> bool:
        return bool(self.rows) and not self.is_satisfiable

    @property
    def counterexample(self) -> Optional[Dict[str, bool]]:
        """The first assignment that makes the expression false."""
        for row in self.rows:
            if not row.value:
                return row.assignment
        return None

    @property
    def classification(self) -> str:
        # A table with no rows has no verdict.
        if not self.rows:
            return "empty"
        if self.is_tautology:
            return "tautology"
        if self.is_contradiction:
            return "contradiction"
        return "contingent"

    def summary(self) -> str:
        """Generate a plain-text table with a verdict line."""
        header = " ".join(self.variables)
        lines = [f"{header} | {self.expression}" if header else self.expression]
        for row in self.rows:
            cells = " ".join("T" if row.assignment[v] else "F" for v in self.variables)
            value = "T" if row.value else "F"
            lines.append(f"{cells} | {value}" if cells else value)
        lines.append(f"Result: {self.classification}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "expression": self.expression,
            "variables": self.variables,
            "rows": [
                {"assignment": row.assignment, "value": row.value}
                for row in self.rows
            ],
            "is_tautology": self.is_tautology,
            "is_satisfiable": self.is_satisfiable,
            "is_contradiction": self.is_contradiction,
            "counterexample": self.counterexample,
        }


class TruthTableAnalyzer:
    """Builds truth tables for classical expressions."""

    def __init__(self, evaluator: Optional[ExpressionEvaluator] = None):
        self.evaluator = evaluator or ExpressionEvaluator()

    def analyze(self, expr: Expression) -> TruthTableResult:
        """
        Analyze an expression.

        Args:
            expr: A classical expression.

        Returns:
            TruthTableResult with one row per assignment, in enumeration order.
        """
        variables = sorted(expr.variables())
        result = TruthTableResult(
            expression=str(expr),
            variables=[v.name for v in variables],
        )

        for trues, value in self.evaluator.evaluate_all(expr):
            assignment = {v.name: v in trues for v in variables}
            result.rows.append(TruthTableRow(assignment=assignment, value=value))

        logger.debug(
            "analyzed %s: %d rows, %s",
            result.expression,
            len(result.rows),
            result.classification,
        )
        return result
