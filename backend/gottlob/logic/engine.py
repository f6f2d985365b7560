"""
Logic Engine.

The entry point for front ends: each logic parses a line of text and
reports its canonical rendering together with a validity verdict.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Tuple, Type, Union

from ..exceptions import ParseError
from .analyzer import TruthTableAnalyzer, TruthTableResult
from .expression import Expression, Proves, Theorem
from .grammar import MODAL
from .parser import (
    SequentParser,
    parse_infix,
    parse_reverse_polish,
    parse_with_fallback,
)
from .printer import ExpressionPrinter

if TYPE_CHECKING:
    from ..config import GottlobConfig

logger = logging.getLogger(__name__)

# (canonical rendering, is valid)
LogicResult = Tuple[str, bool]


class LogicKind(str, Enum):
    """The supported logics."""

    CLASSICAL = "classical"
    MODAL = "modal"


class Logic(ABC):
    """Shared interface of the supported logics."""

    kind: LogicKind

    def __init__(self, printer: Optional[ExpressionPrinter] = None):
        self.printer = printer or ExpressionPrinter()

    @abstractmethod
    def name(self) -> str:
        """Display name."""

    @abstractmethod
    def is_valid_theorem(self, text: str) -> LogicResult:
        """
        Parse ``text`` and decide whether it is valid.

        Returns:
            Tuple of (canonical_text, is_valid).

        Raises:
            ParseError: If the text cannot be parsed.
        """

    @classmethod
    def from_config(cls, config: "GottlobConfig") -> "Logic":
        """
        Build the logic a configuration selects.

        Raises:
            ValueError: If called on a concrete logic that the
                configuration does not select.
        """
        logic = get_logic(config)
        if not isinstance(logic, cls):
            raise ValueError(
                f"Configuration selects {config.logic!r}, not {cls.kind.value!r}"
            )
        return logic


class ClassicalLogic(Logic):
    """
    Classical propositional logic.

    A formula is valid when it is a tautology, decided by evaluating it
    under every assignment of its variables.
    """

    kind = LogicKind.CLASSICAL

    def __init__(
        self,
        printer: Optional[ExpressionPrinter] = None,
        reverse_polish_fallback: bool = True,
    ):
        super().__init__(printer)
        self.reverse_polish_fallback = reverse_polish_fallback
        self.analyzer = TruthTableAnalyzer()

    def name(self) -> str:
        return "Classical"

    def parse(self, text: str) -> Expression:
        """Parse infix, falling back to reverse-Polish if enabled."""
        parsers = [parse_infix]
        if self.reverse_polish_fallback:
            parsers.append(parse_reverse_polish)
        try:
            return parse_with_fallback(text, parsers)
        except ParseError as e:
            logger.debug("classical parse error for %r: %s", text, e)
            raise

    def is_valid_theorem(self, text: str) -> LogicResult:
        expr = self.parse(text)
        return self.printer.render(expr), expr.is_tautology()

    def analyze(self, text: str) -> TruthTableResult:
        """Parse ``text`` and build its truth table."""
        return self.analyzer.analyze(self.parse(text))


class ModalLogic(Logic):
    """
    Modal logic over sequents.

    Validity is not decided yet: every well-formed sequent is reported as
    valid.
    """

    kind = LogicKind.MODAL

    def __init__(self, printer: Optional[ExpressionPrinter] = None):
        super().__init__(printer)
        self.sequent_parser = SequentParser(MODAL)

    def name(self) -> str:
        return "Modal Logic"

    def parse(self, text: str) -> Theorem:
        """Parse a sequent; a bare formula is read as ``⊢ formula``."""
        try:
            return self.sequent_parser.parse(text)
        except ParseError as sequent_error:
            try:
                conclusion = parse_infix(text, MODAL)
            except ParseError:
                logger.debug("modal parse error for %r: %s", text, sequent_error)
                raise sequent_error from None
            return Proves((), conclusion)

    def is_valid_theorem(self, text: str) -> LogicResult:
        theorem = self.parse(text)
        # Validity is not checked; every parsed sequent is reported valid.
        return self.printer.render_theorem(theorem), True


LOGICS: Dict[LogicKind, Type[Logic]] = {
    LogicKind.CLASSICAL: ClassicalLogic,
    LogicKind.MODAL: ModalLogic,
}


def get_logic(selector: Union[str, LogicKind, "GottlobConfig", None] = None) -> Logic:
    """
    Build a logic by kind name, ``LogicKind``, or configuration.

    Args:
        selector: "classical", "modal", a LogicKind, a GottlobConfig, or
            None for classical with defaults.

    Returns:
        A ready-to-use Logic.
    """
    if selector is None:
        return ClassicalLogic()

    if isinstance(selector, (str, LogicKind)):
        try:
            kind = LogicKind(selector)
        except ValueError:
            raise ValueError(
                f"Unknown logic: {selector!r}. Expected one of "
                f"{[k.value for k in LogicKind]}"
            ) from None
        return LOGICS[kind]()

    config = selector
    printer = ExpressionPrinter.for_notation(config.notation)
    kind = LogicKind(config.logic)
    if kind is LogicKind.CLASSICAL:
        return ClassicalLogic(
            printer=printer,
            reverse_polish_fallback=config.reverse_polish_fallback,
        )
    return ModalLogic(printer=printer)


def is_valid_theorem(text: str, logic: Union[str, LogicKind] = LogicKind.CLASSICAL) -> LogicResult:
    """Convenience function to check a formula with a named logic."""
    return get_logic(logic).is_valid_theorem(text)
