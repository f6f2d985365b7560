"""
Gottlob: a small workbench for propositional and modal logic.

Parses formulas, renders them canonically, and decides classical
tautologies by truth table.
"""

from .config import GottlobConfig, load_config
from .exceptions import ConfigError, GottlobError, ParseError
from .logic import (
    ClassicalLogic,
    Expression,
    Logic,
    LogicKind,
    ModalLogic,
    Theorem,
    Variable,
    get_logic,
    is_valid_theorem,
    parse_infix,
    parse_reverse_polish,
    parse_sequent,
)

__version__ = "1.0.0"
__all__ = [
    "ClassicalLogic",
    "ConfigError",
    "Expression",
    "GottlobConfig",
    "GottlobError",
    "Logic",
    "LogicKind",
    "ModalLogic",
    "ParseError",
    "Theorem",
    "Variable",
    "get_logic",
    "is_valid_theorem",
    "load_config",
    "parse_infix",
    "parse_reverse_polish",
    "parse_sequent",
]
