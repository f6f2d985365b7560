"""
Expression Parser.

Parses infix formulas by precedence climbing, prefix (reverse-Polish)
formulas by recursive descent, and modal sequents such as
``[]p, []q |- [](p ^ q)``.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple, Type

from ..exceptions import ParseError
from .expression import (
    And,
    BinaryExpression,
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
    UnaryExpression,
    Variable,
)
from .grammar import (
    BINARY_OPERATORS,
    CLASSICAL,
    CLASSICAL_REVERSE_POLISH,
    JUDGMENTS,
    MODAL,
    PRECEDENCE,
    Assoc,
    Dialect,
    Token,
    TokenKind,
    tokenize,
)

logger = logging.getLogger(__name__)

BINARY_NODES: Dict[TokenKind, Type[BinaryExpression]] = {
    TokenKind.AND: And,
    TokenKind.OR: Or,
    TokenKind.COND: Conditional,
    TokenKind.BICOND: Biconditional,
}

UNARY_NODES: Dict[TokenKind, Type[UnaryExpression]] = {
    TokenKind.NOT: Negated,
    TokenKind.NEC: Necessary,
    TokenKind.POS: Possible,
}


class TokenStream:
    """Cursor over a token list."""

    def __init__(self, text: str, tokens: List[Token]):
        self.text = text
        self.tokens = tokens
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise self.error("unexpected end of input")
        self.index += 1
        return token

    def expect(self, kind: TokenKind) -> Token:
        token = self.advance()
        if token.kind is not kind:
            raise self.error(f"expected {kind.value}, found {token.text!r}", token)
        return token

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def expect_end(self) -> None:
        token = self.peek()
        if token is not None:
            raise self.error(f"unexpected trailing {token.text!r}", token)

    def error(self, message: str, token: Optional[Token] = None) -> ParseError:
        position = token.position if token is not None else len(self.text)
        return ParseError(message, position, self.text)


def too_deep(text: str) -> ParseError:
    """Error for input nested past the interpreter's recursion limit."""
    return ParseError("expression nested too deeply", None, text)


class ExpressionParser:
    """
    Infix parser.

    Converts formulas like:
        "p ^ q -> p"
        "a ^ b v c -> d <-> e"

    Into expression trees, honouring precedence (``~`` and modal
    operators, then ``^``, ``v``, ``->``, ``<->``) and associativity
    (``->`` groups to the right, the rest to the left).
    """

    def __init__(self, dialect: Dialect = CLASSICAL):
        self.dialect = dialect

    def parse(self, text: str) -> Expression:
        """
        Parse a complete formula.

        Args:
            text: The formula text.

        Returns:
            The expression tree.

        Raises:
            ParseError: If the text is not a well-formed formula.
        """
        stream = self.open_stream(text)
        try:
            expr = self.parse_expression(stream)
        except RecursionError:
            raise too_deep(text) from None
        stream.expect_end()
        return expr

    def validate(self, text: str) -> Tuple[bool, Optional[str]]:
        """
        Check a formula without keeping the result.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            self.parse(text)
            return True, None
        except ParseError as e:
            return False, str(e)

    def open_stream(self, text: str) -> TokenStream:
        if not isinstance(text, str):
            raise ParseError(f"Expected string expression, got {type(text).__name__}")
        stream = TokenStream(text, tokenize(text, self.dialect))
        if stream.at_end():
            raise ParseError("empty expression", 0, text)
        return stream

    def parse_expression(self, stream: TokenStream, min_precedence: int = 1) -> Expression:
        """Parse terms joined by binary operators of at least ``min_precedence``."""
        lhs = self.parse_term(stream)

        while True:
            token = stream.peek()
            if token is None or token.kind not in BINARY_OPERATORS:
                break
            precedence, assoc = PRECEDENCE[token.kind]
            if precedence < min_precedence:
                break
            stream.advance()
            next_min = precedence + 1 if assoc is Assoc.LEFT else precedence
            rhs = self.parse_expression(stream, next_min)
            lhs = self._fold(lhs, token, rhs)

        return lhs

    def parse_term(self, stream: TokenStream) -> Expression:
        """Parse a literal, a unary application, or a grouped expression."""
        # Prefix runs such as ``~~~~p`` are collected in a loop.
        prefixes: List[Type[UnaryExpression]] = []
        token = stream.advance()
        while token.kind in UNARY_NODES:
            prefixes.append(UNARY_NODES[token.kind])
            token = stream.advance()

        term = self._parse_atom(stream, token)
        for node in reversed(prefixes):
            term = node(term)
        return term

    def _parse_atom(self, stream: TokenStream, token: Token) -> Expression:
        if token.kind is TokenKind.LITERAL:
            return Variable(token.text)

        if token.kind is TokenKind.LPAREN:
            inner = self.parse_expression(stream)
            stream.expect(TokenKind.RPAREN)
            return inner

        raise stream.error(f"unexpected {token.text!r}", token)

    @staticmethod
    def _fold(lhs: Expression, op: Token, rhs: Expression) -> Expression:
        node = BINARY_NODES.get(op.kind)
        if node is None:
            # The grammar only lets binary operators reach here.
            raise RuntimeError(f"cannot fold operator {op.kind}")
        return node(lhs, rhs)


class ReversePolishParser:
    """
    Prefix-notation parser: ``-> ^ p q ~ q`` is ``(p ^ q) -> ~q``.

    Operators precede their operands, so no precedence table or grouping
    is needed.
    """

    def __init__(self, dialect: Dialect = CLASSICAL_REVERSE_POLISH):
        self.dialect = dialect

    def parse(self, text: str) -> Expression:
        if not isinstance(text, str):
            raise ParseError(f"Expected string expression, got {type(text).__name__}")
        stream = TokenStream(text, tokenize(text, self.dialect))
        if stream.at_end():
            raise ParseError("empty expression", 0, text)
        try:
            expr = self._parse_value(stream)
        except RecursionError:
            raise too_deep(text) from None
        stream.expect_end()
        return expr

    def _parse_value(self, stream: TokenStream) -> Expression:
        negations = 0
        token = stream.advance()
        while token.kind is TokenKind.NOT:
            negations += 1
            token = stream.advance()

        value = self._parse_operand(stream, token)
        for _ in range(negations):
            value = Negated(value)
        return value

    def _parse_operand(self, stream: TokenStream, token: Token) -> Expression:
        if token.kind is TokenKind.LITERAL:
            return Variable(token.text)

        if token.kind in BINARY_NODES:
            left = self._parse_value(stream)
            right = self._parse_value(stream)
            return BINARY_NODES[token.kind](left, right)

        raise stream.error(f"unexpected {token.text!r}", token)


class SequentParser:
    """
    Parser for modal sequents.

    The last formula is the conclusion, the token before it the judgment
    (``|-`` proves, ``|/-`` does not prove), and anything before that a
    comma-separated list of assumptions in written order.
    """

    def __init__(self, dialect: Dialect = MODAL):
        self.dialect = dialect
        self.expression_parser = ExpressionParser(dialect)

    def parse(self, text: str) -> Theorem:
        stream = self.expression_parser.open_stream(text)
        try:
            return self._parse_theorem(stream)
        except RecursionError:
            raise too_deep(text) from None

    def _parse_theorem(self, stream: TokenStream) -> Theorem:
        assumptions: List[Expression] = []
        token = stream.peek()
        if token.kind not in JUDGMENTS:
            assumptions.append(self.expression_parser.parse_expression(stream))
            while stream.peek() is not None and stream.peek().kind is TokenKind.COMMA:
                stream.advance()
                assumptions.append(self.expression_parser.parse_expression(stream))

        judgment = stream.advance()
        if judgment.kind not in JUDGMENTS:
            raise stream.error(f"expected a judgment, found {judgment.text!r}", judgment)

        conclusion = self.expression_parser.parse_expression(stream)
        stream.expect_end()

        theorem_type = Proves if judgment.kind is TokenKind.PROVES else DoesNotProve
        return theorem_type(tuple(assumptions), conclusion)


_infix_parsers: Dict[Dialect, ExpressionParser] = {
    CLASSICAL: ExpressionParser(CLASSICAL),
    MODAL: ExpressionParser(MODAL),
}
_reverse_polish_parser = ReversePolishParser()
_sequent_parser = SequentParser()


def parse_infix(text: str, dialect: Dialect = CLASSICAL) -> Expression:
    """Parse an infix formula in the given dialect."""
    parser = _infix_parsers.get(dialect) or ExpressionParser(dialect)
    return parser.parse(text)


def parse_reverse_polish(text: str) -> Expression:
    """Parse a classical formula written operator-first."""
    return _reverse_polish_parser.parse(text)


def parse_sequent(text: str) -> Theorem:
    """Parse a modal sequent."""
    return _sequent_parser.parse(text)


def parse_with_fallback(
    text: str, parsers: List[Callable[[str], Expression]]
) -> Expression:
    """
    Try each parser in turn and return the first success.

    Raises:
        ParseError: The first parser's error if every parser fails.
    """
    error: Optional[ParseError] = None
    for parse in parsers:
        try:
            return parse(text)
        except ParseError as e:
            logger.debug("%s rejected %r: %s", getattr(parse, "__name__", parse), text, e)
            if error is None:
                error = e
    if error is None:
        raise ValueError("No parsers given")
    raise error
