"""Parse errors raised by the tokenizer and the version/condition parsers."""

from enum import Enum
from typing import Any, Tuple


class ParseErrorKind(Enum):
    """Kinds of parse failure."""
    UNEXPECTED = "Unexpected"
    EMPTY_INPUT = "EmptyInput"
    EMPTY_TOKEN_LIST = "EmptyTokenList"
    INVALID_TOKEN = "InvalidToken"
    INVALID_TOKEN_AT = "InvalidTokenAt"
    MISSING_SYMBOL_AT = "MissingSymbolAt"


class ParseError(ValueError):
    """Base class for all parse failures.

    Parsing is all-or-nothing: no partial value is ever returned alongside
    an error.
    """

    kind: ParseErrorKind = ParseErrorKind.UNEXPECTED

    def _payload(self) -> Tuple[Any, ...]:
        return ()

    def __str__(self) -> str:
        payload = self._payload()
        if not payload:
            return self.kind.value
        return f"{self.kind.value}({', '.join(repr(p) for p in payload)})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(p) for p in self._payload())})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind == other.kind and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((self.kind, self._payload()))


class UnexpectedError(ParseError):
    """Internal grammar invariant violated while building a range."""
    kind = ParseErrorKind.UNEXPECTED


class EmptyInputError(ParseError):
    """Input was blank after trimming."""
    kind = ParseErrorKind.EMPTY_INPUT


class EmptyTokenListError(ParseError):
    """Input (or a sub-sequence of it) produced no tokens."""
    kind = ParseErrorKind.EMPTY_TOKEN_LIST


class InvalidTokenError(ParseError):
    """Unrecognized character during tokenization."""
    kind = ParseErrorKind.INVALID_TOKEN

    def __init__(self, char: str):
        super().__init__(char)
        self.char = char

    def _payload(self) -> Tuple[Any, ...]:
        return (self.char,)


class InvalidTokenAtError(ParseError):
    """Token is lexically valid but not allowed at this token index."""
    kind = ParseErrorKind.INVALID_TOKEN_AT

    def __init__(self, index: int):
        super().__init__(index)
        self.index = index

    def _payload(self) -> Tuple[Any, ...]:
        return (self.index,)


class MissingSymbolAtError(ParseError):
    """A required component was never supplied."""
    kind = ParseErrorKind.MISSING_SYMBOL_AT

    def __init__(self, index: int):
        super().__init__(index)
        self.index = index

    def _payload(self) -> Tuple[Any, ...]:
        return (self.index,)
