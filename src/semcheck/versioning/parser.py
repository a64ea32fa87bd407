"""Version and condition parsers.

Versions are built by a three-state machine (core, pre-release, metadata)
folded over the token sequence. Conditions are split on ``||`` and each
alternative is dispatched on its leading operator token.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence

from ..common.logging_utils import extra_context, is_debug_enabled

from .errors import (
    EmptyInputError,
    EmptyTokenListError,
    InvalidTokenAtError,
    MissingSymbolAtError,
    UnexpectedError,
)
from .models import (
    AnyCondition,
    CompatibleCondition,
    CompatibleWithMostRecentCondition,
    CompositeCondition,
    Condition,
    ConditionRange,
    RangeCondition,
    RangeOperator,
    SimpleCondition,
    Version,
)
from .tokens import EMPTY, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

_RANGE_OPERATORS = {
    TokenKind.GREATER: RangeOperator.GREATER,
    TokenKind.GREATER_EQUAL: RangeOperator.GREATER_EQUAL,
    TokenKind.LESS: RangeOperator.LESS,
    TokenKind.LESS_EQUAL: RangeOperator.LESS_EQUAL,
}
_UPPER_BOUND_KINDS = (TokenKind.LESS, TokenKind.LESS_EQUAL)
_LOWER_BOUND_KINDS = (TokenKind.GREATER, TokenKind.GREATER_EQUAL)


class ParsingState(Enum):
    """Segment the version builder is currently filling."""
    CORE = "core"
    PRE_RELEASE = "pre_release"
    METADATA = "metadata"


class _VersionBuilder:
    """Finite-state machine that consumes tokens one at a time.

    ``prev`` is the last consumed token of the current segment (EMPTY at the
    start of a segment); ``hyphens`` holds a run of hyphens waiting to prefix
    the next identifier.
    """

    def __init__(self):
        self.state = ParsingState.CORE
        self.prev: Token = EMPTY
        self.hyphens = ""
        self.major: Optional[int] = None
        self.minor: Optional[int] = None
        self.patch: Optional[int] = None
        self.pre_release: List[str] = []
        self.metadata: List[str] = []

    def feed(self, index: int, token: Token) -> None:
        if self.state is ParsingState.CORE:
            next_state = self._feed_core(index, token)
        elif self.state is ParsingState.PRE_RELEASE:
            next_state = self._feed_segment(index, token, self.pre_release)
        else:
            next_state = self._feed_segment(index, token, self.metadata)

        if next_state is not None:
            self.state = next_state
            self.prev = EMPTY
            self.hyphens = ""
        else:
            self.prev = token

    def _feed_core(self, index: int, token: Token) -> Optional[ParsingState]:
        kind, prev = token.kind, self.prev.kind
        if kind is TokenKind.DOT:
            if prev is TokenKind.NUMBER and self.patch is None:
                return None
        elif kind is TokenKind.NUMBER:
            if prev is TokenKind.EMPTY:
                self.major = token.value
                return None
            if prev is TokenKind.DOT and self.minor is None:
                self.minor = token.value
                return None
            if prev is TokenKind.DOT and self.patch is None:
                self.patch = token.value
                return None
        elif kind is TokenKind.HYPHEN and prev is not TokenKind.DOT:
            return ParsingState.PRE_RELEASE
        elif kind is TokenKind.PLUS and prev is not TokenKind.DOT:
            return ParsingState.METADATA
        raise InvalidTokenAtError(index)

    def _feed_segment(self, index: int, token: Token, target: List[str]) -> Optional[ParsingState]:
        kind, prev = token.kind, self.prev.kind
        if kind is TokenKind.DOT:
            if self.prev.is_identifier:
                return None
            if prev is TokenKind.HYPHEN:
                # a bare run of hyphens is an identifier of its own
                target.append(self.hyphens)
                self.hyphens = ""
                return None
        elif kind is TokenKind.HYPHEN:
            if prev in (TokenKind.DOT, TokenKind.HYPHEN):
                self.hyphens += "-"
                return None
        elif token.is_identifier:
            if prev in (TokenKind.EMPTY, TokenKind.DOT, TokenKind.HYPHEN):
                target.append(f"{self.hyphens}{token.text}")
                self.hyphens = ""
                return None
        elif kind is TokenKind.PLUS:
            if self.state is ParsingState.PRE_RELEASE and prev is not TokenKind.DOT:
                return ParsingState.METADATA
        raise InvalidTokenAtError(index)

    def build(self) -> Version:
        if self.major is None:
            raise MissingSymbolAtError(0)
        return Version(
            major=self.major,
            minor=self.minor or 0,
            patch=self.patch or 0,
            pre_release=self.pre_release,
            metadata=self.metadata,
        )


def build_version_from_tokens(tokens: Sequence[Token]) -> Version:
    """Build a Version from an already tokenized sequence.

    Error indices are positions within ``tokens``.

    Raises:
        EmptyTokenListError: if ``tokens`` is empty.
        InvalidTokenAtError: if a token is out of place.
        MissingSymbolAtError: if no major number was supplied.
    """
    if not tokens:
        raise EmptyTokenListError()

    builder = _VersionBuilder()
    for index, token in enumerate(tokens):
        builder.feed(index, token)
    return builder.build()


def parse_version(text: str) -> Version:
    """Parse version text into a Version."""
    text = text.strip()
    if not text:
        raise EmptyInputError()
    return build_version_from_tokens(tokenize(text))


def _range_bound(kind: TokenKind, tokens: Sequence[Token]) -> ConditionRange:
    return ConditionRange(_RANGE_OPERATORS[kind], build_version_from_tokens(tokens))


def build_range_condition_from_tokens(tokens: Sequence[Token]) -> RangeCondition:
    """Build a range from ``>``/``>=`` and an optional ``<``/``<=`` clause.

    Raises:
        UnexpectedError: if the sequence does not start with a lower bound.
    """
    if not tokens or tokens[0].kind not in _LOWER_BOUND_KINDS:
        raise UnexpectedError()

    lower_kind = tokens[0].kind
    upper_index = next(
        (i for i, t in enumerate(tokens) if t.kind in _UPPER_BOUND_KINDS),
        None,
    )
    if upper_index is None:
        return RangeCondition(_range_bound(lower_kind, tokens[1:]), None)

    lower = _range_bound(lower_kind, tokens[1:upper_index])
    trailing = tokens[upper_index:]
    if trailing[0].kind not in _UPPER_BOUND_KINDS:
        raise UnexpectedError()
    return RangeCondition(lower, _range_bound(trailing[0].kind, trailing[1:]))


def _split_alternatives(tokens: Sequence[Token]) -> List[Sequence[Token]]:
    segments: List[Sequence[Token]] = []
    start = 0
    for i, token in enumerate(tokens):
        if token.kind is TokenKind.OR:
            segments.append(tokens[start:i])
            start = i + 1
    segments.append(tokens[start:])
    return segments


def _build_alternative(tokens: Sequence[Token]) -> Condition:
    if not tokens:
        raise EmptyTokenListError()

    head = tokens[0].kind
    if head is TokenKind.ASTERISK:
        if len(tokens) > 1:
            raise InvalidTokenAtError(1)
        return AnyCondition()
    if head is TokenKind.CARET:
        return CompatibleWithMostRecentCondition(build_version_from_tokens(tokens[1:]))
    if head is TokenKind.TILDE:
        return CompatibleCondition(build_version_from_tokens(tokens[1:]))
    if head in _LOWER_BOUND_KINDS:
        return build_range_condition_from_tokens(tokens)
    return SimpleCondition(build_version_from_tokens(tokens))


def build_condition_from_tokens(tokens: Sequence[Token]) -> Condition:
    """Build a Condition; any ``||`` yields a CompositeCondition of every alternative."""
    if not tokens:
        raise EmptyTokenListError()

    if any(t.kind is TokenKind.OR for t in tokens):
        return CompositeCondition([_build_alternative(seg) for seg in _split_alternatives(tokens)])
    return _build_alternative(tokens)


def parse_condition(text: str) -> Condition:
    """Parse condition text into a Condition."""
    text = text.strip()
    if not text:
        raise EmptyInputError()

    condition = build_condition_from_tokens(tokenize(text))
    if is_debug_enabled(logger):
        logger.debug(
            "Parsed condition",
            extra=extra_context(
                event="parse",
                component="versioning",
                action="parse_condition",
                outcome=type(condition).__name__,
                target=text,
            ),
        )
    return condition
