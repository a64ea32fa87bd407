"""Semantic version parsing and version-condition matching.

Typical use::

    from semcheck.versioning import Condition, Version

    Condition.parse(">=1.2.3 <2.0.0 || ^3").compare(Version.parse("3.4.0"))
"""

from .errors import (
    ParseError,
    ParseErrorKind,
    UnexpectedError,
    EmptyInputError,
    EmptyTokenListError,
    InvalidTokenError,
    InvalidTokenAtError,
    MissingSymbolAtError,
)
from .models import (
    Version,
    RangeOperator,
    ConditionRange,
    Condition,
    AnyCondition,
    SimpleCondition,
    CompatibleCondition,
    CompatibleWithMostRecentCondition,
    RangeCondition,
    CompositeCondition,
)
from .parser import (
    build_version_from_tokens,
    build_condition_from_tokens,
    build_range_condition_from_tokens,
    parse_version,
    parse_condition,
)
from .tokens import Token, TokenKind, tokenize

__all__ = [
    "ParseError",
    "ParseErrorKind",
    "UnexpectedError",
    "EmptyInputError",
    "EmptyTokenListError",
    "InvalidTokenError",
    "InvalidTokenAtError",
    "MissingSymbolAtError",
    "Version",
    "RangeOperator",
    "ConditionRange",
    "Condition",
    "AnyCondition",
    "SimpleCondition",
    "CompatibleCondition",
    "CompatibleWithMostRecentCondition",
    "RangeCondition",
    "CompositeCondition",
    "build_version_from_tokens",
    "build_condition_from_tokens",
    "build_range_condition_from_tokens",
    "parse_version",
    "parse_condition",
    "Token",
    "TokenKind",
    "tokenize",
]
