"""Lexical tokenization of version and condition strings."""

from enum import Enum
from typing import List, NamedTuple, Optional, Union

from .errors import InvalidTokenError

_U32_MAX = 0xFFFFFFFF

# Decorations accepted (once) at the start of the input.
_PREFIXES = ("=", "v")
_SEPARATORS = (" ", ",")


class TokenKind(Enum):
    """Lexical token kinds."""
    EMPTY = "empty"
    ASTERISK = "*"
    DOT = "."
    HYPHEN = "-"
    PLUS = "+"
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="
    CARET = "^"
    TILDE = "~"
    OR = "||"
    NUMBER = "number"
    ALPHANUMERIC = "alphanumeric"


class Token(NamedTuple):
    """A lexical token.

    ``value`` is set only for NUMBER and ALPHANUMERIC; ``text`` is the source
    lexeme, kept so identifiers like ``007`` survive verbatim.
    """
    kind: TokenKind
    value: Optional[Union[int, str]] = None
    text: Optional[str] = None

    @property
    def is_identifier(self) -> bool:
        return self.kind in (TokenKind.NUMBER, TokenKind.ALPHANUMERIC)


EMPTY = Token(TokenKind.EMPTY)

_SINGLE_CHAR_TOKENS = {
    "*": Token(TokenKind.ASTERISK),
    ".": Token(TokenKind.DOT),
    "-": Token(TokenKind.HYPHEN),
    "+": Token(TokenKind.PLUS),
    "~": Token(TokenKind.TILDE),
    "^": Token(TokenKind.CARET),
}


def number(value: int, text: Optional[str] = None) -> Token:
    return Token(TokenKind.NUMBER, value, str(value) if text is None else text)


def alphanumeric(value: str) -> Token:
    return Token(TokenKind.ALPHANUMERIC, value, value)


def _lexeme_token(lexeme: str) -> Token:
    """NUMBER when the lexeme is ASCII digits fitting in 32 bits, else ALPHANUMERIC."""
    if lexeme.isascii() and lexeme.isdigit():
        value = int(lexeme)
        if value <= _U32_MAX:
            return number(value, lexeme)
    return alphanumeric(lexeme)


def tokenize(text: str) -> List[Token]:
    """Split ``text`` into tokens.

    A single leading ``=`` or ``v`` is dropped; spaces and commas separate
    tokens and are otherwise ignored.

    Raises:
        InvalidTokenError: on any character outside the token alphabet.
    """
    text = text.strip()
    if text[:1] in _PREFIXES:
        text = text[1:]

    tokens: List[Token] = []
    i = 0
    length = len(text)
    while i < length:
        c = text[i]
        nxt = text[i + 1] if i + 1 < length else ""

        if c in _SEPARATORS:
            i += 1
        elif c in _SINGLE_CHAR_TOKENS:
            tokens.append(_SINGLE_CHAR_TOKENS[c])
            i += 1
        elif c == ">":
            if nxt == "=":
                tokens.append(Token(TokenKind.GREATER_EQUAL))
                i += 2
            else:
                tokens.append(Token(TokenKind.GREATER))
                i += 1
        elif c == "<":
            if nxt == "=":
                tokens.append(Token(TokenKind.LESS_EQUAL))
                i += 2
            else:
                tokens.append(Token(TokenKind.LESS))
                i += 1
        elif c == "|" and nxt == "|":
            tokens.append(Token(TokenKind.OR))
            i += 2
        elif c.isalnum():
            start = i
            i += 1
            has_non_digit = not c.isdigit()
            while i < length:
                ch = text[i]
                if ch.isalnum():
                    has_non_digit = has_non_digit or not ch.isdigit()
                elif not (ch == "-" and has_non_digit):
                    # hyphens after a pure digit run separate core from pre-release
                    break
                i += 1
            tokens.append(_lexeme_token(text[start:i]))
        else:
            raise InvalidTokenError(c)

    return tokens
