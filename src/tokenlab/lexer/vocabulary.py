# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fixed vocabulary of the teaching language and word classification.

All predicates are pure: they only test membership in the fixed sets below
or match a word against a lexical pattern.
"""

import enum
import re

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the scanner."""

    KEYWORD = "keyword"
    DATA_TYPE = "data_type"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    OPERATOR = "operator"
    SYMBOL = "symbol"


KEYWORDS: frozenset[str] = frozenset(
    {
        "define",
        "as",
        "show",
        "receive",
        "if",
        "else",
        "while",
        "for",
        "return",
        "true",
        "false",
        "and",
        "or",
        "not",
    }
)

DATA_TYPES: frozenset[str] = frozenset({"wholenum", "fractnum", "truthval", "singlechar"})

OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/", "%", "^", "=", "!", "<", ">"})

SYMBOLS: frozenset[str] = frozenset({";", "(", ")", "{", "}"})


def is_keyword(word: str) -> bool:
    return word in KEYWORDS


def is_data_type(word: str) -> bool:
    return word in DATA_TYPES


def is_operator(word: str) -> bool:
    """Return True for a single-character operator."""
    return len(word) == 1 and word in OPERATORS


def is_symbol(word: str) -> bool:
    """Return True for a single-character statement symbol."""
    return len(word) == 1 and word in SYMBOLS


def is_identifier(word: str) -> bool:
    """Return True if *word* is a letter or underscore followed by letters, digits, or underscores."""
    return _IDENTIFIER_RE.fullmatch(word) is not None


def is_number(word: str) -> bool:
    """Return True for an unsigned integer or a decimal with digits on both sides of the point."""
    return _NUMBER_RE.fullmatch(word) is not None


def is_string(word: str) -> bool:
    """Return True for a double-quoted string literal."""
    return len(word) >= 2 and word.startswith('"') and word.endswith('"')


def classify(word: str) -> TokenKind | None:
    """Classify a single word.

    Rules are tried in priority order: keyword, data type, identifier,
    number, string, operator, symbol. The first matching rule wins, so a
    keyword is never reported as an identifier.

    Args:
        word: A non-empty word produced by the scanner's word splitter.

    Returns:
        The matching :class:`TokenKind`, or ``None`` if no rule matches.
    """
    for kind, predicate in _RULES:
        if predicate(word):
            return kind
    return None


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")

_RULES = (
    (TokenKind.KEYWORD, is_keyword),
    (TokenKind.DATA_TYPE, is_data_type),
    (TokenKind.IDENTIFIER, is_identifier),
    (TokenKind.NUMBER, is_number),
    (TokenKind.STRING, is_string),
    (TokenKind.OPERATOR, is_operator),
    (TokenKind.SYMBOL, is_symbol),
)
