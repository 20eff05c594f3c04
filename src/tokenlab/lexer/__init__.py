# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Word classification and line scanning for TokenLab source text."""

from tokenlab.lexer.scanner import ScanResult, ScanSession, Token, scan, split_words
from tokenlab.lexer.vocabulary import TokenKind, classify

__all__ = [
    "ScanResult",
    "ScanSession",
    "Token",
    "TokenKind",
    "classify",
    "scan",
    "split_words",
]
