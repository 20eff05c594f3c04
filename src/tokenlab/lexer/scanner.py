# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented scanner for TokenLab source text.

Converts raw source text into a sequence of classified tokens and registers
``define`` declarations in a symbol table. Scanning never stops on an error:
every violation is recorded as a diagnostic and processing continues to the
end of input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tokenlab.lexer.vocabulary import TokenKind, classify, is_data_type
from tokenlab.symbols.diagnostics import Diagnostic, DiagnosticKind, ErrorSink
from tokenlab.symbols.table import GLOBAL_SCOPE, UNDEFINED, SymbolTable

# ###############
# Public Interface
# ###############

LINE_COMMENT = "--"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

# Characters that always form a word of their own.
SPLIT_CHARS: frozenset[str] = frozenset(";(){}=+-*/%")


@dataclass(frozen=True)
class Token:
    """A classified word with its source line.

    Attributes:
        kind: The kind of token.
        lexeme: The raw text of the token.
        line: 1-based line number the token appears on.
    """

    kind: TokenKind
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.lexeme}"


@dataclass
class ScanSession:
    """Mutable state owned by a single scan run.

    A fresh session is created for every run so that independent runs never
    share a symbol table or diagnostics.
    """

    errors: ErrorSink = field(default_factory=ErrorSink)
    symbols: SymbolTable = field(init=False)

    def __post_init__(self) -> None:
        self.symbols = SymbolTable(self.errors)


@dataclass
class ScanResult:
    """Outcome of scanning one source text.

    Attributes:
        tokens: Tokens in source order.
        symbols: The symbol table populated by declarations.
        diagnostics: All diagnostics in detection order.
    """

    tokens: list[Token]
    symbols: SymbolTable
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        """Return True if any diagnostic was recorded."""
        return len(self.diagnostics) > 0


def scan(source: str, session: ScanSession | None = None) -> ScanResult:
    """Scan source text into tokens and register its declarations.

    Args:
        source: The complete program text.
        session: Optional run state to scan into. A new session is created
            when omitted.

    Returns:
        A :class:`ScanResult` with the tokens, the populated symbol table,
        and the diagnostics recorded during this run.
    """
    session = session if session is not None else ScanSession()
    tokens = _Scanner(source, session).scan()
    return ScanResult(
        tokens=tokens,
        symbols=session.symbols,
        diagnostics=session.errors.all(),
    )


def split_words(line: str) -> list[str]:
    """Split one line into words.

    Whitespace separates words, and every character in :data:`SPLIT_CHARS`
    becomes a word on its own. Empty words are never produced.
    """
    words: list[str] = []
    current: list[str] = []
    for ch in line:
        if ch.isspace():
            _flush(current, words)
        elif ch in SPLIT_CHARS:
            _flush(current, words)
            words.append(ch)
        else:
            current.append(ch)
    _flush(current, words)
    return words


# ################
# Implementation
# ################

_DEFINE = "define"
_ASSIGN = "="
_log = logging.getLogger(__name__)


def _flush(current: list[str], words: list[str]) -> None:
    if current:
        words.append("".join(current))
        current.clear()


class _Scanner:
    """Internal line-by-line scanner state."""

    def __init__(self, source: str, session: ScanSession) -> None:
        self._lines = source.split("\n")
        self._index = 0
        self._session = session
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Process every line and return the emitted tokens."""
        while self._index < len(self._lines):
            line_number = self._index + 1
            line = self._lines[self._index].strip()
            if line.startswith(LINE_COMMENT):
                _log.debug("line %d: skipped line comment", line_number)
            elif BLOCK_COMMENT_OPEN in line:
                self._skip_block_comment(line)
            else:
                self._scan_line(split_words(line), line_number)
            self._index += 1
        return self._tokens

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_block_comment(self, line: str) -> None:
        """Consume lines up to and including the one that closes the comment.

        The opening line is skipped entirely. An unterminated comment runs to
        the end of input.
        """
        start = self._index + 1
        while BLOCK_COMMENT_CLOSE not in line and self._index < len(self._lines) - 1:
            self._index += 1
            line = self._lines[self._index].strip()
        _log.debug("lines %d-%d: skipped block comment", start, self._index + 1)

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def _scan_line(self, words: list[str], line_number: int) -> None:
        for position, word in enumerate(words):
            kind = classify(word)
            if kind is None:
                self._session.errors.record(
                    line_number,
                    DiagnosticKind.UNRECOGNIZED_TOKEN,
                    f"Unrecognized token - {word}",
                )
                continue
            self._tokens.append(Token(kind, word, line_number))
            if kind == TokenKind.IDENTIFIER and position > 0 and words[position - 1] == _DEFINE:
                self._declare(words, position, line_number)

    def _declare(self, words: list[str], position: int, line_number: int) -> None:
        """Register the declaration whose identifier sits at *position*.

        Expected shape: ``define <name> as <type> [= <value>] ;``.
        """
        name = words[position]
        type_name = _word_at(words, position + 2)
        if type_name is None or not is_data_type(type_name):
            self._session.errors.record(
                line_number,
                DiagnosticKind.INVALID_DECLARATION_SYNTAX,
                f"Invalid variable declaration for '{name}'",
            )
            return

        value = UNDEFINED
        initializer = _word_at(words, position + 4)
        if _word_at(words, position + 3) == _ASSIGN and initializer is not None:
            value = initializer.replace(";", "")

        self._session.symbols.add(
            name,
            type_name,
            value,
            is_constant=False,
            scope=GLOBAL_SCOPE,
            line=line_number,
        )


def _word_at(words: list[str], position: int) -> str | None:
    return words[position] if position < len(words) else None
