# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Non-fatal, line-tagged diagnostics collected during a scan."""

import enum
import logging
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class DiagnosticKind(enum.Enum):
    """Categories of language rule violations."""

    DUPLICATE_DECLARATION = "duplicate_declaration"
    UNDECLARED_VARIABLE = "undeclared_variable"
    CONSTANT_VIOLATION = "constant_violation"
    INVALID_DECLARATION_SYNTAX = "invalid_declaration_syntax"
    UNRECOGNIZED_TOKEN = "unrecognized_token"


@dataclass(frozen=True)
class Diagnostic:
    """A rule violation detected while processing source text.

    Attributes:
        line: 1-based source line the violation was detected on.
        kind: The category of the violation.
        message: Human-readable description of the violation.
    """

    line: int
    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return f"ERROR (Line {self.line}): {self.message}"


class ErrorSink:
    """Append-only, ordered collection of diagnostics for a single run.

    Identical violations are not merged: every call to :meth:`record`
    produces its own entry.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def record(self, line: int, kind: DiagnosticKind, message: str) -> Diagnostic:
        """Append a diagnostic and return it."""
        diagnostic = Diagnostic(line=line, kind=kind, message=message)
        self._diagnostics.append(diagnostic)
        _log.debug("recorded %s at line %d: %s", kind.name, line, message)
        return diagnostic

    def all(self) -> list[Diagnostic]:
        """Return a copy of all diagnostics in detection order."""
        return list(self._diagnostics)

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the diagnostics of a single kind in detection order."""
        return [d for d in self._diagnostics if d.kind == kind]

    def is_empty(self) -> bool:
        return not self._diagnostics

    def __len__(self) -> int:
        return len(self._diagnostics)


# ################
# Implementation
# ################

_log = logging.getLogger(__name__)
