# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol table of declared identifiers.

Every operation is total: rule violations are recorded on the table's
:class:`~tokenlab.symbols.diagnostics.ErrorSink` instead of being raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from tokenlab.symbols.diagnostics import DiagnosticKind, ErrorSink

# ###############
# Public Interface
# ###############

UNDEFINED = "UNDEFINED"
GLOBAL_SCOPE = "GLOBAL"


class SymbolEntry(BaseModel):
    """A declared identifier together with its metadata.

    Entries are immutable; the table replaces an entry to change its value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    value: str = UNDEFINED
    is_constant: bool = False
    scope: str = GLOBAL_SCOPE


class SymbolTable:
    """Insertion-ordered mapping from identifier name to :class:`SymbolEntry`.

    At most one entry exists per name for the lifetime of the table. Entries
    are never removed; only the value of a non-constant entry may change.
    """

    def __init__(self, errors: ErrorSink) -> None:
        self._errors = errors
        self._entries: dict[str, SymbolEntry] = {}

    @property
    def errors(self) -> ErrorSink:
        """The sink that receives this table's diagnostics."""
        return self._errors

    def add(
        self,
        name: str,
        type: str,
        value: str,
        is_constant: bool,
        scope: str,
        line: int,
    ) -> None:
        """Declare *name*, or record a duplicate declaration if it already exists.

        The existing entry is left untouched on a duplicate.
        """
        if name in self._entries:
            self._errors.record(
                line,
                DiagnosticKind.DUPLICATE_DECLARATION,
                f"Variable '{name}' already declared in scope: {scope}",
            )
            return
        self._entries[name] = SymbolEntry(
            name=name,
            type=type,
            value=value,
            is_constant=is_constant,
            scope=scope,
        )
        _log.debug("declared %s as %s = %s (line %d)", name, type, value, line)

    def update(self, name: str, value: str, line: int) -> None:
        """Assign a new value to a declared, non-constant identifier.

        Records an undeclared-variable diagnostic for unknown names and a
        constant-violation diagnostic for constants; neither case mutates
        the table.
        """
        entry = self._entries.get(name)
        if entry is None:
            self._errors.record(
                line,
                DiagnosticKind.UNDECLARED_VARIABLE,
                f"Variable '{name}' is not declared!",
            )
            return
        if entry.is_constant:
            self._errors.record(
                line,
                DiagnosticKind.CONSTANT_VIOLATION,
                f"Cannot modify constant '{name}'",
            )
            return
        self._entries[name] = entry.model_copy(update={"value": value})

    def is_declared(self, name: str) -> bool:
        return name in self._entries

    def get(self, name: str) -> SymbolEntry | None:
        return self._entries.get(name)

    def entries(self) -> list[SymbolEntry]:
        """Return all entries in declaration order."""
        return list(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


# ################
# Implementation
# ################

_log = logging.getLogger(__name__)
