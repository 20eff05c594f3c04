# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol table and diagnostic collection."""

from tokenlab.symbols.diagnostics import Diagnostic, DiagnosticKind, ErrorSink
from tokenlab.symbols.table import GLOBAL_SCOPE, UNDEFINED, SymbolEntry, SymbolTable

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "ErrorSink",
    "GLOBAL_SCOPE",
    "SymbolEntry",
    "SymbolTable",
    "UNDEFINED",
]
