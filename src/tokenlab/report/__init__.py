# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text reports for tokens, symbol tables, diagnostics, and automata."""

from tokenlab.report.render import (
    render_dfa,
    render_diagnostics,
    render_nfa,
    render_symbol_table,
    render_tokens,
)

__all__ = [
    "render_dfa",
    "render_diagnostics",
    "render_nfa",
    "render_symbol_table",
    "render_tokens",
]
