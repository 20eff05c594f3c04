# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text reports for scan results and automata."""

from __future__ import annotations

from collections.abc import Iterable

from tokenlab.automata.dfa import DFA
from tokenlab.automata.nfa import NFA
from tokenlab.lexer.scanner import Token
from tokenlab.symbols.diagnostics import Diagnostic
from tokenlab.symbols.table import SymbolEntry

# ###############
# Public Interface
# ###############

NO_ERRORS_MESSAGE = "No errors found."
ABSENT_STATE = "-"


def render_tokens(tokens: Iterable[Token]) -> str:
    """Render the token list, one ``KIND: lexeme`` line per token."""
    lines = ["Tokens Identified:"]
    lines.extend(str(token) for token in tokens)
    return "\n".join(lines)


def render_symbol_table(entries: Iterable[SymbolEntry]) -> str:
    """Render symbol table entries as a fixed-width table in declaration order."""
    lines = [
        "===== Symbol Table =====",
        _symbol_row("Name", "Type", "Value", "Constant", "Scope"),
        "-" * _TABLE_WIDTH,
    ]
    for entry in entries:
        lines.append(
            _symbol_row(
                entry.name,
                entry.type,
                entry.value,
                str(entry.is_constant).lower(),
                entry.scope,
            )
        )
    lines.append("=" * _TABLE_WIDTH)
    return "\n".join(lines)


def render_diagnostics(diagnostics: Iterable[Diagnostic]) -> str:
    """Render every diagnostic in detection order, or a success message if there are none."""
    items = list(diagnostics)
    if not items:
        return NO_ERRORS_MESSAGE
    lines = ["===== Error Report ====="]
    lines.extend(str(d) for d in items)
    lines.append("=" * 24)
    return "\n".join(lines)


def render_nfa(lexeme: str, nfa: NFA) -> str:
    """Render states, start and accept states, and transitions of an NFA."""
    lines = [
        f"NFA for: {lexeme}",
        f"States: {_state_list(nfa.states)}",
        f"Start: {nfa.start}",
        f"Accept: {nfa.accept}",
        "Transitions:",
        f"{'From':<12} {'Input':<12} {'To':<12}".rstrip(),
        "-" * 38,
    ]
    for (source, symbol), target in nfa.transitions.items():
        lines.append(f"{source:<12} {symbol:<12} {target:<12}".rstrip())
    return "\n".join(lines)


def render_dfa(lexeme: str, dfa: DFA) -> str:
    """Render states, final states, and the full transition table of a DFA.

    Entries with no move are shown as ``-``.
    """
    lines = [
        f"DFA for: {lexeme}",
        f"States: {_state_list(dfa.states)}",
        f"Start: {dfa.start}",
        f"Final States: {_state_list(s for s in dfa.states if s in dfa.final_states)}",
        "Transitions:",
        f"{'Current State':<20} {'Input':<10} {'Next State':<20}".rstrip(),
        "-" * 56,
    ]
    for (source, symbol), target in dfa.transitions.items():
        shown = target if target is not None else ABSENT_STATE
        lines.append(f"{source:<20} {symbol:<10} {shown:<20}".rstrip())
    return "\n".join(lines)


# ################
# Implementation
# ################

_TABLE_WIDTH = 56


def _symbol_row(name: str, type_name: str, value: str, constant: str, scope: str) -> str:
    return f"{name:<10} {type_name:<10} {value:<15} {constant:<10} {scope:<10}".rstrip()


def _state_list(states: Iterable[str]) -> str:
    return "[" + ", ".join(states) + "]"
