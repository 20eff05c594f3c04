# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the plain-text reports."""

from tokenlab.automata.dfa import construct_dfa
from tokenlab.automata.nfa import build_nfa
from tokenlab.lexer.scanner import scan
from tokenlab.report.render import (
    NO_ERRORS_MESSAGE,
    render_dfa,
    render_diagnostics,
    render_nfa,
    render_symbol_table,
    render_tokens,
)
from tokenlab.samples import ERROR_PHASE_SAMPLE


def test_render_tokens() -> None:
    report = render_tokens(scan("define x as wholenum;").tokens)
    assert report.splitlines() == [
        "Tokens Identified:",
        "KEYWORD: define",
        "IDENTIFIER: x",
        "KEYWORD: as",
        "DATA_TYPE: wholenum",
        "SYMBOL: ;",
    ]


def test_render_symbol_table() -> None:
    result = scan("define x as wholenum = 10;\ndefine flag as truthval;")
    lines = render_symbol_table(result.symbols).splitlines()
    assert lines[0] == "===== Symbol Table ====="
    assert lines[1].split() == ["Name", "Type", "Value", "Constant", "Scope"]
    assert lines[3].split() == ["x", "wholenum", "10", "false", "GLOBAL"]
    assert lines[4].split() == ["flag", "truthval", "UNDEFINED", "false", "GLOBAL"]
    assert lines[-1].startswith("=====")


def test_render_symbol_table_columns_are_aligned() -> None:
    result = scan("define x as wholenum = 10;")
    lines = render_symbol_table(result.symbols).splitlines()
    assert lines[3].index("wholenum") == lines[1].index("Type") == 11
    assert lines[3].index("10") == lines[1].index("Value") == 22


def test_render_diagnostics_without_errors() -> None:
    assert render_diagnostics([]) == NO_ERRORS_MESSAGE


def test_render_diagnostics_in_detection_order() -> None:
    lines = render_diagnostics(scan(ERROR_PHASE_SAMPLE).diagnostics).splitlines()
    assert lines == [
        "===== Error Report =====",
        "ERROR (Line 4): Variable 'x' already declared in scope: GLOBAL",
        "ERROR (Line 4): Unrecognized token - 'A'",
        "ERROR (Line 5): Invalid variable declaration for 'invalidvar'",
        "========================",
    ]


def test_render_nfa() -> None:
    lines = render_nfa("if", build_nfa("if")).splitlines()
    assert lines[:5] == [
        "NFA for: if",
        "States: [S0, S1, S2]",
        "Start: S0",
        "Accept: S2",
        "Transitions:",
    ]
    assert [line.split() for line in lines[7:]] == [["S0", "i", "S1"], ["S1", "f", "S2"]]


def test_render_dfa_shows_absent_moves() -> None:
    lines = render_dfa("if", construct_dfa(build_nfa("if"))).splitlines()
    assert lines[0] == "DFA for: if"
    assert "Final States: [S2]" in lines
    rows = [line.split() for line in lines[7:]]
    assert ["S0", "i", "S1"] in rows
    assert ["S0", "f", "-"] in rows
    assert len(rows) == 6
