# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for automaton and scan result serialization."""

import json

import pytest

from tokenlab.automata.artifact import (
    ARTIFACT_FORMAT_VERSION,
    deserialize_dfa,
    deserialize_nfa,
    scan_result_to_dict,
    serialize_dfa,
    serialize_nfa,
)
from tokenlab.automata.dfa import construct_dfa
from tokenlab.automata.nfa import build_nfa
from tokenlab.lexer.scanner import scan


def test_nfa_json_layout() -> None:
    obj = json.loads(serialize_nfa(build_nfa("if")))
    assert obj == {
        "v": ARTIFACT_FORMAT_VERSION,
        "states": ["S0", "S1", "S2"],
        "start": "S0",
        "accept": "S2",
        "transitions": [["S0", "i", "S1"], ["S1", "f", "S2"]],
    }


def test_nfa_restores_from_json() -> None:
    original = build_nfa(">=")
    restored = deserialize_nfa(serialize_nfa(original))
    assert restored.states == original.states
    assert dict(restored.transitions) == dict(original.transitions)
    assert restored.accepts(">=")


def test_dfa_keeps_absent_entries() -> None:
    obj = json.loads(serialize_dfa(construct_dfa(build_nfa("if"))))
    assert obj["final_states"] == ["S2"]
    assert obj["alphabet"] == ["i", "f"]
    assert ["S0", "f", None] in obj["transitions"]


def test_dfa_restores_from_json() -> None:
    original = construct_dfa(build_nfa("show"))
    restored = deserialize_dfa(serialize_dfa(original))
    assert restored.final_states == original.final_states
    assert dict(restored.transitions) == dict(original.transitions)
    assert restored.accepts("show")


@pytest.mark.parametrize("loader", [deserialize_nfa, deserialize_dfa])
def test_unknown_version_is_rejected(loader) -> None:
    with pytest.raises(ValueError, match="Unsupported artifact format version"):
        loader(json.dumps({"v": "99"}))


def test_scan_result_to_dict() -> None:
    obj = scan_result_to_dict(scan("define x as wholenum = 10;\n@"))
    assert obj["tokens"][1] == {"kind": "IDENTIFIER", "lexeme": "x", "line": 1}
    assert obj["symbols"] == [
        {"name": "x", "type": "wholenum", "value": "10", "is_constant": False, "scope": "GLOBAL"}
    ]
    assert obj["diagnostics"] == [{"line": 2, "kind": "UNRECOGNIZED_TOKEN", "message": "Unrecognized token - @"}]
    json.dumps(obj)
