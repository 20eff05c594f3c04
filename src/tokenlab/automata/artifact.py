# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of automata and scan results to JSON.

Transition tables are stored as lists of ``[from, symbol, to]`` triples
because JSON objects cannot be keyed by tuples. The format is versioned so
future schema changes can be detected.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any

from tokenlab.automata.dfa import DFA
from tokenlab.automata.nfa import NFA
from tokenlab.lexer.scanner import ScanResult

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"


def serialize_nfa(nfa: NFA) -> str:
    """Serialize an NFA to a compact JSON string."""
    return json.dumps(nfa_to_dict(nfa), separators=(",", ":"))


def deserialize_nfa(data: str) -> NFA:
    """Deserialize an NFA from a JSON string.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = _load(data)
    return NFA(
        states=tuple(obj["states"]),
        start=obj["start"],
        accept=obj["accept"],
        transitions=MappingProxyType({(src, sym): dst for src, sym, dst in obj["transitions"]}),
    )


def serialize_dfa(dfa: DFA) -> str:
    """Serialize a DFA to a compact JSON string."""
    return json.dumps(dfa_to_dict(dfa), separators=(",", ":"))


def deserialize_dfa(data: str) -> DFA:
    """Deserialize a DFA from a JSON string.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = _load(data)
    return DFA(
        states=tuple(obj["states"]),
        start=obj["start"],
        final_states=frozenset(obj["final_states"]),
        alphabet=tuple(obj["alphabet"]),
        transitions=MappingProxyType({(src, sym): dst for src, sym, dst in obj["transitions"]}),
    )


def nfa_to_dict(nfa: NFA) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "states": list(nfa.states),
        "start": nfa.start,
        "accept": nfa.accept,
        "transitions": [[src, sym, dst] for (src, sym), dst in nfa.transitions.items()],
    }


def dfa_to_dict(dfa: DFA) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "states": list(dfa.states),
        "start": dfa.start,
        "final_states": sorted(dfa.final_states),
        "alphabet": list(dfa.alphabet),
        "transitions": [[src, sym, dst] for (src, sym), dst in dfa.transitions.items()],
    }


def scan_result_to_dict(result: ScanResult) -> dict[str, Any]:
    """Convert a scan result to a JSON-compatible dictionary."""
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "tokens": [{"kind": t.kind.name, "lexeme": t.lexeme, "line": t.line} for t in result.tokens],
        "symbols": [entry.model_dump() for entry in result.symbols],
        "diagnostics": [{"line": d.line, "kind": d.kind.name, "message": d.message} for d in result.diagnostics],
    }


# ################
# Implementation
# ################


def _load(data: str) -> dict[str, Any]:
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return obj
