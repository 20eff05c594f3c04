# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Literal NFA construction and subset-construction determinization."""

from tokenlab.automata.dfa import DFA, DFABuilder, construct_dfa
from tokenlab.automata.nfa import NFA, NFABuilder, build_nfa

__all__ = [
    "DFA",
    "DFABuilder",
    "NFA",
    "NFABuilder",
    "build_nfa",
    "construct_dfa",
]
