# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Literal-matching NFA construction.

The automaton built here recognizes exactly one string: the lexeme it was
built from. It is a simple chain ``S0 -> S1 -> ... -> Sn`` with one
transition per character.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

# ###############
# Public Interface
# ###############

STATE_PREFIX = "S"


@dataclass(frozen=True)
class NFA:
    """A nondeterministic finite automaton over single characters.

    Attributes:
        states: State labels in creation order.
        start: The start state.
        accept: The single accepting state.
        transitions: Mapping from ``(state, symbol)`` to the destination state.
    """

    states: tuple[str, ...]
    start: str
    accept: str
    transitions: Mapping[tuple[str, str], str]

    def accepts(self, word: str) -> bool:
        """Return True if *word* drives the automaton from start to accept."""
        state = self.start
        for symbol in word:
            next_state = self.transitions.get((state, symbol))
            if next_state is None:
                return False
            state = next_state
        return state == self.accept


class NFABuilder:
    """Builds a fresh literal-matching :class:`NFA` per lexeme."""

    def build(self, lexeme: str) -> NFA:
        """Build the chain automaton for *lexeme*.

        For a lexeme of length ``n`` the result has states ``S0..Sn``, start
        ``S0``, accept ``Sn``, and exactly ``n`` transitions. The empty
        lexeme yields a single state that is both start and accept.
        """
        states = [_state(0)]
        transitions: dict[tuple[str, str], str] = {}
        for index, symbol in enumerate(lexeme):
            next_state = _state(index + 1)
            transitions[(states[-1], symbol)] = next_state
            states.append(next_state)
        _log.debug("built NFA for %r with %d states", lexeme, len(states))
        return NFA(
            states=tuple(states),
            start=states[0],
            accept=states[-1],
            transitions=MappingProxyType(transitions),
        )


def build_nfa(lexeme: str) -> NFA:
    """Build the literal-matching NFA for *lexeme*."""
    return NFABuilder().build(lexeme)


# ################
# Implementation
# ################

_log = logging.getLogger(__name__)


def _state(index: int) -> str:
    return f"{STATE_PREFIX}{index}"
