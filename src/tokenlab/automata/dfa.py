# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Determinization of an NFA by subset construction.

Each DFA state stands for a set of NFA states reachable from the start
state. A singleton set keeps the label of its only member, so determinizing
an automaton that is already deterministic yields a state-for-state copy.
Missing moves are kept in the transition table as explicit ``None`` entries.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from tokenlab.automata.nfa import NFA

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DFA:
    """A deterministic finite automaton over single characters.

    Attributes:
        states: State labels in discovery order.
        start: The start state.
        final_states: Accepting states.
        alphabet: Input symbols in first-seen order.
        transitions: Mapping from ``(state, symbol)`` to the destination
            state, or ``None`` when there is no move on that symbol.
    """

    states: tuple[str, ...]
    start: str
    final_states: frozenset[str]
    alphabet: tuple[str, ...]
    transitions: Mapping[tuple[str, str], str | None]

    def accepts(self, word: str) -> bool:
        """Return True if *word* drives the automaton into a final state."""
        state: str | None = self.start
        for symbol in word:
            state = self.transitions.get((state, symbol)) if state is not None else None
            if state is None:
                return False
        return state in self.final_states


class DFABuilder:
    """Converts an :class:`NFA` into an equivalent :class:`DFA`."""

    def construct(self, nfa: NFA) -> DFA:
        """Run subset construction over the states reachable from ``nfa.start``.

        Args:
            nfa: The automaton to determinize.

        Returns:
            A :class:`DFA` whose states are the reachable subsets of NFA states
            and whose final states are the subsets containing ``nfa.accept``.
        """
        alphabet = _alphabet(nfa)
        start = frozenset({nfa.start})

        labels: dict[frozenset[str], str] = {start: _label(start)}
        transitions: dict[tuple[str, str], str | None] = {}
        worklist: deque[frozenset[str]] = deque([start])

        while worklist:
            subset = worklist.popleft()
            for symbol in alphabet:
                target = _move(nfa, subset, symbol)
                if not target:
                    transitions[(labels[subset], symbol)] = None
                    continue
                if target not in labels:
                    labels[target] = _label(target)
                    worklist.append(target)
                transitions[(labels[subset], symbol)] = labels[target]

        final_states = frozenset(label for subset, label in labels.items() if nfa.accept in subset)
        _log.debug("determinized NFA into %d states, %d final", len(labels), len(final_states))
        return DFA(
            states=tuple(labels.values()),
            start=labels[start],
            final_states=final_states,
            alphabet=alphabet,
            transitions=MappingProxyType(transitions),
        )


def construct_dfa(nfa: NFA) -> DFA:
    """Determinize *nfa* by subset construction."""
    return DFABuilder().construct(nfa)


# ################
# Implementation
# ################

_log = logging.getLogger(__name__)


def _alphabet(nfa: NFA) -> tuple[str, ...]:
    """Return the distinct transition symbols of *nfa* in first-seen order."""
    return tuple(dict.fromkeys(symbol for _, symbol in nfa.transitions))


def _move(nfa: NFA, subset: frozenset[str], symbol: str) -> frozenset[str]:
    """Return the NFA states reachable from *subset* on *symbol*."""
    return frozenset(
        nfa.transitions[(state, symbol)] for state in subset if (state, symbol) in nfa.transitions
    )


def _label(subset: frozenset[str]) -> str:
    if len(subset) == 1:
        return next(iter(subset))
    return "{" + ",".join(sorted(subset)) + "}"
