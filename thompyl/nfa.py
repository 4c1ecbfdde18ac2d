import logging

import dill

from thompyl.__automaton import simulation, thompson
from thompyl.__automaton.errors import AutomatonError, AutomatonBuildError, EmptyFragmentError, UnknownStateError
from thompyl.__automaton.states import EPSILON, State
from thompyl.__automaton.transition_relation import NondeterministicRelation


__all__ = ['NFA', 'EPSILON', 'AutomatonError', 'AutomatonBuildError', 'EmptyFragmentError', 'UnknownStateError']

logger = logging.getLogger(__name__)


# ======================================================================================================================
# NFA main class
# ======================================================================================================================


class NFA:
    """
    Non-deterministic Finite Automaton built by Thompson construction.

    A NFA is created from a single character with NFA.from_char or from a fragment of literal characters with
    NFA.from_regex. Larger automata are obtained with the combinators:

    NFA.concatenate(other): the language of self followed by the language of other
    NFA.union(other): the language of self or the language of other
    NFA.kleene_closure(): zero or more repetitions of the language of self

    The 'other' operand of concatenate and union can be another NFA or a fragment as string, in which case it is first
    built with NFA.from_regex. Fragments are never interpreted: '|' or '*' in a fragment are literal characters.

    A NFA is never mutated once built, combinators return a new NFA. Every NFA satisfies the following:
        - the start state has index 0
        - exactly one state is final
        - states are indexed from 0 to len(nfa) - 1 and transitions only refer to those states

    The attribute regex is a label describing the language of the automaton, for debugging purpose.
    """

    def __init__(self, arena, regex):
        """
        :param arena: a thompson.Arena holding the states count, final states and edges
        :param regex: label of the automaton
        """
        arena.check()

        # Raises if the single final state invariant does not hold
        final = arena.final

        self.regex = regex
        self._arena = arena

        self._states = tuple(State(index, is_final=(index == final)) for index in range(arena.size))

        self._relation = NondeterministicRelation()

        for src, dst, symbol in arena.edges:
            self._relation.add(self._states[src], self._states[dst], symbol)

        # Combinators compose the arena while simulation reads the relation, both must describe the same automaton
        self._relation.freeze()

    def __len__(self):
        return len(self.states)

    def __str__(self):
        return "<NFA '%s'>" % self.regex

    def __repr__(self):
        return "NFA(regex=%r, states=%d, transitions=%d)" % (self.regex, len(self.states), len(self.relation))

    # ==================================================================================================================
    # Construction

    @classmethod
    def from_char(cls, symbol):
        """
        Return the NFA accepting only the given character
        """
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise AutomatonBuildError("NFA.from_char expects a single character, got %r" % (symbol,))

        nfa = cls(thompson.atom(symbol), symbol)
        logger.debug("built %r into %d states", symbol, len(nfa))

        return nfa

    @classmethod
    def from_regex(cls, regex):
        """
        Return the NFA accepting only the given fragment, every character being taken literally.
        The NFA is the concatenation of from_char(regex[0]) and from_regex(regex[1:]).
        """
        if not isinstance(regex, str):
            raise AutomatonBuildError("NFA.from_regex expects a string, got %r" % (regex,))

        if not regex:
            raise EmptyFragmentError("cannot build a NFA from an empty fragment")

        if len(regex) == 1:
            return cls.from_char(regex)

        # Concatenations are done from the right on arenas so that long fragments do not recurse
        arena = thompson.atom(regex[-1])

        for symbol in reversed(regex[:-1]):
            arena = thompson.concatenate(thompson.atom(symbol), arena)

        nfa = cls(arena, regex)
        logger.debug("built %r into %d states", regex, len(nfa))

        return nfa

    @classmethod
    def _as_nfa(cls, other):
        if isinstance(other, NFA):
            return other

        elif isinstance(other, str):
            return cls.from_regex(other)

        else:
            raise AutomatonBuildError("operand must be a NFA or a fragment as string, got %r" % (other,))

    # ==================================================================================================================
    # Combinators

    def concatenate(self, other):
        other = self._as_nfa(other)

        nfa = NFA(thompson.concatenate(self._arena, other._arena), self.regex + other.regex)
        logger.debug("concatenated %r and %r into %d states", self.regex, other.regex, len(nfa))

        return nfa

    def union(self, other):
        other = self._as_nfa(other)

        nfa = NFA(thompson.union(self._arena, other._arena), self.regex + "|" + other.regex)
        logger.debug("united %r and %r into %d states", self.regex, other.regex, len(nfa))

        return nfa

    def kleene_closure(self):
        nfa = NFA(thompson.kleene_closure(self._arena), self.regex + "*")
        logger.debug("closed %r into %d states", self.regex, len(nfa))

        return nfa

    # ==================================================================================================================
    # Introspection

    @property
    def states(self):
        return self._states

    @property
    def relation(self):
        return self._relation

    @property
    def start(self):
        return self.states[0]

    @property
    def final(self):
        return self.states[self._arena.final]

    def get_state(self, index):
        """
        Return the state with given index, raise an UnknownStateError if the NFA has no such state
        """
        if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(self.states):
            return self.states[index]

        raise UnknownStateError("%s has no state %r" % (self, index), index=index)

    def final_states(self):
        return [state for state in self.states if state.is_final]

    def transitions(self):
        """
        Return the transitions as a list of tuples (from_name, to_name, symbol)
        """
        return [transition.as_names() for transition in self.relation.transitions()]

    # ==================================================================================================================
    # Simulation

    def epsilon_closure(self, states):
        return simulation.epsilon_closure(self.relation, self._own_states(states))

    def step(self, states, symbol):
        return simulation.step(self.relation, self._own_states(states), symbol)

    def accepts(self, sequence):
        """
        Return True if the whole sequence is in the language of the NFA
        """
        return simulation.accepts(self, sequence)

    def _own_states(self, states):
        # Resolve states by index so that a reference to a foreign state is detected
        return {self.get_state(state.index if isinstance(state, State) else state) for state in states}

    # ==================================================================================================================
    # Snapshot

    def dumps(self):
        return dill.dumps(self)

    @staticmethod
    def loads(data):
        nfa = dill.loads(data)

        if isinstance(nfa, NFA):
            return nfa
        else:
            raise AutomatonError("The unpickled object is not a NFA")
