from thompyl.__automaton.errors import AutomatonBuildError
from thompyl.__automaton.states import Transition, check_symbol


# ======================================================================================================================
# Transition Relations
# ======================================================================================================================


class TransitionRelation:
    """
    Basic skeleton for the transition relation of Deterministic and Non-deterministic Finite Automata.

    Rows are stored in a dict state index -> {symbol: successor(s)}, a row is only allocated when a transition leaves
    its state. Looking up a state without row is not an error, it simply yields no transition.
    """

    # Whether EPSILON is an acceptable symbol for the relation
    allow_epsilon = False

    def __init__(self):
        self.rows = {}

        # Transitions as a dict (from_index, to_index, symbol) -> Transition, which both deduplicates edges and keeps
        # them in insertion order
        self._transitions = {}

        self.frozen = False

    def __len__(self):
        return len(self._transitions)

    def __contains__(self, transition):
        return isinstance(transition, Transition) and transition.key in self._transitions

    def add(self, from_state, to_state, symbol):
        """
        Add the edge from_state --symbol--> to_state, raise an AutomatonBuildError if the relation is frozen
        """
        if self.frozen:
            raise AutomatonBuildError("cannot add a transition to a frozen relation")

        check_symbol(symbol, allow_epsilon=self.allow_epsilon)

        self._store(Transition(from_state, to_state, symbol))

    def freeze(self):
        """
        Forbid any further transition, used once the automaton owning the relation is built
        """
        self.frozen = True

    def transitions(self):
        """
        Return the list of transitions in insertion order
        """
        return list(self._transitions.values())

    def get_row(self, state):
        return self.rows.get(state.index)

    def lookup(self, state, symbol):
        raise NotImplementedError

    def _store(self, transition):
        raise NotImplementedError


class DeterministicRelation(TransitionRelation):
    """
    At most one successor per (state, symbol). Adding a second edge for the same (state, symbol) overwrites the first.
    """

    def lookup(self, state, symbol):
        """
        Return the successor of state with given symbol, None if there is no such transition
        """
        row = self.get_row(state)

        return None if row is None else row.get(symbol)

    def _store(self, transition):
        row = self.rows.setdefault(transition.from_state.index, {})
        previous = row.get(transition.symbol)

        # Last write wins, flags of the successor included. An edge to another successor is no longer part of the
        # relation, an edge to the same successor keeps its position
        if previous is not None and previous.index != transition.to_state.index:
            del self._transitions[(transition.from_state.index, previous.index, transition.symbol)]

        row[transition.symbol] = transition.to_state
        self._transitions[transition.key] = transition


class NondeterministicRelation(TransitionRelation):
    """
    Zero or more successors per (state, symbol), symbol can be EPSILON.
    """
    allow_epsilon = True

    def lookup(self, state, symbol):
        """
        Return the set of successors of state with given symbol, possibly empty
        """
        row = self.get_row(state)

        if row is None or symbol not in row:
            return set()

        return set(row[symbol].values())

    def _store(self, transition):
        # Adding an already existing edge is a no-op
        if transition.key in self._transitions:
            return

        row = self.rows.setdefault(transition.from_state.index, {})

        # Successors are kept by index to keep the state objects given when the edge was added
        row.setdefault(transition.symbol, {})[transition.to_state.index] = transition.to_state
        self._transitions[transition.key] = transition
