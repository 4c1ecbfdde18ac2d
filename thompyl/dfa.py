import logging

import dill

from thompyl.__automaton.errors import AutomatonError, AutomatonBuildError
from thompyl.__automaton.states import State, check_symbol
from thompyl.__automaton.transition_relation import DeterministicRelation


__all__ = ['DFA', 'State', 'AutomatonError', 'AutomatonBuildError']

logger = logging.getLogger(__name__)


# ======================================================================================================================
# DFA main class
# ======================================================================================================================


class DFA:
    """
    Deterministic Finite Automaton given as a transition table.

    Transitions are added one by one with DFA.add_transition, a second transition for the same state and symbol
    replaces the first one. Final and error flags are properties of the states themselves, there is no set of final
    states.

    DFA.consume reads a sequence from the start state and accepts it if every symbol has a transition and the walk ends
    on a final state that is not an error state.
    """

    def __init__(self, start=None):
        """
        :param start: the start State, defaults to a non-final state of index 0
        """
        if start is None:
            start = State(0)

        elif not isinstance(start, State):
            raise AutomatonBuildError("start must be a State, got %r" % (start,))

        self.start = start
        self.relation = DeterministicRelation()

    def __len__(self):
        return len(self.relation)

    def __str__(self):
        return "<DFA %d transitions>" % len(self.relation)

    @property
    def start_state(self):
        return self.start

    def add_transition(self, from_state, to_state, symbol):
        if not (isinstance(from_state, State) and isinstance(to_state, State)):
            raise AutomatonBuildError("transitions must be added between State objects")

        check_symbol(symbol, allow_epsilon=False)

        if self.relation.lookup(from_state, symbol) is not None:
            logger.debug("overwriting transition from %s on %r", from_state.name, symbol)

        self.relation.add(from_state, to_state, symbol)

    def transition(self, state, symbol):
        """
        Return the state attained from state with given symbol, None if no such transition exists
        """
        return self.relation.lookup(state, symbol)

    def transitions(self):
        """
        Return the transitions as a list of tuples (from_name, to_name, symbol)
        """
        return [transition.as_names() for transition in self.relation.transitions()]

    def consume(self, sequence):
        """
        Return True if the whole sequence leads from the start state to a final state that is not an error state
        """
        current_state = self.start

        for symbol in sequence:
            current_state = self.transition(current_state, symbol)

            # No legal transition, the rest of the sequence is not read
            if current_state is None:
                return False

        return current_state.is_accepting()

    def dumps(self):
        return dill.dumps(self)

    @staticmethod
    def loads(data):
        dfa = dill.loads(data)

        if isinstance(dfa, DFA):
            return dfa
        else:
            raise AutomatonError("The unpickled object is not a DFA")
