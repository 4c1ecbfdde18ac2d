from thompyl.__automaton.errors import AutomatonError, AutomatonBuildError, EmptyFragmentError, UnknownStateError
from thompyl.__automaton.states import EPSILON, State, Transition
from thompyl.dfa import DFA
from thompyl.nfa import NFA

__version__ = '0.1.0'

__all__ = ['NFA', 'DFA', 'State', 'Transition', 'EPSILON',
           'AutomatonError', 'AutomatonBuildError', 'EmptyFragmentError', 'UnknownStateError']
