from thompyl.__automaton.errors import AutomatonBuildError


# ======================================================================================================================
# Symbols
# ======================================================================================================================

# The epsilon marker labels free transitions of a NFA. Iterating over a string never yields the empty string, thus the
# marker can never be matched against real input
EPSILON = ''

# Rendering of the epsilon marker in transitions
EPSILON_NAME = 'ε'

# Prefix of state names, state 3 is named 's3'
STATE_PREFIX = 's'


def is_epsilon(symbol):
    return symbol == EPSILON


def check_symbol(symbol, allow_epsilon=True):
    """
    Raise an AutomatonBuildError if symbol is neither a single character nor, when allowed, the epsilon marker
    """
    if not isinstance(symbol, str):
        raise AutomatonBuildError("symbol must be a string, got %r" % (symbol,))

    if is_epsilon(symbol):
        if not allow_epsilon:
            raise AutomatonBuildError("epsilon transitions are not allowed in a deterministic automaton")

    elif len(symbol) != 1:
        raise AutomatonBuildError("symbol must be a single character, got %r" % symbol)


def state_name(index):
    return "%s%d" % (STATE_PREFIX, index)


def symbol_name(symbol):
    return EPSILON_NAME if is_epsilon(symbol) else symbol


# ======================================================================================================================
# States and transitions
# ======================================================================================================================


class State:
    """
    Immutable state descriptor. Two states are the same state if they have the same index, flags are only descriptive.
    The error flag is only meaningful for deterministic automata.
    """

    def __init__(self, index, is_final=False, is_error=False):
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise AutomatonBuildError("state index must be a non-negative integer, got %r" % (index,))

        self._index = index
        self._is_final = bool(is_final)
        self._is_error = bool(is_error)

    @property
    def index(self):
        return self._index

    @property
    def is_final(self):
        return self._is_final

    @property
    def is_error(self):
        return self._is_error

    @property
    def name(self):
        return state_name(self._index)

    def is_accepting(self):
        """
        Return True if a walk ending on this state accepts its input
        """
        return self._is_final and not self._is_error

    def __eq__(self, other):
        if isinstance(other, State):
            return self._index == other._index

        else:
            return NotImplemented

    def __hash__(self):
        return hash(self._index)

    def __str__(self):
        return "<State '%d'>" % self._index

    def __repr__(self):
        flags = (', final' if self._is_final else '') + (', error' if self._is_error else '')
        return "State(%d%s)" % (self._index, flags)


class Transition:
    """
    An edge (from_state, to_state, symbol). Transitions are equal, and hash alike, when their state indices and symbol
    are equal, so structurally identical edges can be detected in sets.
    """

    def __init__(self, from_state, to_state, symbol):
        self.from_state = from_state
        self.to_state = to_state
        self.symbol = symbol

    @property
    def key(self):
        return self.from_state.index, self.to_state.index, self.symbol

    def as_names(self):
        """
        Return the (from_name, to_name, symbol) tuple used for introspection
        """
        return self.from_state.name, self.to_state.name, symbol_name(self.symbol)

    def __eq__(self, other):
        if isinstance(other, Transition):
            return self.key == other.key

        else:
            return NotImplemented

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return "(%s->%s,%s)" % self.as_names()

    def __repr__(self):
        return "<Transition %s>" % str(self)
