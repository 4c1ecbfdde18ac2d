from thompyl.__automaton.errors import AutomatonBuildError
from thompyl.__automaton.states import EPSILON, check_symbol


# ======================================================================================================================
# Thompson construction on arenas
# ======================================================================================================================

# The builder does not compose graphs of nodes, it composes arenas. An arena is a flat description of a NFA: a number
# of states, the indices of its final states and a list of edges (from_index, to_index, symbol). The start of an arena
# is always the state 0.
#
# Merging two arenas is done by shifting the indices of the second one by the size of the first one, so no state of
# the second arena can alias a state of the first one. Every combinator then restores the invariants:
#
#   - append_final adds a new state at the end of the arena, linked by epsilon from every final state, and makes it
#     the unique final state
#   - insert_start adds a new state in front of the arena, the new state 0, linked by epsilon to the former start(s)
#
# By example, concatenating a and b gives
#
#   0 -ε-> 1 -a-> 2 -ε-> 3 -b-> 4 -ε-> 5 (ACCEPT)


class Arena:
    def __init__(self, size, finals, edges):
        self.size = size
        self.finals = frozenset(finals)
        self.edges = list(edges)

    @property
    def final(self):
        """
        Return the unique final state index, raise an AutomatonBuildError if the arena has none or more than one
        """
        if len(self.finals) != 1:
            raise AutomatonBuildError("expected a single final state, found %d" % len(self.finals))

        return next(iter(self.finals))

    def shifted(self, offset):
        """
        Return a copy of the arena with all indices increased by offset
        """
        return Arena(
            self.size,
            {index + offset for index in self.finals},
            [(src + offset, dst + offset, symbol) for src, dst, symbol in self.edges]
        )

    def check(self):
        """
        Raise an AutomatonBuildError if the arena refers to a state it does not contain
        """
        for index in self.finals:
            if not 0 <= index < self.size:
                raise AutomatonBuildError("final state %d is out of the arena of size %d" % (index, self.size))

        for src, dst, symbol in self.edges:
            if not (0 <= src < self.size and 0 <= dst < self.size):
                raise AutomatonBuildError(
                    "transition (%d, %d, %r) is out of the arena of size %d" % (src, dst, symbol, self.size))

            check_symbol(symbol)


def atom(symbol):
    """
    Arena with two states and the single edge 0 --symbol--> 1, 1 being final
    """
    return Arena(2, {1}, [(0, 1, symbol)])


def append_final(arena):
    new_final = arena.size
    edges = arena.edges + [(final, new_final, EPSILON) for final in sorted(arena.finals)]

    return Arena(arena.size + 1, {new_final}, edges)


def insert_start(arena, starts=(0,)):
    """
    Add a new start state in front of the arena with an epsilon edge to each of the given former starts
    """
    shifted = arena.shifted(1)
    edges = [(0, start + 1, EPSILON) for start in starts] + shifted.edges

    return Arena(arena.size + 1, shifted.finals, edges)


def sequence(first, second):
    """
    Merge second after first, the final states of first being linked by epsilon to the start of second
    """
    offset = first.size
    shifted = second.shifted(offset)
    links = [(final, offset, EPSILON) for final in sorted(first.finals)]

    return Arena(first.size + second.size, shifted.finals, first.edges + links + shifted.edges)


def parallel(first, second):
    """
    Merge first and second as two disjoint components, return the merged arena and the indices of both former starts
    """
    offset = first.size
    shifted = second.shifted(offset)
    merged = Arena(first.size + second.size, first.finals | shifted.finals, first.edges + shifted.edges)

    return merged, (0, offset)


def concatenate(first, second):
    return insert_start(append_final(sequence(first, second)))


def union(first, second):
    merged, starts = parallel(first, second)

    return insert_start(append_final(merged), starts)


def kleene_closure(arena):
    # The closure A* leads to the following NFA
    #
    # start -ε-> s1 -A-> s2 -ε-> final (ACCEPT)
    #   |        ^---ε---|         ^
    #   |------------ε-------------|
    edges = arena.edges + [(final, 0, EPSILON) for final in sorted(arena.finals)]

    closure = insert_start(append_final(Arena(arena.size, arena.finals, edges)))

    # Zero occurrence, added on the normalized pair so the bypass starts from the new start
    closure.edges.append((0, closure.final, EPSILON))

    return closure
