from thompyl.__automaton.states import EPSILON, is_epsilon


# ======================================================================================================================
# NFA Simulation
# ======================================================================================================================

# A NFA is simulated by tracking the set of all states it can be in. The set starts as the epsilon closure of the start
# state and every symbol of the input moves it with step(). The input is accepted if the final state is in the set once
# the input is fully consumed.


def epsilon_closure(relation, states):
    """
    Return the set of all states reachable from the given states with zero or more epsilon transitions.
    Epsilon cycles are absorbed by the visited set.
    """
    closure = set(states)
    todo_states = list(closure)

    while todo_states:
        state = todo_states.pop()

        for next_state in relation.lookup(state, EPSILON):
            if next_state not in closure:
                closure.add(next_state)
                todo_states.append(next_state)

    return frozenset(closure)


def move(relation, states, symbol):
    """
    Return the states attained from the given states by a transition on symbol, without epsilon closure
    """
    # EPSILON is never an input symbol
    if is_epsilon(symbol):
        return frozenset()

    next_states = set()

    for state in states:
        next_states |= relation.lookup(state, symbol)

    return frozenset(next_states)


def step(relation, states, symbol):
    return epsilon_closure(relation, move(relation, states, symbol))


def accepts(nfa, sequence):
    """
    Return True if the NFA reaches its final state after consuming the whole sequence
    """
    current_states = epsilon_closure(nfa.relation, {nfa.start})

    for symbol in sequence:
        current_states = step(nfa.relation, current_states, symbol)

        # No state left, the remaining input cannot be consumed
        if not current_states:
            return False

    return nfa.final in current_states
