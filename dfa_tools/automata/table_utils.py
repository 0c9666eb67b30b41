"""table_utils.py: convert between `DFA` objects and dense transition
tables.

A dense transition table is a 2D integer array whose `[i, j]` entry is
the index of the state reached from state `i` by reading symbol `j`,
or `UNDEFINED` if there is no such transition.

"""

from collections import deque

import numpy as np

UNDEFINED = -1


def build_table(automaton):
    """Build a dense transition table for an automaton.

    Parameters:
    -----------

    automaton: the `DFA` to convert.

    Return:
    -----------

    Tuple `(states, symbols, table)`. `states` is the tuple of states
    in the order they were added to the automaton, `symbols` is the
    sorted tuple of alphabet symbols, and `table` is an integer array
    of shape `(len(states), len(symbols))`.

    """
    states = automaton.states
    symbols = tuple(sorted(automaton.alphabet))

    state_indices = {state: i for i, state in enumerate(states)}
    symbol_indices = {symbol: j for j, symbol in enumerate(symbols)}

    table = np.full((len(states), len(symbols)), UNDEFINED, dtype=int)
    for source, target, symbol in automaton.transition_list():
        table[state_indices[source], symbol_indices[symbol]] = (
            state_indices[target]
        )

    return states, symbols, table


def build_dict(table, states, symbols, to_filter=(UNDEFINED,)):
    """Build a python dictionary from a dense transition table.

    Parameters:
    -----------

    table: integer array of shape `(len(states), len(symbols))`.

    states: labels for the rows of the table. Entries of the table are
    indices into this sequence.

    symbols: ordered labels for the columns of the table.

    to_filter: table entries to discard when building the dictionary
    (i.e. the undefined transitions).

    Return:
    -----------

    Dictionary of the form `{state: {symbol: target_state}}`.

    """
    t_dict = {}
    for i, row in enumerate(np.asarray(table)):
        s_dict = {}
        for symbol, target in zip(symbols, row):
            if target not in to_filter:
                s_dict[symbol] = states[target]
        t_dict[states[i]] = s_dict

    return t_dict


def reachable_states(automaton):
    """Find the set of states which can be reached from the start state."""
    start = automaton.start_state
    if start is None:
        return set()

    transitions = automaton.transitions
    visited = {start}
    to_visit = deque([start])
    while len(to_visit) > 0:
        state = to_visit.popleft()
        for target in transitions[state].values():
            if target not in visited:
                visited.add(target)
                to_visit.append(target)

    return visited
