"""Run automata from a dense transition table.

`TransitionTable` is a compiled, read-only copy of a `DFA`. States and
symbols are replaced by integer indices, and the transition function
is stored as a numpy array, so each step of a run is a single array
lookup:

```python
from dfa_tools.automata import dfa, simulate

table = simulate.compile_dfa(dfa.load_builtin("contains_one.dfa"))
table.accepts_all(["", "0", "1", "01", "10"])
```
    array([False, False,  True,  True,  True])

Changes made to the `DFA` after compiling are not seen by the table.

"""

import numpy as np

from . import dfa, table_utils
from .table_utils import UNDEFINED


class TransitionTable:
    def __init__(self, states, symbols, table, start_index=None,
                 accepting=None):
        """

        Parameters
        ----------
        states : sequence
            labels for the states, one for each row of `table`.

        symbols : sequence of strings
            the alphabet, one symbol for each column of `table`.

        table : array of int
            `table[i, j]` is the index of the state reached from
            state `i` on symbol `j`, or `UNDEFINED`.

        start_index : int
            index of the start state, or `None` if there is no start
            state.

        accepting : array of bool
            `accepting[i]` is true iff state `i` is an accept state.
            Defaults to no accept states.
        """
        self.states = tuple(states)
        self.symbols = tuple(symbols)
        self.table = np.array(table, dtype=int).reshape(
            (len(self.states), len(self.symbols))
        )
        if ((self.table < UNDEFINED).any() or
            (self.table >= len(self.states)).any()):
            raise ValueError(
                "Transition table entries must be state indices or"
                " UNDEFINED ({})".format(UNDEFINED)
            )

        if (start_index is not None and
            not 0 <= start_index < len(self.states)):
            raise ValueError(
                "Start index {} out of range for {} states".format(
                    start_index, len(self.states))
            )
        self.start_index = start_index

        if accepting is None:
            accepting = np.zeros(len(self.states), dtype=bool)
        self.accepting = np.array(accepting, dtype=bool)
        if self.accepting.shape != (len(self.states),):
            raise ValueError(
                "Expected one accepting flag per state, got shape {}".format(
                    self.accepting.shape)
            )

        self._state_indices = {s: i for i, s in enumerate(self.states)}
        self._symbol_indices = {c: j for j, c in enumerate(self.symbols)}

    @classmethod
    def from_dfa(cls, automaton):
        states, symbols, table = table_utils.build_table(automaton)

        start_index = None
        if automaton.start_state is not None:
            start_index = states.index(automaton.start_state)

        accept_states = automaton.accept_states
        accepting = [state in accept_states for state in states]

        return cls(states, symbols, table, start_index, accepting)

    def __repr__(self):
        return "TransitionTable(symbols={}, table={})".format(
            self.symbols, self.table.tolist())

    def state_index(self, state):
        return self._state_indices.get(state)

    def symbol_index(self, symbol):
        return self._symbol_indices.get(symbol)

    def step(self, index, symbol):
        """Get the index of the state reached from state `index` on
        `symbol`, or `None` if the transition is undefined.

        """
        j = self._symbol_indices.get(symbol)
        if j is None:
            return None
        target = self.table[index, j]
        if target == UNDEFINED:
            return None
        return int(target)

    def final_index(self, word):
        """Get the index of the state reached after reading `word` from
        the start state, or `None` if the run gets stuck.

        """
        index = self.start_index
        for letter in word:
            if index is None:
                break
            index = self.step(index, letter)
        return index

    def accepts(self, word):
        index = self.final_index(word)
        if index is None:
            return False
        return bool(self.accepting[index])

    def accepts_all(self, words):
        """Check a sequence of words for acceptance.

        Returns
        -------
        ndarray
            boolean array with one entry per word.
        """
        return np.array([self.accepts(word) for word in words], dtype=bool)

    def to_dfa(self):
        """Rebuild a `DFA` from this table.

        States of the new automaton are fresh `State` objects with the
        same names as the states of the table.
        """
        new_states = [dfa.State(str(state)) for state in self.states]
        automaton = dfa.DFA()
        automaton.add_states(new_states)

        for symbol in self.symbols:
            automaton.add_symbol(symbol)

        rows = table_utils.build_dict(self.table, new_states, self.symbols)
        for source, row in rows.items():
            for symbol, target in row.items():
                automaton.add_transition(source, target, symbol)

        if self.start_index is not None:
            automaton.set_start_state(new_states[self.start_index])

        for i in np.flatnonzero(self.accepting):
            automaton.add_accept_state(new_states[i])

        return automaton


def compile_dfa(automaton):
    return TransitionTable.from_dfa(automaton)
