"""Work with deterministic finite automata.

A deterministic finite automaton is a finite directed labeled graph,
subject to the constraint that each state has at most one outgoing
edge with a given label. One of the states is the "start state," and
some of the states are "accept states." A word `w` in the alphabet of
edge labels is accepted if following the edges labeled by the letters
of `w` (starting at the start state) ends at an accept state.

This module provides the `DFA` class, which can be built either
directly, via its mutation methods, or from a textual description:

```python
from dfa_tools.automata import dfa

contains_one = dfa.from_description('''
States: q0, q1
Alphabet: 0, 1
Start state: q0
Accept states: q1
q0, 0 -> q0
q0, 1 -> q1
q1, 0 -> q1
q1, 1 -> q1
''')

contains_one.accepts("01")
```
    True

"""

import warnings
from collections import namedtuple
from importlib import resources

from . import description_parse

BUILTIN_DIR = "builtin"


class DFAException(Exception):
    pass


Transition = namedtuple("Transition", ["source", "target", "symbol"])


class State:
    """A single state of a deterministic finite automaton.

    States are compared by identity: two states with the same name are
    still different states. A state carries no display information;
    anything like a drawing position should be kept in a separate
    mapping keyed by the state.

    """
    def __init__(self, name, accepting=False):
        self.name = name
        self.accepting = accepting

    def __str__(self):
        return self.name

    def __repr__(self):
        return "State({!r}, accepting={})".format(self.name, self.accepting)


class DFA:
    """DFA: a deterministic finite automaton.

    The transition function is stored as a python dictionary of the
    form:

    ```
    {
      state1: {symbol_a: target_a, symbol_b: target_b, ...},
      state2: ....,
    }
    ```

    Every registered state has a (possibly empty) row in this
    dictionary. A missing entry means the transition is undefined,
    which makes the automaton reject.

    None of the mutation methods raise. Calls which refer to states
    that have not been registered with `add_state` are ignored.

    """
    def __init__(self):
        self._transitions = {}
        self._alphabet = set()
        self._start_state = None
        self._accept_states = set()

    def __str__(self):
        return "DFA with transitions:\n{}".format(
            {str(s): {c: str(t) for c, t in row.items()}
             for s, row in self._transitions.items()}
        )

    def __repr__(self):
        return "DFA(states={}, start={!r}, accept={})".format(
            [s.name for s in self._transitions],
            None if self._start_state is None else self._start_state.name,
            sorted(s.name for s in self._accept_states)
        )

    @property
    def states(self):
        """Tuple of the registered states, in the order they were added."""
        return tuple(self._transitions)

    @property
    def alphabet(self):
        return frozenset(self._alphabet)

    @property
    def start_state(self):
        return self._start_state

    @property
    def accept_states(self):
        return frozenset(self._accept_states)

    @property
    def transitions(self):
        """Copy of the transition function, as a dictionary of dictionaries."""
        return {state: dict(row) for state, row in self._transitions.items()}

    def has_state(self, state):
        return state in self._transitions

    def state_named(self, name):
        """Find a registered state by its exact name.

        If several registered states share the name, the one added
        last is returned. Returns `None` if there is no such state.

        """
        found = None
        for state in self._transitions:
            if state.name == name:
                found = state
        return found

    def add_state(self, state):
        """Register a state with the automaton.

        Adding a state which is already registered does nothing.
        """
        if state not in self._transitions:
            self._transitions[state] = {}

    def add_states(self, states):
        for state in states:
            self.add_state(state)

    def set_start_state(self, state):
        if state in self._transitions:
            self._start_state = state

    def add_accept_state(self, state):
        """Mark a registered state as an accept state.

        This also sets the `accepting` flag on the state itself.
        """
        if state in self._transitions:
            self._accept_states.add(state)
            state.accepting = True

    def add_symbol(self, symbol):
        """Add a symbol to the alphabet without adding any transitions."""
        self._alphabet.add(symbol)

    def add_transition(self, source, target, symbol):
        """Add the transition `source --symbol--> target`.

        Both states must already be registered, otherwise nothing
        happens. The symbol is added to the alphabet. If `source`
        already had a transition labeled `symbol`, it is replaced.

        """
        if source in self._transitions and target in self._transitions:
            self._alphabet.add(symbol)
            self._transitions[source][symbol] = target

    def transition_list(self):
        """Get all of the transitions of this automaton.

        Yields
        ------
        Transition
            A named tuple `(source, target, symbol)` for each
            transition in the automaton.

        """
        for source, row in self._transitions.items():
            for symbol, target in row.items():
                yield Transition(source, target, symbol)

    def step(self, state, symbol):
        """Get the state reached from `state` by reading `symbol`.

        Returns `None` if the symbol is not in the alphabet or if the
        transition is undefined.
        """
        if symbol not in self._alphabet:
            return None
        row = self._transitions.get(state)
        if row is None:
            return None
        return row.get(symbol)

    def follow_word(self, word, start_state=None):
        """Find the final state of the automaton after reading a word.

        Parameters
        ----------
        word : string
            The word the automaton should read.

        start_state : State
            The state to start from. If `None` (the default), use the
            automaton's start state.

        Returns
        -------
        State
            The state of the automaton after reading all of `word`.

        Raises
        ------
        DFAException
            Raised if there is no start state, or if the automaton
            gets stuck before the end of the word.

        """
        if start_state is None:
            start_state = self._start_state
        if start_state is None:
            raise DFAException("The automaton has no start state.")

        state = start_state
        for letter in word:
            if letter not in self._alphabet:
                raise DFAException(
                    f"'{letter}' is not in the alphabet of the automaton."
                )
            row = self._transitions.get(state)
            if row is None or letter not in row:
                raise DFAException(
                    f"No transition from {state} on '{letter}'."
                )
            state = row[letter]

        return state

    def accepts(self, word, start_state=None):
        """Determine if this automaton accepts a given word.

        Parameters
        ----------
        word : string
            word to test for acceptance
        start_state : State
            The start state for the automaton. If `None` (the
            default), use the automaton's start state.

        Returns
        -------
        bool
            True if word is accepted by the automaton, False
            otherwise.

        """
        try:
            final = self.follow_word(word, start_state)
        except DFAException:
            return False

        return final in self._accept_states

    def enumerate_fixed_length_paths(self, length, start_state=None,
                                     with_states=False):
        """Enumerate all words of a fixed length which can be read by the
        automaton, whether or not they are accepted.

        Parameters
        ----------
        length : int
            the length of the words we want to enumerate

        start_state : State
            which state to start at. If `None`, use the start state
            of the automaton.

        with_states : bool
            if `True`, also yield the state of the automaton after
            reading each word.

        Yields
        ------
        string or (string, State)
            Words in lexicographic order of their symbols, or pairs
            `(word, end_state)` if `with_states` is true.
        """
        if start_state is None:
            start_state = self._start_state
        if start_state not in self._transitions:
            return

        if length <= 0:
            if with_states:
                yield ("", start_state)
            else:
                yield ""
        else:
            for word, state in self.enumerate_fixed_length_paths(
                    length - 1, start_state=start_state, with_states=True):
                row = self._transitions[state]
                for symbol in sorted(row):
                    if with_states:
                        yield (word + symbol, row[symbol])
                    else:
                        yield word + symbol

    def enumerate_words(self, max_length, start_state=None):
        """Enumerate all words up to a given length accepted by the automaton.

        Words are yielded shortest first.

        Parameters
        ----------
        max_length : int
            maximum length of a word to enumerate
        start_state : State
            the state to start from. If `None`, use the automaton's
            start state
        """
        for i in range(max_length + 1):
            for word, state in self.enumerate_fixed_length_paths(
                    i, start_state=start_state, with_states=True):
                if state in self._accept_states:
                    yield word


def from_description(text, warn=False) -> DFA:
    """Build an automaton from its textual description.

    Parameters
    ----------
    text : string
        Description of the automaton, in the format read by
        `description_parse.parse_description`.

    warn : bool
        If `True`, issue a `UserWarning` for every line of the
        description which was skipped.

    Returns
    -------
    DFA
        The automaton described by the text. Lines which could not be
        used are ignored, so this may be incomplete.

    """
    automaton, skipped = description_parse.parse_description(text)
    if warn:
        for line in skipped:
            warnings.warn("Skipped line {} ({}): {}".format(
                line.line_number, line.reason.value, line.text))
    return automaton


def load_description_file(filename, warn=False) -> DFA:
    with open(filename, "r", encoding="utf-8") as description_file:
        return from_description(description_file.read(), warn=warn)


def load_builtin(filename, warn=False):
    """Load an automaton description included with the automata subpackage.

    Parameters
    ----------
    filename : string
        Name of the description file to load

    warn : bool
        If `True`, issue a `UserWarning` for every skipped line.

    Returns
    -------
    DFA
        automaton read from this file

    """
    resource = resources.files(__package__).joinpath(BUILTIN_DIR, filename)
    return from_description(resource.read_text(encoding="utf-8"), warn=warn)


def list_builtins():
    """Return a sorted list of the automaton descriptions included with the
    automata subpackage.

    """
    builtin_dir = resources.files(__package__).joinpath(BUILTIN_DIR)
    return sorted(entry.name for entry in builtin_dir.iterdir()
                  if entry.name.endswith(".dfa"))
