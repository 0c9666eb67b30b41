r"""
dfa_tools
=========

`dfa_tools` is a small Python package for working with deterministic finite automata.

The package provides modules to:

- describe an automaton in a short line-oriented text notation, and build the automaton from that text

- check whether words are accepted by an automaton

- compile an automaton into a dense numpy transition table, for running many words against it

Drawing automata is out of scope: a program which displays an automaton should read the states, alphabet and transitions of a `DFA` and keep any layout information (state positions, etc.) on its own side.

## Example usage

```python
from dfa_tools.automata import dfa

automaton = dfa.from_description('''
States: q0, q1
Alphabet: 0, 1
Start state: q0
Accept states: q1
q0, 0 -> q0
q0, 1 -> q1
q1, 0 -> q1
q1, 1 -> q1
''')

automaton.accepts("001")
```
    True
"""
