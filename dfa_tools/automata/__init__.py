r"""Work with deterministic finite automata.

The `automata` package provides tools to build and run deterministic
finite automata, via the `dfa_tools.automata.dfa.DFA` class. Below, we
manually construct an automaton accepting binary strings with an even
number of zeros:

```python

from dfa_tools.automata import dfa

even, odd = dfa.State("even"), dfa.State("odd")

even_zeros = dfa.DFA()
even_zeros.add_states([even, odd])
even_zeros.set_start_state(even)
even_zeros.add_accept_state(even)

even_zeros.add_transition(even, odd, "0")
even_zeros.add_transition(odd, even, "0")
even_zeros.add_transition(even, even, "1")
even_zeros.add_transition(odd, odd, "1")

# list accepted words
list(even_zeros.enumerate_words(2))

```
	['', '1', '00', '11']

Automata are usually easier to write down in the text notation read by
`dfa_tools.automata.description_parse`. A handful of example
automata in that notation come with the package. You can get a list of
them by running:

```python

from dfa_tools.automata import dfa
dfa.list_builtins()

```

and load one with `dfa.load_builtin`. To load a description from your
own file:

```python

from dfa_tools.automata import dfa

my_dfa = dfa.load_description_file("automaton.dfa", warn=True)

# python dictionary describing the transition function
my_dfa.transitions

```

"""
