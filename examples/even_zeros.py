from dfa_tools.automata import dfa, simulate

# load one of the automata which come with the package
even_zeros = dfa.load_builtin("even_zeros.dfa")

# every accepted word of length at most 4
for word in even_zeros.enumerate_words(4):
    print(repr(word))

# run a batch of words through the compiled transition table
table = simulate.compile_dfa(even_zeros)
words = ["", "0", "00", "0101", "1112"]
for word, accepted in zip(words, table.accepts_all(words)):
    print("{!r}: {}".format(word, "Accepted" if accepted else "Rejected"))
