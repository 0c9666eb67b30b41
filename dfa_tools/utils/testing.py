from ..automata import table_utils


def assert_same_words(dfa1, dfa2, max_length):
    assert (list(dfa1.enumerate_words(max_length)) ==
            list(dfa2.enumerate_words(max_length)))


def assert_same_shape(dfa1, dfa2):
    assert [s.name for s in dfa1.states] == [s.name for s in dfa2.states]
    assert dfa1.alphabet == dfa2.alphabet

    assert (dfa1.start_state is None) == (dfa2.start_state is None)
    if dfa1.start_state is not None:
        assert dfa1.start_state.name == dfa2.start_state.name

    assert ({s.name for s in dfa1.accept_states} ==
            {s.name for s in dfa2.accept_states})

    _, _, table1 = table_utils.build_table(dfa1)
    _, _, table2 = table_utils.build_table(dfa2)
    assert (table1 == table2).all()
