import re
import warnings

import pytest

from dfa_tools.automata import dfa

def test_list_builtins():
    builtins_list = dfa.list_builtins()
    assert "contains_one.dfa" in builtins_list
    for name in builtins_list:
        assert re.match(r".*\.dfa$", name)

@pytest.mark.parametrize("name", dfa.list_builtins())
def test_builtins_parse_cleanly(name):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        automaton = dfa.load_builtin(name, warn=True)
    assert automaton.start_state is not None
    assert len(automaton.accept_states) > 0

def test_load_builtin():
    loaded = dfa.load_builtin("div_by_three.dfa")
    accepted = [int(word, 2) for word in loaded.enumerate_words(5)
                if word == "0" or word.startswith("1")]
    assert all(n % 3 == 0 for n in accepted)
    assert {0, 3, 6, 9, 12, 15, 18, 21} <= set(accepted)

def test_load_even_zeros():
    loaded = dfa.load_builtin("even_zeros.dfa")
    assert list(loaded.enumerate_words(2)) == ["", "1", "00", "11"]

def test_load_missing_builtin():
    with pytest.raises(FileNotFoundError):
        dfa.load_builtin("no_such_automaton.dfa")

def test_load_description_file(tmp_path):
    description = tmp_path / "automaton.dfa"
    description.write_text("States: a\nStart state: a\nAccept states: a\n"
                           "a, x -> a\n")
    loaded = dfa.load_description_file(str(description))
    assert loaded.accepts("xxx")
    assert not loaded.accepts("xy")

def test_from_description_warnings():
    text = "States: a\nStart state: b\nnonsense\n"
    with pytest.warns(UserWarning) as record:
        automaton = dfa.from_description(text, warn=True)

    assert automaton.start_state is None
    messages = [str(w.message) for w in record]
    assert messages == [
        "Skipped line 2 (unknown state): Start state: b",
        "Skipped line 3 (unrecognized line): nonsense"
    ]

def test_load_description_file_utf8(tmp_path):
    description = tmp_path / "greek.dfa"
    description.write_text("States: Αρχή, Τέλος\nStart state: αρχή\n"
                           "Accept states: τέλος\nΑρχή, λ -> Τέλος\n",
                           encoding="utf-8")
    loaded = dfa.load_description_file(str(description))
    assert [s.name for s in loaded.states] == ["Αρχή", "Τέλος"]
    assert loaded.alphabet == {"λ"}
    assert loaded.accepts("λ")
