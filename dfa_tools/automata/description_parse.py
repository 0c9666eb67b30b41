"""Read and write the line-oriented text notation for automata.

A description looks like:

```
States: q0, q1
Alphabet: 0, 1
Start state: q0
Accept states: q1
q0, 0 -> q0
q0, 1 -> q1
```

State names are matched case-insensitively, and a name only refers to
states declared on earlier lines. Lines which can't be used are
skipped and reported, never raised.

"""

from collections import namedtuple
from enum import Enum

from . import dfa

STATES_PREFIX = "States:"
ALPHABET_PREFIX = "Alphabet:"
START_PREFIX = "Start state:"
ACCEPT_PREFIX = "Accept states:"
ARROW = "->"


class SkipReason(Enum):
    UNRECOGNIZED = "unrecognized line"
    UNKNOWN_STATE = "unknown state"
    EMPTY_SYMBOL = "empty symbol"
    MALFORMED_TRANSITION = "malformed transition"


SkippedLine = namedtuple("SkippedLine", ["line_number", "text", "reason"])


def _name_key(name):
    return name.strip().lower()


def _tokens(text):
    return [token.strip() for token in text.split(",")]


def parse_description(text):
    automaton = dfa.DFA()
    registry = {}
    skipped = []

    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line:
            continue

        if line.startswith(STATES_PREFIX):
            for name in _tokens(line[len(STATES_PREFIX):]):
                if name:
                    state = dfa.State(name)
                    automaton.add_state(state)
                    registry[_name_key(name)] = state

        elif line.startswith(ALPHABET_PREFIX):
            for symbol in _tokens(line[len(ALPHABET_PREFIX):]):
                if symbol:
                    automaton.add_symbol(symbol[0])

        elif line.startswith(START_PREFIX):
            state = registry.get(_name_key(line[len(START_PREFIX):]))
            if state is None:
                skipped.append(
                    SkippedLine(line_number, line, SkipReason.UNKNOWN_STATE))
            else:
                automaton.set_start_state(state)

        elif line.startswith(ACCEPT_PREFIX):
            for name in _tokens(line[len(ACCEPT_PREFIX):]):
                if not name:
                    continue
                state = registry.get(_name_key(name))
                if state is None:
                    skipped.append(SkippedLine(line_number, line,
                                               SkipReason.UNKNOWN_STATE))
                else:
                    automaton.add_accept_state(state)

        elif ARROW in line:
            reason = _parse_transition(line, automaton, registry)
            if reason is not None:
                skipped.append(SkippedLine(line_number, line, reason))

        else:
            skipped.append(
                SkippedLine(line_number, line, SkipReason.UNRECOGNIZED))

    return automaton, skipped


def _parse_transition(line, automaton, registry):
    """Add the transition described by `line`, or return the reason it
    was skipped."""
    parts = line.split(ARROW)
    if len(parts) != 2:
        return SkipReason.MALFORMED_TRANSITION

    left = parts[0].split(",")
    if len(left) != 2:
        return SkipReason.MALFORMED_TRANSITION

    source = registry.get(_name_key(left[0]))
    target = registry.get(_name_key(parts[1]))
    symbol = left[1].strip()

    if source is None or target is None:
        return SkipReason.UNKNOWN_STATE
    if not symbol:
        return SkipReason.EMPTY_SYMBOL

    automaton.add_transition(source, target, symbol[0])
    return None


def format_description(automaton):
    """Write an automaton in the notation read by `parse_description`.

    States are listed in the order they were added, and symbols in
    sorted order. Parsing the output gives an automaton with the same
    behavior, provided no two states have names which differ only by
    case.

    """
    lines = [
        "{} {}".format(STATES_PREFIX,
                       ", ".join(s.name for s in automaton.states)),
        "{} {}".format(ALPHABET_PREFIX,
                       ", ".join(sorted(automaton.alphabet)))
    ]
    if automaton.start_state is not None:
        lines.append("{} {}".format(START_PREFIX, automaton.start_state.name))

    accepting = [s.name for s in automaton.states
                 if s in automaton.accept_states]
    if accepting:
        lines.append("{} {}".format(ACCEPT_PREFIX, ", ".join(accepting)))

    for source, target, symbol in automaton.transition_list():
        lines.append("{}, {} {} {}".format(source.name, symbol, ARROW,
                                          target.name))

    return "\n".join(lines) + "\n"
