"""
Property-based tests for list and boolean modes.

Tests the cycling, setting and resetting properties of modes using hypothesis.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st

from modeset import (
    M,
    Mode,
    ListMode,
    BooleanMode,
    InvalidOperationError,
    UnrecognizedValueError,
)


# Strategies for generating test data

ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def labels_strategy():
    """Generate 2-8 ASCII labels that stay distinct when case is ignored."""
    return st.lists(
        st.text(alphabet=st.sampled_from(ASCII_LETTERS), min_size=1, max_size=12),
        min_size=2,
        max_size=8,
        unique_by=str.lower,
    )


@st.composite
def mixed_case_strategy(draw, word: str):
    """Generate the given word with each letter randomly upper or lower case."""
    flags = draw(st.lists(st.booleans(), min_size=len(word), max_size=len(word)))
    return "".join(c.upper() if up else c.lower() for c, up in zip(word, flags))


@st.composite
def true_word_strategy(draw):
    return draw(mixed_case_strategy(draw(st.sampled_from(["on", "true"]))))


@st.composite
def false_word_strategy(draw):
    return draw(mixed_case_strategy(draw(st.sampled_from(["off", "false"]))))


@st.composite
def list_mode_with_ops(draw):
    """Generate a list mode together with a sequence of mutations to apply."""
    labels = draw(labels_strategy())
    ops = draw(st.lists(
        st.one_of(
            st.sampled_from(["cycle", "cycleback", "reset"]).map(lambda op: (op, None)),
            st.sampled_from(labels).map(lambda label: ("set", label)),
        ),
        max_size=20,
    ))
    return labels, ops


def _apply(mode: Mode, ops) -> None:
    for op, arg in ops:
        if op == "set":
            mode.set(arg)
        else:
            getattr(mode, op)()


@allure.feature("List Modes")
@allure.story("Construction selects the first label")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(labels=labels_strategy())
def test_first_label_is_current_and_default(labels: list):
    """
    For any list of two or more distinct labels, a new list mode's current
    and default values are the first label.
    """
    mode = Mode.from_labels(labels)

    assert isinstance(mode, ListMode)
    assert mode.current == labels[0]
    assert mode.default == labels[0]
    assert mode.current_index == 0


@allure.feature("List Modes")
@allure.story("Cycling wraps around")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(labels=labels_strategy())
def test_cycle_n_times_returns_to_start(labels: list):
    """
    For a list mode of n labels, cycle() applied n times returns to the
    first label, visiting each label in order along the way.
    """
    mode = M(labels)
    seen = [mode.cycle() for _ in range(len(labels))]

    assert seen == labels[1:] + labels[:1]
    assert mode.current == labels[0]


@allure.feature("List Modes")
@allure.story("Cycling back undoes cycling")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(case=list_mode_with_ops())
def test_cycle_then_cycleback_restores_list(case):
    """
    From any reachable state, cycle() then cycleback() (or the reverse)
    leaves the current label unchanged.
    """
    labels, ops = case
    mode = M(labels)
    _apply(mode, ops)
    before = mode.current

    mode.cycle()
    assert mode.cycleback() == before

    mode.cycleback()
    assert mode.cycle() == before


@allure.feature("Boolean Modes")
@allure.story("Cycling back undoes cycling")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(default=st.booleans(), flips=st.integers(min_value=0, max_value=5))
def test_cycle_then_cycleback_restores_boolean(default: bool, flips: int):
    """For boolean modes, cycle() and cycleback() are inverse toggles."""
    mode = M(default)
    for _ in range(flips):
        mode.toggle()
    before = mode.current

    mode.cycle()
    assert mode.cycleback() is before


@allure.feature("List Modes")
@allure.story("Reset restores the default")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(case=list_mode_with_ops())
def test_reset_restores_initial_list_value(case):
    """
    However many mutations precede it, reset() returns a list mode to the
    label it held right after construction.
    """
    labels, ops = case
    mode = M(labels)
    initial = mode.current
    _apply(mode, ops)

    assert mode.reset() == initial
    assert mode.current_index == 0


@allure.feature("Boolean Modes")
@allure.story("Reset restores the default")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(
    default=st.booleans(),
    ops=st.lists(st.sampled_from(["toggle", "cycle", "cycleback"]), max_size=15),
    values=st.lists(st.booleans(), max_size=5),
)
def test_reset_restores_initial_boolean_value(default: bool, ops: list, values: list):
    """reset() returns a boolean mode to its constructed default."""
    mode = Mode.boolean(default)
    for op in ops:
        getattr(mode, op)()
    for val in values:
        mode.set(val)

    assert mode.reset() is default
    assert mode.default is default


@allure.feature("Boolean Modes")
@allure.story("Value reflects current")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(default=st.booleans(), flips=st.integers(min_value=0, max_value=6))
def test_boolean_value_tracks_current(default: bool, flips: int):
    """value is "on" exactly when current is True, "off" otherwise."""
    mode = BooleanMode(default)
    for _ in range(flips):
        mode.toggle()

    assert (mode.value == "on") == (mode.current is True)
    assert (mode.value == "off") == (mode.current is False)


@allure.feature("List Modes")
@allure.story("Set ignores case")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(labels=labels_strategy(), data=st.data())
def test_list_set_is_case_insensitive(labels: list, data):
    """
    Setting a list mode to any case variant of a label selects that label.
    """
    mode = M(labels)
    target = data.draw(st.sampled_from(labels))
    variant = data.draw(mixed_case_strategy(target))

    assert mode.set(variant) == target
    assert mode.current == target


@allure.feature("List Modes")
@allure.story("Unknown values are rejected")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(labels=labels_strategy(), data=st.data())
def test_list_set_unknown_value_raises(labels: list, data):
    """Setting a label that matches nothing raises and keeps the state."""
    mode = M(labels)
    mode.cycle()
    before = mode.current
    folded = {label.lower() for label in labels}
    unknown = data.draw(
        st.text(alphabet=st.sampled_from(ASCII_LETTERS), min_size=1, max_size=12)
        .filter(lambda s: s.lower() not in folded)
    )

    with pytest.raises(UnrecognizedValueError):
        mode.set(unknown)
    assert mode.current == before


@allure.feature("Boolean Modes")
@allure.story("Set accepts synonyms")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(default=st.booleans(), word=true_word_strategy())
def test_boolean_set_true_words(default: bool, word: str):
    """Any case variant of "on" or "true" sets a boolean mode to True."""
    mode = M(default)

    assert mode.set(word) is True
    assert mode.value == "on"


@allure.feature("Boolean Modes")
@allure.story("Set accepts synonyms")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(default=st.booleans(), word=false_word_strategy())
def test_boolean_set_false_words(default: bool, word: str):
    """Any case variant of "off" or "false" sets a boolean mode to False."""
    mode = M(default)

    assert mode.set(word) is False
    assert mode.value == "off"


@allure.feature("Boolean Modes")
@allure.story("Unknown values are rejected")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(
    default=st.booleans(),
    word=st.text(max_size=10).filter(
        lambda s: s.lower() not in {"on", "off", "true", "false"}
    ),
)
def test_boolean_set_other_strings_raise(default: bool, word: str):
    """Strings other than the on/off/true/false synonyms raise."""
    mode = M(default)

    with pytest.raises(UnrecognizedValueError):
        mode.set(word)
    assert mode.current is default


@allure.feature("List Modes")
@allure.story("Toggle is rejected")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(case=list_mode_with_ops())
def test_list_toggle_raises_without_change(case):
    """toggle() on a list mode always raises and leaves the label alone."""
    labels, ops = case
    mode = M(labels)
    _apply(mode, ops)
    before = mode.current_index

    with pytest.raises(InvalidOperationError):
        mode.toggle()
    assert mode.current_index == before
