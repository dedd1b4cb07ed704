import pytest

from edakit.parenthesization import can_produce, multiply, run


@pytest.mark.parametrize(
    "x, y, expected",
    [
        ("a", "a", "b"),
        ("a", "b", "b"),
        ("a", "c", "a"),
        ("b", "a", "c"),
        ("b", "b", "b"),
        ("b", "c", "a"),
        ("c", "a", "a"),
        ("c", "b", "c"),
        ("c", "c", "c"),
    ],
)
def test_multiplication_table(x, y, expected):
    assert multiply(x, y) == expected


def test_multiply_rejects_other_letters():
    with pytest.raises(ValueError):
        multiply("a", "d")


def test_single_letter():
    assert can_produce("a", "a") is True
    assert can_produce("b", "a") is False


def test_two_letters_follow_table():
    assert can_produce("bc", "a") is True
    assert can_produce("ab", "a") is False
    assert can_produce("ab", "b") is True


def test_empty_word_produces_nothing():
    assert can_produce("", "a") is False


@pytest.mark.parametrize("word", ["abc", "bbbba", "cab", "acbcab"])
def test_some_letter_is_always_reachable(word):
    assert any(can_produce(word, letter) for letter in "abc")


def test_run_answers_per_word():
    assert run("bc\nab\n") == "SI\nNO\n"