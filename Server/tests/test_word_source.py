import random

import pytest
from wordle_app.config import WordListError
from wordle_app.services import WordSource


def test_normalizes_to_uppercase():
    source = WordSource(["apple", " Crane "])
    assert source.words == ["APPLE", "CRANE"]
    assert source.word_length == 5
    assert len(source) == 2


def test_is_valid_is_case_insensitive(vocabulary):
    source = WordSource(vocabulary)
    assert source.is_valid("apple") is True
    assert source.is_valid("APPLE") is True
    assert "crane" in source
    assert source.is_valid("ZZZZZ") is False
    assert source.is_valid("APPLES") is False
    assert source.is_valid(None) is False


@pytest.mark.parametrize("words", [
    [],
    ["APPLE", "PEAR"],
    ["APPLE", "APPL3"],
    ["APPLE", "apple"],
])
def test_invalid_vocabulary_rejected(words):
    with pytest.raises(WordListError):
        WordSource(words)


def test_select_target_draws_from_vocabulary(vocabulary):
    source = WordSource(vocabulary)
    for _ in range(20):
        assert source.select_target() in vocabulary


def test_select_target_reproducible_with_seed(vocabulary):
    first = WordSource(vocabulary, rng=random.Random(7))
    second = WordSource(vocabulary, rng=random.Random(7))
    assert [first.select_target() for _ in range(5)] == [second.select_target() for _ in range(5)]
