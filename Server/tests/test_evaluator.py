import pytest
from wordle_app.config import WORD_LIST
from wordle_app.models import LetterStatus
from wordle_app.services import evaluate_guess

C, P, A = LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("ERASE", "SPEED", [P, A, A, P, P]),
    ("PAPER", "APPLE", [P, P, C, P, A]),
    ("SASSY", "STACK", [C, P, A, A, A]),
    ("EERIE", "APPLE", [A, A, A, A, C]),
    ("RADAR", "ARRAY", [P, P, A, C, P]),
    ("CRANE", "REACT", [P, P, C, A, P]),
    ("PLANT", "QUEUE", [A, A, A, A, A]),
    ("MOUSE", "MOUSE", [C, C, C, C, C]),
])
def test_evaluate_golden(guess, target, expected):
    assert evaluate_guess(guess, target) == expected


def test_exact_matches_reserve_letters_before_misplaced_ones():
    # Only one E in APPLE and it is claimed by the exact match at the end
    feedback = evaluate_guess("EERIE", "APPLE")
    assert feedback.count(P) == 0
    assert feedback[-1] == C


def test_present_count_capped_by_target_multiplicity():
    feedback = evaluate_guess("ERASE", "SPEED")
    es = [status for letter, status in zip("ERASE", feedback) if letter == "E"]
    assert es == [P, P]
    assert evaluate_guess("EEEEE", "SPEED") == [A, A, C, C, A]


@pytest.mark.parametrize("word", WORD_LIST)
def test_guess_equal_to_target_is_all_correct(word):
    assert evaluate_guess(word, word) == [C] * len(word)


def test_case_insensitive():
    assert evaluate_guess("apple", "APPLE") == [C] * 5


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        evaluate_guess("APPLES", "APPLE")
