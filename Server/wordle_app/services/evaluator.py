"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm for a single
(guess, target) pair.

Algorithm (two-pass):
  1) Count every letter of the target.
  2) First pass marks all exact position matches CORRECT and consumes one
     count for each. It runs over every position before the second pass so
     that exact matches reserve their letters first.
  3) Second pass walks the remaining positions left to right and marks a
     letter PRESENT only while the target still has unclaimed copies of it;
     everything else is ABSENT.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import LetterStatus


def evaluate_guess(guess: str, target: str) -> List[LetterStatus]:
    """
    Compute per-letter feedback for `guess` against `target`.

    Both words are compared case-insensitively and must have the same length.

    Examples:
      evaluate_guess("ERASE", "SPEED") -> [PRESENT, ABSENT, ABSENT, PRESENT, PRESENT]
      evaluate_guess("PAPER", "APPLE") -> [PRESENT, PRESENT, CORRECT, PRESENT, ABSENT]
    """
    guess = guess.strip().upper()
    target = target.strip().upper()
    if len(guess) != len(target):
        raise ValueError("Guess and target must be the same length")

    remaining = Counter(target)
    result: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    # Second pass: misplaced letters, capped by what is left in the target
    for i, g in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[g] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[g] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return result  # type: ignore[return-value]

