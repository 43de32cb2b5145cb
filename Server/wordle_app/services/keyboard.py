"""
Keyboard Hints

Tracks the best-known status of every letter across all attempts.
"""

from typing import Dict, Sequence

from ..config.game_settings import ALPHABET
from ..models.game import LetterStatus


class KeyboardHints:
    """Per-letter status that only ever moves up: UNUSED < ABSENT < PRESENT < CORRECT."""

    def __init__(self):
        self._status: Dict[str, LetterStatus] = {letter: LetterStatus.UNUSED for letter in ALPHABET}

    def status(self, letter: str) -> LetterStatus:
        return self._status.get(letter.upper(), LetterStatus.UNUSED)

    def upgrade(self, letter: str, new_status: LetterStatus) -> bool:
        """
        Record `new_status` for `letter` if it outranks the current one.

        Returns:
            bool: True if the recorded status changed
        """
        letter = letter.upper()
        current = self._status.get(letter, LetterStatus.UNUSED)
        if new_status.rank <= current.rank:
            return False
        self._status[letter] = new_status
        return True

    def merge_attempt(self, guess: str, feedback: Sequence[LetterStatus]) -> Dict[str, LetterStatus]:
        """
        Fold one attempt into the keyboard.

        A letter that occurs several times in the guess contributes only its
        best status. Returns the letters whose status changed.
        """
        best: Dict[str, LetterStatus] = {}
        for letter, status in zip(guess.upper(), feedback):
            if letter not in best or status.rank > best[letter].rank:
                best[letter] = status

        updates: Dict[str, LetterStatus] = {}
        for letter, status in best.items():
            if self.upgrade(letter, status):
                updates[letter] = status
        return updates

    def as_dict(self) -> Dict[str, str]:
        return {letter: status.value for letter, status in self._status.items()}
