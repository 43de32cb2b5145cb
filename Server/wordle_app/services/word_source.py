"""
Word Source

Holds the fixed-length vocabulary, picks target words and answers
whether a string is a legal guess.
"""

import logging
import random
from typing import Iterable, List, Optional

from ..config.game_settings import WordListError, validate_word_list_integrity

logger = logging.getLogger('wordle_game.engine')


class WordSource:
    """
    Read-only vocabulary shared by any number of games.

    The same list is used for target selection and for guess validation;
    there is no separate, larger dictionary.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        normalized = [str(word).strip().upper() for word in words]
        try:
            validate_word_list_integrity(normalized)
        except WordListError as e:
            logger.warning(f"Rejected word list: {e}")
            raise

        self._words: List[str] = normalized
        self._lookup = frozenset(normalized)
        self._rng = rng or random.Random()

    @property
    def word_length(self) -> int:
        return len(self._words[0])

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def select_target(self) -> str:
        """Pick a target uniformly at random."""
        return self._rng.choice(self._words)

    def is_valid(self, candidate: str) -> bool:
        """Case-insensitive vocabulary membership."""
        if not isinstance(candidate, str):
            return False
        return candidate.strip().upper() in self._lookup

    def __contains__(self, candidate) -> bool:
        return self.is_valid(candidate)

    def __len__(self) -> int:
        return len(self._words)
