"""
Wordle Game

State machine for one single-player game: letter entry, submission,
feedback recording and the win/loss decision.
"""

import logging
import random
from typing import Iterable, List, Optional, Union

from ..config.game_settings import MAX_GUESSES
from ..models.game import Attempt, ErrorKind, GameState, GameStatus, SubmitResult
from .evaluator import evaluate_guess
from .keyboard import KeyboardHints
from .word_source import WordSource

logger = logging.getLogger('wordle_game.engine')

WIN_MESSAGE = "Congratulations!"


class WordleGame:
    """
    A single game instance.

    The game owns its attempt history and keyboard hints; the word source is
    shared. Once the game is WON or LOST every operation becomes a no-op.
    """

    def __init__(self, word_source: WordSource, max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {max_guesses}")

        self.word_source = word_source
        self.word_length = word_source.word_length
        self.max_guesses = max_guesses
        self._target = word_source.select_target()
        self._buffer: List[str] = []
        self.attempts: List[Attempt] = []
        self.keyboard = KeyboardHints()
        self.status = GameStatus.IN_PROGRESS

        logger.debug(f"New game started, answer (for testing): {self._target}")

    @property
    def target(self) -> str:
        return self._target

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    @property
    def letter_count(self) -> int:
        return len(self._buffer)

    @property
    def current_guess(self) -> str:
        return "".join(self._buffer)

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    def append_letter(self, ch: str) -> bool:
        """Add one letter to the current row; ignored when full, over, or not A-Z."""
        if self.game_over or len(self._buffer) >= self.word_length:
            return False
        if not isinstance(ch, str) or len(ch) != 1 or not ch.isascii() or not ch.isalpha():
            return False

        self._buffer.append(ch.upper())
        return True

    def delete_letter(self) -> bool:
        """Remove the last letter of the current row, if any."""
        if self.game_over or not self._buffer:
            return False

        self._buffer.pop()
        return True

    def submit(self) -> SubmitResult:
        """
        Submit the current row.

        Incomplete rows and unknown words are rejected without touching the
        game state, so the player can edit and retry. A valid word is scored,
        recorded and folded into the keyboard, then the game decides whether
        it has been won or lost.
        """
        if self.game_over:
            return SubmitResult(ok=False, terminal=self.status, target_word=self._target)

        if len(self._buffer) < self.word_length:
            return self._reject(ErrorKind.INCOMPLETE_GUESS)

        candidate = self.current_guess
        if not self.word_source.is_valid(candidate):
            return self._reject(ErrorKind.UNKNOWN_WORD)

        feedback = evaluate_guess(candidate, self._target)
        self.attempts.append(Attempt(candidate, tuple(feedback)))
        keyboard_updates = self.keyboard.merge_attempt(candidate, feedback)
        self._buffer.clear()

        if candidate == self._target:
            self.status = GameStatus.WON
        elif self.attempt_count >= self.max_guesses:
            self.status = GameStatus.LOST

        result = SubmitResult(ok=True, feedback=feedback, keyboard_updates=keyboard_updates)
        if self.status == GameStatus.WON:
            result.terminal = self.status
            result.target_word = self._target
            result.message = WIN_MESSAGE
        elif self.status == GameStatus.LOST:
            result.terminal = self.status
            result.target_word = self._target
            result.message = f"Game Over! The word was {self._target}"

        logger.debug(
            f"Attempt {self.attempt_count}/{self.max_guesses}: {candidate} -> "
            f"{[status.value for status in feedback]} ({self.status.value})"
        )
        return result

    def _reject(self, kind: ErrorKind) -> SubmitResult:
        return SubmitResult(ok=False, error_kind=kind, message=kind.message)

    def snapshot(self, game_id: Optional[str] = None) -> GameState:
        """
        Serializable view of the game. The answer is revealed only once the
        game is over.
        """
        return GameState(
            game_id=game_id,
            current_round=self.attempt_count,
            max_rounds=self.max_guesses,
            word_length=self.word_length,
            current_letters=self.current_guess,
            status=self.status.value,
            game_over=self.game_over,
            won=self.status == GameStatus.WON,
            guesses=[attempt.guess for attempt in self.attempts],
            guess_results=[attempt.as_pairs() for attempt in self.attempts],
            letter_status=self.keyboard.as_dict(),
            answer=self._target if self.game_over else None,
        )


def new_game(vocabulary: Union[WordSource, Iterable[str]],
             max_guesses: int = MAX_GUESSES,
             rng: Optional[random.Random] = None) -> WordleGame:
    """
    Start a game over a word source or a plain list of words.

    `rng` only applies when a plain list is given; a WordSource keeps its own.
    """
    if not isinstance(vocabulary, WordSource):
        vocabulary = WordSource(vocabulary, rng=rng)
    return WordleGame(vocabulary, max_guesses=max_guesses)
