"""
Game Service

Registry of independent single-player games, keyed by game id.
"""

import random
import uuid
from typing import Dict, Iterable, Optional, Tuple

from ..config.game_settings import MAX_GUESSES, WORD_LIST
from ..models.game import GameState, SubmitResult
from .word_source import WordSource
from .wordle_game import WordleGame


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Sharing one word source between all sessions
    - Routing letter, delete and submit input to the right game
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self,
                 word_list: Optional[Iterable[str]] = None,
                 max_guesses: int = MAX_GUESSES,
                 rng: Optional[random.Random] = None):
        self.games: Dict[str, WordleGame] = {}  # Store active games by game_id
        self.word_source = WordSource(WORD_LIST if word_list is None else word_list, rng=rng)
        self.max_guesses = max_guesses

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = WordleGame(self.word_source, max_guesses=self.max_guesses)
        return game_id

    def get_game(self, game_id: str) -> Optional[WordleGame]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.snapshot(game_id)

    def on_letter(self, game_id: str, letter: str) -> Optional[bool]:
        """Type one letter. Returns None if the game does not exist."""
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.append_letter(letter)

    def on_delete(self, game_id: str) -> Optional[bool]:
        """Erase the last letter. Returns None if the game does not exist."""
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.delete_letter()

    def on_submit(self, game_id: str) -> Optional[SubmitResult]:
        """Submit the current row. Returns None if the game does not exist."""
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.submit()

    def check_guess_shape(self, game_id: str, guess) -> Tuple[bool, str]:
        """
        Validates the shape of a whole-word guess before it is typed in.

        Returns:
            Tuple of (is_valid, error_message)
        """
        game = self.games.get(game_id)
        if game is None:
            return False, "Game not found"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = guess.strip()

        if len(normalized_guess) != game.word_length:
            return False, f"Guess must be exactly {game.word_length} letters"

        if not normalized_guess.isascii() or not normalized_guess.isalpha():
            return False, "Guess must contain only letters"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[SubmitResult]:
        """
        Replace the current row with `guess` and submit it, as if the player
        had typed the whole word and pressed enter.

        Returns:
            SubmitResult or None if the game does not exist

        Raises:
            ValueError: If the guess has the wrong length or contains
                anything but letters; the current row is left untouched
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        is_valid, error = self.check_guess_shape(game_id, guess)
        if not is_valid:
            raise ValueError(error)

        while game.delete_letter():
            pass
        for letter in guess.strip():
            game.append_letter(letter)
        return game.submit()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list: Optional[Iterable[str]] = None,
                            max_guesses: int = MAX_GUESSES,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_list=word_list, max_guesses=max_guesses, rng=rng)
    return _game_service
