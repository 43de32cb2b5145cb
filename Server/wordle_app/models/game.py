"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for tiles and keyboard keys."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"

    @property
    def rank(self) -> int:
        """Ordering used by the keyboard: CORRECT > PRESENT > ABSENT > UNUSED."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle of a single game. WON and LOST are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class ErrorKind(Enum):
    """Recoverable submission errors surfaced to the player."""
    INCOMPLETE_GUESS = "INCOMPLETE_GUESS"
    UNKNOWN_WORD = "UNKNOWN_WORD"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    ErrorKind.INCOMPLETE_GUESS: "Not enough letters",
    ErrorKind.UNKNOWN_WORD: "Not in word list",
}


@dataclass(frozen=True)
class Attempt:
    """One submitted guess and its per-position feedback."""
    guess: str
    feedback: Tuple[LetterStatus, ...]

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Letter status as string for JSON serialization."""
        return [(letter, status.value) for letter, status in zip(self.guess, self.feedback)]


@dataclass
class SubmitResult:
    """Outcome of a submission, handed back to the presentation layer."""
    ok: bool
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    feedback: List[LetterStatus] = field(default_factory=list)
    keyboard_updates: Dict[str, LetterStatus] = field(default_factory=dict)
    terminal: Optional[GameStatus] = None
    target_word: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'ok': self.ok,
            'error_kind': self.error_kind.value if self.error_kind else None,
            'message': self.message,
            'feedback': [status.value for status in self.feedback],
            'keyboard_updates': {letter: status.value for letter, status in self.keyboard_updates.items()},
            'terminal': self.terminal.value if self.terminal else None,
            'target_word': self.target_word,
        }


@dataclass
class GameState:
    """Serializable snapshot of a game as seen by a client."""
    game_id: Optional[str]
    current_round: int
    max_rounds: int
    word_length: int
    current_letters: str
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
