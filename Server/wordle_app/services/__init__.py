"""
Services Package

Contains the game engine and the service that manages game sessions.
"""

from .evaluator import evaluate_guess
from .game_service import GameService, get_game_service, initialize_game_service
from .keyboard import KeyboardHints
from .word_source import WordSource
from .wordle_game import WordleGame, new_game

__all__ = [
    'evaluate_guess', 'KeyboardHints', 'WordSource', 'WordleGame', 'new_game',
    'GameService', 'get_game_service', 'initialize_game_service',
]
