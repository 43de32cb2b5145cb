"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Attempt, ErrorKind, GameState, GameStatus, LetterStatus, SubmitResult

__all__ = ['Attempt', 'ErrorKind', 'GameState', 'GameStatus', 'LetterStatus', 'SubmitResult']
