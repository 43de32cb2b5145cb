"""
Controllers Package

Contains the HTTP blueprints that expose the game to a browser client.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
