"""
Request Decorators

Contains decorators shared by the game endpoints.
"""

from functools import wraps
from flask import request, jsonify


def require_game(action: str):
    """
    Decorator that resolves the `game_id` URL parameter to a live game.

    The wrapped view receives `game_service` and `game` keyword arguments.
    Responds 500 when the game service is not initialized and 404 when the
    game does not exist.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(game_id, *args, **kwargs):
            from ..services.game_service import get_game_service
            from .game_logger import game_logger

            game_service = get_game_service()
            if not game_service:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            game = game_service.get_game(game_id)
            if game is None:
                error_response = {
                    'success': False,
                    'error': 'Game not found'
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 404

            kwargs['game_service'] = game_service
            kwargs['game'] = game
            return f(game_id, *args, **kwargs)

        return decorated_function
    return decorator
