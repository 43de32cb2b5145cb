"""
Game Controller

Handles all game-related HTTP endpoints. The client sends one key event per
request (letter, delete, submit) and renders the returned state.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.game import GameStatus
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _submission_response(action, game_id, game, result, guess=None):
    """Build and log the response for a processed submission."""
    state = game.snapshot(game_id)
    result_data = result.to_dict()

    if result.error_kind is not None:
        error_response = {
            'success': False,
            'error_kind': result.error_kind.value,
            'error': result.message,
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, action, False, error_response, game_id,
            validation_error=result.error_kind.value, attempted_guess=game.current_guess
        )
        return jsonify(error_response), 400

    response_data = {
        'success': True,
        'result': result_data,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        guess=guess, round=state.current_round, game_over=state.game_over
    )

    # Log the game outcome once, on the submission that ended it
    if result.ok and result.terminal == GameStatus.WON:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            rounds_used=state.current_round, target_word=result.target_word,
            winning_guess=state.guesses[-1]
        )
    elif result.ok and result.terminal == GameStatus.LOST:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            rounds_used=state.current_round, target_word=result.target_word,
            final_guess=state.guesses[-1]
        )

    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game('get_state')
def get_state(game_id, game_service, game):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game.snapshot(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game('letter')
def type_letter(game_id, game_service, game):
    """Append one letter to the current row."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('letter'), str):
            error_response = {
                'success': False,
                'error': 'Letter is required'
            }
            game_logger.log_server_response(request, 'letter', False, error_response, game_id)
            return jsonify(error_response), 400

        letter = data['letter']
        game_logger.log_user_action(request, 'letter', game_id, letter=letter)

        accepted = game_service.on_letter(game_id, letter)
        response_data = {
            'success': True,
            'accepted': accepted,
            'state': asdict(game.snapshot(game_id))
        }

        game_logger.log_server_response(request, 'letter', True, response_data, game_id, accepted=accepted)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'letter', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'letter', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/delete', methods=['POST'])
@require_game('delete_letter')
def delete_letter(game_id, game_service, game):
    """Remove the last letter of the current row."""
    try:
        game_logger.log_user_action(request, 'delete_letter', game_id)

        removed = game_service.on_delete(game_id)
        response_data = {
            'success': True,
            'removed': removed,
            'state': asdict(game.snapshot(game_id))
        }

        game_logger.log_server_response(request, 'delete_letter', True, response_data, game_id, removed=removed)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_letter', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_letter', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game('submit')
def submit(game_id, game_service, game):
    """Submit the letters typed so far."""
    try:
        game_logger.log_user_action(request, 'submit', game_id, current_letters=game.current_guess)

        result = game_service.on_submit(game_id)
        return _submission_response('submit', game_id, game, result)

    except Exception as e:
        game_logger.log_error(request, e, 'submit', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game('submit_guess')
def make_guess(game_id, game_service, game):
    """Submit a whole word as the current row."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        is_valid, error = game_service.check_guess_shape(game_id, guess)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        result = game_service.make_guess(game_id, guess)
        return _submission_response('submit_guess', game_id, game, result, guess=guess)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'vocabulary_size': len(game_service.word_source) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
