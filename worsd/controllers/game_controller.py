"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..models.game import keyboard_to_json, result_to_json
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


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
            word_length=state.word_length
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
@require_game
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guesses=len(state.guesses), solved=state.solved
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


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, game_service):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        outcome = game_service.make_guess(game_id, guess)
        return _outcome_response(game_service, game_id, outcome, 'submit_guess', guess)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


def _outcome_response(game_service, game_id, outcome, action, guess):
    """Build and log the JSON response for a submitted guess."""
    if not outcome.accepted:
        error_response = {
            'success': False,
            'error': outcome.message,
            'error_code': outcome.error
        }
        game_logger.log_server_response(
            request, action, False, error_response, game_id,
            validation_error=outcome.error, attempted_guess=guess
        )
        return jsonify(error_response), 400

    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'result': result_to_json(outcome.result),
        'letter_status': keyboard_to_json(outcome.keyboard),
        'solved': outcome.solved,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        guess=guess, guesses=len(state.guesses), solved=state.solved
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/input', methods=['PUT'])
@require_game
def update_input(game_id, game_service):
    """Update the in-progress input word."""
    data = request.get_json(silent=True)
    text = data.get('input', '') if isinstance(data, dict) else None
    if not isinstance(text, str):
        return jsonify({
            'success': False,
            'error': 'Input must be a string'
        }), 400

    input_word = game_service.update_input(game_id, text)
    return jsonify({
        'success': True,
        'input_word': input_word
    })


@game_bp.route('/game/<game_id>/input/submit', methods=['POST'])
@require_game
def submit_input(game_id, game_service):
    """Submit the in-progress input word as a guess."""
    try:
        input_word = game_service.get_game_state(game_id).input_word
        game_logger.log_user_action(request, 'submit_input', game_id, guess=input_word)

        outcome = game_service.submit_input(game_id)
        return _outcome_response(game_service, game_id, outcome, 'submit_input', input_word)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_input', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_input', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/definitions', methods=['GET'])
@require_game
def get_definitions(game_id, game_service):
    """Get the definitions fetched for the target word, if any."""
    game_logger.log_user_action(request, 'get_definitions', game_id)

    response_data = {
        'success': True,
        'definitions': game_service.get_definitions(game_id)
    }

    game_logger.log_server_response(request, 'get_definitions', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id, game_service):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_games_count() if game_service else 0,
            'vocabulary_size': len(game_service.vocabulary) if game_service else 0,
            'vocabulary_stats': get_word_statistics(game_service.vocabulary.all()) if game_service else {},
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
