"""
WebSocket Event Handlers

Pushes game state snapshots to connected clients after every accepted guess.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import keyboard_to_json, result_to_json
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def broadcast_game_state_update(game_id, game_service, socketio):
    """Send the latest snapshot of a game to every client in its room."""
    state = game_service.get_game_state(game_id)
    if state is None:
        return
    socketio.emit('game_state', {
        'success': True,
        'state': asdict(state)
    }, to=game_room(game_id))


def publish_outcome(game_id, game_service, socketio, outcome, guess):
    """Answer the sender and, for an accepted guess, update the whole room."""
    if not outcome.accepted:
        emit('guess_rejected', {
            'success': False,
            'error': outcome.message,
            'error_code': outcome.error,
            'guess': guess
        })
        return

    emit('guess_result', {
        'success': True,
        'result': result_to_json(outcome.result),
        'letter_status': keyboard_to_json(outcome.keyboard),
        'solved': outcome.solved
    })
    broadcast_game_state_update(game_id, game_service, socketio)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room for real-time updates."""
        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state', {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Leave a game room."""
        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        """Submit a guess and publish the resulting snapshot."""
        guess = data.get('guess')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required'})
            return

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        outcome = game_service.make_guess(game_id, guess)
        publish_outcome(game_id, game_service, socketio, outcome, guess)

    @socketio.on('submit_input')
    @websocket_game_required
    def handle_submit_input(data, game_service=None, game_id=None):
        """Submit the in-progress input word and publish the resulting snapshot."""
        guess = game_service.get_game_state(game_id).input_word
        game_logger.log_user_action(request, 'submit_input', game_id, guess=guess, transport='websocket')

        outcome = game_service.submit_input(game_id)
        publish_outcome(game_id, game_service, socketio, outcome, guess)

    @socketio.on('update_input')
    @websocket_game_required
    def handle_update_input(data, game_service=None, game_id=None):
        """Update the in-progress input word."""
        text = data.get('input', '')
        if not isinstance(text, str):
            emit('error', {'error': 'Input must be a string'})
            return

        emit('input_updated', {
            'success': True,
            'input_word': game_service.update_input(game_id, text)
        })
