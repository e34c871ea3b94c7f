"""
Game Lookup Decorators

Resolve the game service and session before HTTP and WebSocket handlers run.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit

from ..models.errors import GameNotFoundError


def require_game(f):
    """
    Decorator for endpoints taking a ``game_id`` URL parameter.

    Answers 500 when the game service is missing and 404 when the game is
    unknown; otherwise the service is passed on as ``game_service``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_id = kwargs.get('game_id')
        if not game_service.has_game(game_id):
            return jsonify({
                'success': False,
                'error': str(GameNotFoundError(game_id))
            }), 404

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload names a ``game_id``."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id or not game_service.has_game(game_id):
            emit('error', {'error': str(GameNotFoundError(game_id))})
            return

        kwargs['game_service'] = game_service
        kwargs['game_id'] = game_id
        return f(*args, **kwargs)

    return decorated_function
