"""
Endpoint Decorators

Shared request handling for the game endpoints: service lookup, action
logging and translation of game errors into JSON responses.
"""

from functools import wraps
from flask import request, jsonify

from ..errors import GameError, GameNotFoundError, NoCandidateWordsError
from .game_logger import game_logger

# HTTP status for game errors that are not plain bad requests
_ERROR_STATUS = {
    GameNotFoundError: 404,
    NoCandidateWordsError: 503,
}


def error_status(error: GameError) -> int:
    for error_class, status in _ERROR_STATUS.items():
        if isinstance(error, error_class):
            return status
    return 400


def game_endpoint(action: str):
    """
    Decorator for game endpoints.

    Injects the game service as ``game_service``, logs the action, and turns
    GameError into a 4xx response and anything else into a 500. The wrapped
    view returns a dict that is sent back with ``success: True``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from ..services.game_service import get_game_service

            game_id = kwargs.get('game_id')
            game_service = get_game_service()
            if not game_service:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            game_logger.log_user_action(request, action, game_id)

            try:
                response_data = {'success': True, **f(*args, game_service=game_service, **kwargs)}
            except GameError as e:
                error_response = {
                    'success': False,
                    'error': e.message,
                    'error_type': e.error_type
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), error_status(e)
            except Exception as e:
                game_logger.log_error(request, e, action, game_id)
                error_response = {
                    'success': False,
                    'error': 'Internal server error'
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 500

            game_logger.log_server_response(request, action, True, response_data, game_id)
            return jsonify(response_data)

        return decorated_function
    return decorator
