"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify

from ..config.game_settings import get_word_statistics
from ..errors import GameNotFoundError, InvalidInputError
from ..services.game_service import get_game_service
from ..utils.decorators import game_endpoint
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body, optional_int

game_bp = Blueprint('game', __name__)


def _log_outcome(game_id, state, guess):
    """Log a game event when a submission ends the game."""
    if guess is None or not state.game_over:
        return
    event = 'game_won' if state.won else 'game_lost'
    game_logger.log_game_event(
        game_id, event, request.remote_addr,
        rounds_used=len(state.guesses), final_guess=guess.word,
        shared=state.is_shared
    )


def _guess_payload(guess):
    return guess.to_dict() if guess is not None else None


@game_bp.route('/new_game', methods=['POST'])
@game_endpoint('new_game')
def new_game(game_service):
    """Create a new game session."""
    game_id = game_service.create_new_game(get_json_body())
    state = game_service.get_game_state(game_id)
    return {'game_id': game_id, 'state': asdict(state)}


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@game_endpoint('get_state')
def get_state(game_id, game_service):
    """Get current game state."""
    state = game_service.get_game_state(game_id)
    if state is None:
        raise GameNotFoundError("Game not found")
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@game_endpoint('key_press')
def press_key(game_id, game_service):
    """Apply a single key press (letter, Enter, Backspace, arrows, blank)."""
    data = get_json_body()
    if 'key' not in data:
        raise InvalidInputError("Key is required")

    state, guess = game_service.handle_key(game_id, data['key'])
    _log_outcome(game_id, state, guess)
    return {'state': asdict(state), 'guess': _guess_payload(guess)}


@game_bp.route('/game/<game_id>/cell', methods=['POST'])
@game_endpoint('set_cell')
def set_cell(game_id, game_service):
    """Write a letter, the blank placeholder or nothing into one cell."""
    data = get_json_body()
    position = optional_int(data, 'position')
    if position is None:
        raise InvalidInputError("Position is required")

    state = game_service.set_cell(game_id, position, data.get('value'))
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>/cursor', methods=['POST'])
@game_endpoint('move_cursor')
def move_cursor(game_id, game_service):
    """Move the cursor by a direction or to an absolute position."""
    data = get_json_body()
    state = game_service.move_cursor(
        game_id,
        direction=data.get('direction'),
        position=optional_int(data, 'position')
    )
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>/clear', methods=['POST'])
@game_endpoint('clear_cell')
def clear_cell(game_id, game_service):
    """Backspace at a position, or at the cursor when none is given."""
    data = get_json_body()
    state = game_service.clear_cell(game_id, optional_int(data, 'position'))
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@game_endpoint('submit_guess')
def make_guess(game_id, game_service):
    """Submit the input row, or a whole word passed as ``guess``."""
    data = get_json_body()
    state, guess = game_service.submit_guess(game_id, data.get('guess'))
    _log_outcome(game_id, state, guess)
    return {'state': asdict(state), 'guess': _guess_payload(guess)}


@game_bp.route('/game/<game_id>/settings', methods=['POST'])
@game_endpoint('update_settings')
def update_settings(game_id, game_service):
    """Change word length, attempt limit or infinite mode."""
    state = game_service.update_settings(game_id, get_json_body())
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@game_endpoint('restart_game')
def restart_game(game_id, game_service):
    """Start a new game in place, leaving shared mode."""
    state = game_service.restart_game(game_id)
    game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr,
                               word_length=state.word_length)
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>/share', methods=['GET'])
@game_endpoint('share_game')
def share_game(game_id, game_service):
    """Return the share code for the current target."""
    return {'share_code': game_service.get_share_code(game_id)}


@game_bp.route('/game/<game_id>/load_share', methods=['POST'])
@game_endpoint('load_share')
def load_share(game_id, game_service):
    """Replace the current game with a shared word."""
    data = get_json_body()
    state = game_service.load_shared_game(game_id, data.get('share_code'))
    game_logger.log_game_event(game_id, 'shared_game_loaded', request.remote_addr,
                               word_length=state.word_length)
    return {'state': asdict(state)}


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@game_endpoint('delete_game')
def delete_game(game_id, game_service):
    """Delete a game session."""
    if not game_service.delete_game(game_id):
        raise GameNotFoundError("Game not found")
    game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
    return {}


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.games) if game_service else 0,
        'dictionary': get_word_statistics(dict(game_service.dictionary.entries)) if game_service else None,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
