from flask import Blueprint, jsonify, current_app
from coin_arena import GAME_EXTENSION

game_api = Blueprint('game_api', __name__)


@game_api.route('/state', methods=['GET'])
def get_game_state():
    """Read-only view of the round: status, winner, players and the live coin."""
    game = current_app.extensions[GAME_EXTENSION]
    with game.lock:
        payload = game.state()
    return jsonify(payload)


@game_api.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    game = current_app.extensions[GAME_EXTENSION]
    with game.lock:
        board = [
            {'rank': rank, 'id': p.id, 'score': p.score}
            for rank, p in enumerate(game.registry.leaderboard(), start=1)
        ]
    return jsonify(board)


@game_api.route('/rank/<string:player_id>', methods=['GET'])
def get_rank(player_id):
    """Position of one player on the leaderboard; rank 0 for unknown ids."""
    game = current_app.extensions[GAME_EXTENSION]
    with game.lock:
        rank, total = game.registry.rank_of(player_id)
    return jsonify({'id': player_id, 'rank': rank, 'total': total})
