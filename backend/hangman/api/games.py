from flask import Blueprint, jsonify, request
from hangman import db
from hangman.services.games import GameService, GameError, InvalidGuess, SqlGameStores
from hangman.services.games.results import result_to_dict, summary_to_dict


games = Blueprint('games', __name__)


def _service() -> GameService:
    return GameService(SqlGameStores(db.session))


@games.errorhandler(GameError)
def handle_game_error(exc: GameError):
    return jsonify(exc.to_dict()), exc.status_code


@games.route('/start/<int:player_id>', methods=['POST'])
def start_game(player_id):
    result = _service().start_game(player_id)
    return jsonify(result_to_dict(result)), 201


@games.route('/guess/<int:player_id>', methods=['POST'])
def make_guess(player_id):
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidGuess('Request body must be a JSON object')
    letter = data.get('letter')
    if letter is None:
        raise InvalidGuess('letter is required')
    result = _service().make_guess(player_id, letter)
    return jsonify(result_to_dict(result))


@games.route('/current/<int:player_id>', methods=['GET'])
def current_game(player_id):
    result = _service().current_game(player_id)
    return jsonify(result_to_dict(result))


@games.route('/player/<int:player_id>', methods=['GET'])
def list_player_games(player_id):
    summaries = _service().list_games_by_player(player_id)
    return jsonify([summary_to_dict(s) for s in summaries])


@games.route('', methods=['GET'])
def list_all_games():
    summaries = _service().list_all_games()
    return jsonify([summary_to_dict(s) for s in summaries])
