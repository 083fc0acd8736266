from flask import Blueprint, jsonify, request

from scoreboard.api import json_body
from scoreboard.errors import InvalidInput
from scoreboard.services import players as player_service
from scoreboard.validation import parse_score, require_name

players = Blueprint('players', __name__)


@players.route('/get-all', methods=['GET'])
def get_all():
    return jsonify(player_service.list_players())


@players.route('/get-single', methods=['GET'])
def get_single():
    name = require_name(request.args.get('name'), 'Player name is required')
    return jsonify({'score': player_service.get_score(name)})


@players.route('/update', methods=['PUT'])
def update():
    data = json_body()
    name = data.get('name')
    new_score = data.get('newScore')
    if not name or new_score is None:
        raise InvalidInput('Player name and new score are required')

    player, created = player_service.update_score(require_name(name), parse_score(new_score))
    return jsonify(player.to_dict()), 201 if created else 200


@players.route('/search-names', methods=['GET'])
def search_names():
    return jsonify(player_service.search_names(request.args.get('q', '')))
