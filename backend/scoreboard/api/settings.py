from flask import Blueprint, jsonify
from flask_login import login_required

from scoreboard.api import json_body
from scoreboard.services import settings as settings_service
from scoreboard.validation import validate_settings

settings = Blueprint('settings', __name__)


@settings.route('/settings', methods=['GET'])
@login_required
def get_settings():
    return jsonify(settings_service.read_settings())


@settings.route('/settings', methods=['POST'])
@login_required
def save_settings():
    data = json_body()
    horse_points, return_point = validate_settings(data.get('horsePoints'), data.get('returnPoint'))
    settings_service.write_settings(horse_points, return_point)
    return jsonify({'message': 'Settings saved'})
