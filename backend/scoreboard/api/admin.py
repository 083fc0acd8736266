from flask import Blueprint, jsonify
from flask_login import login_required

from scoreboard.api import json_body
from scoreboard.services import admin as admin_service
from scoreboard.services import players as player_service

admin = Blueprint('admin', __name__)


@admin.route('/check-init', methods=['GET'])
def check_init():
    return jsonify({'needInit': admin_service.need_init()})


@admin.route('/init-password', methods=['POST'])
def init_password():
    data = json_body()
    token = admin_service.init_password(data.get('password'))
    return jsonify({'token': token})


@admin.route('/auth', methods=['POST'])
def auth():
    data = json_body()
    token = admin_service.authenticate(data.get('password'))
    return jsonify({'token': token})


@admin.route('/change-password', methods=['POST'])
@login_required
def change_password():
    data = json_body()
    token = admin_service.change_password(data.get('oldPassword'), data.get('newPassword'))
    return jsonify({'message': 'Password changed successfully', 'token': token})


@admin.route('/reset-scores', methods=['POST'])
@login_required
def reset_scores():
    data = json_body()
    # Destructive: the password is checked again on top of the bearer token
    admin_service.confirm_password(data.get('password'))
    player_service.reset_scores()
    return jsonify({'message': 'All scores have been reset'})


@admin.route('/delete-all-players', methods=['POST'])
@login_required
def delete_all_players():
    data = json_body()
    admin_service.confirm_password(data.get('password'))
    player_service.delete_all_players()
    return jsonify({'message': 'All players have been deleted'})
