from flask import current_app, jsonify

from scoreboard import db, login_manager
from scoreboard.models import Admin
from scoreboard.tokens import TokenError, get_token_issuer


def _bearer_token(request):
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


@login_manager.request_loader
def load_admin_from_request(request):
    token = _bearer_token(request)
    if token is None:
        return None
    try:
        identity = get_token_issuer().verify(token)
    except TokenError as exc:
        current_app.logger.info(f"[auth] rejected bearer token: {exc}")
        return None
    try:
        admin_id = int(identity)
    except ValueError:
        return None
    return db.session.get(Admin, admin_id)


@login_manager.unauthorized_handler
def unauthorized():
    # Same answer for missing, malformed, expired and forged tokens
    return jsonify({'message': 'Unauthorized'}), 401
