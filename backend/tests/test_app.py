from scoreboard import db
from scoreboard.models import Player


def test_unknown_route_returns_json_404(client):
    res = client.get('/api/nope')
    assert res.status_code == 404
    assert res.get_json() == {'message': 'Resource not found'}


def test_favicon_is_empty(client):
    res = client.get('/favicon.ico')
    assert res.status_code == 204
    assert res.data == b''


def test_unexpected_error_hides_details(flask_app, client, monkeypatch):
    from scoreboard.services import players as player_service

    def broken():
        raise RuntimeError('connection string leaked: postgres://user:pw@db')

    monkeypatch.setattr(player_service, 'list_players', broken)
    res = client.get('/api/get-all')
    assert res.status_code == 500
    assert res.get_json() == {'message': 'Internal server error'}


def test_cors_headers(client):
    origin = 'http://localhost:5173'
    res = client.get('/api/get-all', headers={'Origin': origin})
    # Older flask-cors answers '*', newer releases echo the origin back
    assert res.headers.get('Access-Control-Allow-Origin') in ('*', origin)


def test_db_reset_command(flask_app, client, token):
    client.put('/api/update', json={'name': 'Alice', 'newScore': 3})
    result = flask_app.test_cli_runner().invoke(args=['db-reset'])
    assert 'Database has been reset' in result.output
    assert client.get('/api/check-init').get_json() == {'needInit': True}
    with flask_app.app_context():
        assert db.session.query(Player).count() == 0
