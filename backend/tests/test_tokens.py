from datetime import timedelta

import jwt
import pytest

from scoreboard.tokens import JwtTokenIssuer, TokenError, get_token_issuer


def test_issue_and_verify():
    issuer = JwtTokenIssuer('k1')
    token = issuer.issue(1, timedelta(hours=24))
    assert issuer.verify(token) == '1'


def test_token_carries_expiry():
    issuer = JwtTokenIssuer('k1')
    token = issuer.issue(1, timedelta(hours=24))
    claims = jwt.decode(token, 'k1', algorithms=['HS256'])
    assert claims['exp'] - claims['iat'] == 24 * 60 * 60


def test_expired_token_rejected():
    issuer = JwtTokenIssuer('k1')
    token = issuer.issue(1, timedelta(seconds=-5))
    with pytest.raises(TokenError):
        issuer.verify(token)


def test_wrong_signature_rejected():
    token = JwtTokenIssuer('k1').issue(1, timedelta(hours=1))
    with pytest.raises(TokenError):
        JwtTokenIssuer('k2').verify(token)


@pytest.mark.parametrize('token', ['', 'not-a-token', None])
def test_malformed_token_rejected(token):
    with pytest.raises(TokenError):
        JwtTokenIssuer('k1').verify(token)


def test_issuer_requires_secret():
    with pytest.raises(ValueError):
        JwtTokenIssuer('')


def test_expired_token_is_unauthorized(flask_app, client, token):
    with flask_app.app_context():
        stale = get_token_issuer().issue(1, timedelta(seconds=-5))
    res = client.get('/api/settings', headers={'Authorization': f'Bearer {stale}'})
    assert res.status_code == 401
    assert res.get_json() == {'message': 'Unauthorized'}


def test_token_for_unknown_identity_is_unauthorized(flask_app, client, token):
    with flask_app.app_context():
        orphan = get_token_issuer().issue(99, timedelta(hours=1))
    res = client.get('/api/settings', headers={'Authorization': f'Bearer {orphan}'})
    assert res.status_code == 401


def test_token_signed_with_other_secret_is_unauthorized(client, token):
    forged = JwtTokenIssuer('someone-else').issue(1, timedelta(hours=1))
    res = client.get('/api/settings', headers={'Authorization': f'Bearer {forged}'})
    assert res.status_code == 401
