"""Bearer tokens.

Handlers only talk to a ``TokenIssuer``: ``issue(identity, ttl)`` returns an
opaque string, ``verify(token)`` returns the identity it was issued for or
raises ``TokenError``. ``JwtTokenIssuer`` is the signed-JWT implementation.
"""

from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app


class TokenError(Exception):
    pass


class TokenIssuer:
    def issue(self, identity, ttl: timedelta) -> str:
        raise NotImplementedError

    def verify(self, token: str) -> str:
        raise NotImplementedError


class JwtTokenIssuer(TokenIssuer):
    def __init__(self, secret: str, algorithm: str = 'HS256'):
        if not secret:
            raise ValueError('A signing secret is required')
        self.secret = secret
        self.algorithm = algorithm

    def issue(self, identity, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(identity),
            'iat': now,
            'exp': now + ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        if not isinstance(token, str) or not token:
            raise TokenError('missing token')
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['sub', 'exp']},
            )
        except jwt.InvalidTokenError as exc:
            # Covers bad signatures, malformed tokens and expiry alike
            raise TokenError(str(exc)) from exc
        return payload['sub']


def get_token_issuer() -> TokenIssuer:
    cfg = current_app.config
    return JwtTokenIssuer(cfg.get('JWT_SECRET') or cfg['SECRET_KEY'], cfg.get('JWT_ALGORITHM', 'HS256'))


def token_ttl() -> timedelta:
    return timedelta(hours=int(current_app.config.get('TOKEN_TTL_HOURS', 24)))


def issue_admin_token(admin) -> str:
    return get_token_issuer().issue(admin.id, token_ttl())
