"""Admin bootstrap and password checks.

The admin row is a singleton stored under ``SINGLETON_ID``. Its existence is
what marks the system as initialized; nothing ever deletes it.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError

from scoreboard import db
from scoreboard.errors import Conflict, Unauthorized
from scoreboard.models import SINGLETON_ID, Admin
from scoreboard.tokens import issue_admin_token
from scoreboard.validation import require_password

NOT_INITIALIZED = 'System is not initialized'
WRONG_PASSWORD = 'Wrong password'


def _min_length():
    return int(current_app.config.get('MIN_PASSWORD_LENGTH', 6))


def need_init() -> bool:
    admin = Admin.get()
    current_app.logger.info(f"[init] check: {'initialized' if admin else 'not initialized'}")
    return admin is None


def init_password(password) -> str:
    if Admin.get() is not None:
        current_app.logger.info("[init] refused: admin already exists")
        raise Conflict('System is already initialized')
    require_password(password, _min_length())

    admin = Admin(id=SINGLETON_ID)
    admin.set_password(password)
    db.session.add(admin)
    try:
        db.session.commit()
    except IntegrityError as exc:
        # Lost a race with another bootstrap request
        db.session.rollback()
        raise Conflict('System is already initialized') from exc
    current_app.logger.info("[init] admin account created")
    return issue_admin_token(admin)


def confirm_password(password) -> Admin:
    """Return the admin if ``password`` matches, raise ``Unauthorized`` otherwise."""
    admin = Admin.get()
    if admin is None:
        current_app.logger.info("[auth] failed: not initialized")
        raise Unauthorized(NOT_INITIALIZED)
    if not admin.check_password(password):
        current_app.logger.info("[auth] failed: wrong password")
        raise Unauthorized(WRONG_PASSWORD)
    return admin


def authenticate(password) -> str:
    admin = confirm_password(password)
    current_app.logger.info("[auth] success")
    return issue_admin_token(admin)


def change_password(old_password, new_password) -> str:
    require_password(new_password, _min_length(), f'New password must be at least {_min_length()} characters')
    admin = Admin.get()
    if admin is None:
        raise Unauthorized(NOT_INITIALIZED)
    if not admin.check_password(old_password):
        current_app.logger.info("[auth] password change refused: wrong current password")
        raise Unauthorized('Current password is wrong')

    admin.set_password(new_password)
    db.session.commit()
    current_app.logger.info("[auth] password changed")
    return issue_admin_token(admin)
