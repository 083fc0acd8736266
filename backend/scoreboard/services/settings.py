from flask import current_app

from scoreboard import db
from scoreboard.errors import InvalidInput, ValidationError
from scoreboard.models import SINGLETON_ID, Setting
from scoreboard.services.store import insert_or_update


def read_settings() -> dict:
    setting = Setting.get()
    if setting is None:
        return Setting.defaults()
    return setting.to_dict()


def write_settings(horse_points, return_point) -> Setting:
    try:
        setting, created = insert_or_update(
            Setting,
            {'id': SINGLETON_ID},
            {'horse_points': horse_points, 'return_point': return_point},
        )
    except ValidationError as exc:
        db.session.rollback()
        current_app.logger.info(f"[settings] rejected by model: {exc}")
        raise InvalidInput('Invalid settings data') from exc
    current_app.logger.info(f"[settings] {'created' if created else 'updated'} horse_points={setting.horse_points} return_point={setting.return_point}")
    return setting
