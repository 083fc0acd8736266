from flask import current_app

from scoreboard import db
from scoreboard.errors import InvalidInput, ValidationError
from scoreboard.models import Player
from scoreboard.services.store import insert_or_update


def list_players():
    return [{'name': p.name, 'score': p.score} for p in Player.query.all()]


def get_score(name: str) -> int:
    player = Player.query.filter_by(name=name).first()
    # A player without a record has zero points
    return player.score if player else 0


def update_score(name: str, new_score: int):
    try:
        return insert_or_update(Player, {'name': name}, {'score': new_score})
    except ValidationError as exc:
        db.session.rollback()
        raise InvalidInput(str(exc)) from exc


def _escape_like(term: str) -> str:
    return term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def search_names(q):
    if not q:
        return []
    pattern = f"%{_escape_like(q)}%"
    rows = Player.query.with_entities(Player.name).filter(Player.name.ilike(pattern, escape='\\')).all()
    return [row.name for row in rows]


def reset_scores() -> int:
    count = Player.query.update({Player.score: 0}, synchronize_session=False)
    db.session.commit()
    current_app.logger.info(f"[players] reset scores of {count} players")
    return count


def delete_all_players() -> int:
    count = Player.query.delete(synchronize_session=False)
    db.session.commit()
    current_app.logger.info(f"[players] deleted {count} players")
    return count
