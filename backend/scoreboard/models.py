from datetime import datetime, timezone

from flask_login import UserMixin
from sqlalchemy.orm import validates

from scoreboard import db, bcrypt
from scoreboard.errors import ValidationError

# Well-known primary key of the admin and setting rows
SINGLETON_ID = 1

DEFAULT_HORSE_POINTS = [0, 0, 0, 0]
DEFAULT_RETURN_POINT = 0
NAME_MAX_LENGTH = 64

# Bounds of the BigInteger score and Integer point columns
SCORE_MIN, SCORE_MAX = -2 ** 63, 2 ** 63 - 1
POINT_MIN, POINT_MAX = -2 ** 31, 2 ** 31 - 1


def _utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    return value.isoformat() if value else None


def _is_int(value, low=None, high=None):
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return (low is None or value >= low) and (high is None or value <= high)


class TimestampMixin:
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class Player(TimestampMixin, db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(NAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    score = db.Column(db.BigInteger, default=0, nullable=False)

    @validates('name')
    def validate_name(self, key, name):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError('Player name is required')
        if len(name.strip()) > NAME_MAX_LENGTH:
            raise ValidationError(f'Player name must be at most {NAME_MAX_LENGTH} characters')
        return name.strip()

    @validates('score')
    def validate_score(self, key, score):
        if not _is_int(score, SCORE_MIN, SCORE_MAX):
            raise ValidationError('Score must be a 64-bit integer')
        return score

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'score': self.score,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }


class Admin(UserMixin, TimestampMixin, db.Model):
    __tablename__ = 'admin'
    id = db.Column(db.Integer, primary_key=True)
    password = db.Column(db.String(128), nullable=False)
    is_initialized = db.Column(db.Boolean, default=True, nullable=False)

    @classmethod
    def get(cls):
        return db.session.get(cls, SINGLETON_ID)

    def set_password(self, password):
        # Fresh salt on every call
        self.password = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        if not isinstance(password, str):
            return False
        return bcrypt.check_password_hash(self.password, password)


class Setting(TimestampMixin, db.Model):
    __tablename__ = 'setting'
    id = db.Column(db.Integer, primary_key=True)
    horse_points = db.Column(db.JSON, nullable=False)
    return_point = db.Column(db.Integer, nullable=False)

    @classmethod
    def get(cls):
        return db.session.get(cls, SINGLETON_ID)

    @validates('horse_points')
    def validate_horse_points(self, key, horse_points):
        if not isinstance(horse_points, (list, tuple)) or len(horse_points) != 4 \
                or not all(_is_int(p, POINT_MIN, POINT_MAX) for p in horse_points):
            raise ValidationError('Horse points must be 4 32-bit integers')
        return list(horse_points)

    @validates('return_point')
    def validate_return_point(self, key, return_point):
        if not _is_int(return_point, POINT_MIN, POINT_MAX):
            raise ValidationError('Return point must be a 32-bit integer')
        return return_point

    def to_dict(self):
        return {
            'horsePoints': list(self.horse_points),
            'returnPoint': self.return_point,
        }

    @staticmethod
    def defaults():
        return {
            'horsePoints': list(DEFAULT_HORSE_POINTS),
            'returnPoint': DEFAULT_RETURN_POINT,
        }
