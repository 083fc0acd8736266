from sqlalchemy.exc import IntegrityError

from scoreboard import db


def insert_or_update(model, key: dict, values: dict):
    """Create the row identified by ``key`` or update it if it exists.

    Returns ``(instance, created)``. The row is looked up first; when it is
    missing the insert is committed, and a uniqueness violation on that
    insert (another writer got there first) turns it into an update, so two
    writers racing on the same key leave exactly one row behind.
    """
    instance = model.query.filter_by(**key).first()
    if instance is None:
        instance = model(**key, **values)
        db.session.add(instance)
        try:
            db.session.commit()
            return instance, True
        except IntegrityError:
            db.session.rollback()
            instance = model.query.filter_by(**key).one()

    for field, value in values.items():
        setattr(instance, field, value)
    db.session.commit()
    return instance, False
