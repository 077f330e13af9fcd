from contextlib import contextmanager
from flask import current_app
from sqlalchemy.orm import scoped_session
from essayhub.extensions import db


def resolve_session(session=None):
    if session is None:
        session = db.session
    if isinstance(session, scoped_session):
        return session()
    return session


@contextmanager
def atomic(session=None):
    """
    Run a block in one all-or-nothing transaction.

    Commits when the outermost block finishes and rolls back on any error.
    Inner blocks join the outer one, so a workflow calling another workflow
    stays inside a single transaction.
    """
    session = resolve_session(session)
    depth = session.info.get("atomic_depth", 0)
    session.info["atomic_depth"] = depth + 1
    try:
        yield session
        if depth == 0:
            session.commit()
    except Exception as e:
        if depth == 0:
            session.rollback()
            current_app.logger.error(f"[TRANSACTION_ROLLBACK] {type(e).__name__}: {e}")
        raise
    finally:
        session.info["atomic_depth"] = depth
