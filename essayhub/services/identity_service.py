from sqlalchemy import func
from essayhub.models.user import User, Client, Writer
from essayhub.utils.exceptions import LookupFailure
from essayhub.utils.transaction import resolve_session


def find_user(email: str, session=None):
    session = resolve_session(session)
    return (
        session.query(User)
        .filter(func.lower(User.email) == email.strip().lower())
        .first()
    )


def get_user(email: str, session=None):
    user = find_user(email, session=session)
    if not user:
        raise LookupFailure("User not found", details={"email": email})
    return user


def find_client(email: str, session=None):
    session = resolve_session(session)
    user = get_user(email, session=session)
    return session.query(Client).filter_by(user_id=user.id).first()


def get_client_id(email: str, session=None) -> int:
    client = find_client(email, session=session)
    if not client:
        raise LookupFailure("Client not found", details={"email": email})
    return client.id


def get_writer_id(user_id: int, session=None) -> int:
    session = resolve_session(session)
    writer = session.query(Writer).filter_by(user_id=user_id).first()
    if not writer:
        raise LookupFailure("Writer not found", details={"user_id": user_id})
    return writer.id
