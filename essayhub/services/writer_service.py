from flask import current_app
from sqlalchemy import func
from essayhub.models.client_writer import ClientWriter
from essayhub.models.order import Order
from essayhub.models.reference import OrderStatus
from essayhub.models.writer_invitation import WriterInvitation
from essayhub.models.writer_order import WriterOrder
from essayhub.schemas.writer_schema import ClientRefSchema, WriterInviteSchema
from essayhub.services.constants import STATUS_COMPLETED
from essayhub.services.identity_service import get_client_id
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic, resolve_session


def get_personal_writers(req, session=None):
    """Writers the client has a confirmed connection with."""
    session = resolve_session(session)
    data = load_request(ClientRefSchema(), req)
    client_id = get_client_id(data["email"], session=session)

    connections = (
        session.query(ClientWriter)
        .filter_by(client_id=client_id, connection_confirmed=True)
        .order_by(ClientWriter.id)
        .all()
    )

    writers = []
    for connection in connections:
        writer = connection.writer
        completed_orders = (
            session.query(func.count(WriterOrder.id))
            .join(Order, Order.id == WriterOrder.order_id)
            .join(OrderStatus, OrderStatus.id == Order.status_id)
            .filter(WriterOrder.writer_id == writer.id, OrderStatus.status == STATUS_COMPLETED)
            .scalar()
        )
        writers.append({
            "id": connection.id,
            "writer": writer.to_dict(),
            "completed_orders": completed_orders,
        })
    return writers


def send_writer_invite(req, session=None):
    data = load_request(WriterInviteSchema(), req)
    writer_email = data["writer_email"].strip().lower()

    with atomic(session) as session:
        client_id = get_client_id(data["email"], session=session)

        exists = (
            session.query(WriterInvitation.id)
            .filter(func.lower(WriterInvitation.email) == writer_email)
            .first()
        )
        if exists:
            return {"success": False, "message": "Invitation already exists!"}

        session.add(WriterInvitation(email=writer_email, client_id=client_id))
        session.flush()

        current_app.logger.info(f"[WRITER_INVITE] client_id={client_id} email={writer_email}")
        return {"success": True, "message": "Invitation sent successfully"}
