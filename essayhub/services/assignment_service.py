from flask import current_app
from essayhub.models.order import Order
from essayhub.models.order_bid import OrderBid
from essayhub.models.client_payment import ClientPayment
from essayhub.models.writer_order import WriterOrder
from essayhub.models.reference import OrderStatus, PaymentStatus
from essayhub.schemas.order_schema import OrderStatusUpdateSchema, OrderBidsQuerySchema
from essayhub.services.constants import (
    PAYMENT_SUCCESS,
    STATUS_ONGOING,
    STATUS_PENDING_PAYMENT,
)
from essayhub.services.identity_service import get_writer_id
from essayhub.utils.lookups import get_required
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic, resolve_session


def order_already_paid_for(session, order_id) -> bool:
    success = get_required(session, PaymentStatus, "Payment status", status=PAYMENT_SUCCESS)
    payment = (
        session.query(ClientPayment.id)
        .filter_by(order_id=order_id, status_id=success.id)
        .first()
    )
    return payment is not None


def update_order_status(req, session=None):
    """
    Move an order on once a writer is chosen and bind the writer to it.

    The writer is bound straight away, even before payment clears. The order
    only becomes workable for the writer through its status ("Ongoing").
    """
    data = load_request(OrderStatusUpdateSchema(), req)

    with atomic(session) as session:
        paid = order_already_paid_for(session, data["order_id"])
        if paid or data["type"] == "private":
            target = STATUS_ONGOING
        else:
            target = STATUS_PENDING_PAYMENT

        status = get_required(session, OrderStatus, "Order status", status=target)
        updated = (
            session.query(Order)
            .filter_by(id=data["order_id"])
            .update({"status_id": status.id})
        )

        if not updated:
            return {
                "statusUpdated": False,
                "message": "Failed to update order status",
                "writerAlreadyChosen": False,
            }

        writer_id = get_writer_id(data["writer_id"], session=session)
        already_chosen = (
            session.query(WriterOrder.id)
            .filter_by(order_id=data["order_id"], writer_id=writer_id)
            .first()
        ) is not None

        if data["type"] == "public":
            session.query(OrderBid).filter_by(
                order_id=data["order_id"], writer_id=writer_id
            ).update({"successful": True})

        if already_chosen:
            return {"statusUpdated": True, "writerAlreadyChosen": True}

        session.add(WriterOrder(order_id=data["order_id"], writer_id=writer_id))
        session.flush()

        current_app.logger.info(
            f"[WRITER_ASSIGN] order_id={data['order_id']} writer_id={writer_id} status={target}"
        )
        return {"statusUpdated": True, "writerAlreadyChosen": False}


def get_order_bids(req, session=None):
    session = resolve_session(session)
    data = load_request(OrderBidsQuerySchema(), req)
    bids = (
        session.query(OrderBid)
        .filter_by(order_id=data["order_id"], is_deleted=False)
        .order_by(OrderBid.created_at.asc(), OrderBid.id.asc())
        .all()
    )
    return {"bids": [b.serialize() for b in bids]}
