from flask import current_app
from essayhub.models.order import Order
from essayhub.models.order_payment_detail import OrderPaymentDetail
from essayhub.models.client_order_posting_step import ClientOrderPostingStep
from essayhub.models.reference import Currency
from essayhub.schemas.order_schema import SavePaymentSchema
from essayhub.services.constants import PHASE_CHECK_ORDER, STEP_CHECK_ORDER
from essayhub.services.identity_service import get_client_id
from essayhub.utils.lookups import get_required
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic


def update_order_payment(req, phase, request_order_id=None, session=None):
    """
    Create or update the payment detail of an order.

    `phase` is "place-order" when called while saving order details and
    "check-order" when the client confirms the order summary. Only the latter
    moves the posting funnel on to the check-order step.
    """
    data = load_request(SavePaymentSchema(), req)
    summary = data["payment_summary"]

    with atomic(session) as session:
        client_id = get_client_id(data["email"], session=session)
        currency = get_required(session, Currency, "Currency", currency_code=summary["currency_code"])

        order_id = data["order_id"] if data["order_id"] and data["order_id"] > 0 else request_order_id
        if not order_id:
            return {"response": "no order ID"}

        order = get_required(session, Order, "Order", id=order_id)

        values = {
            "currency_id": currency.id,
            "extras": [extra["id"] for extra in summary["extras_list"]],
            "extras_total_price": summary["extras_total_price"],
            "total_price": summary["total_price"],
            "cpp": summary["cpp"],
        }

        detail = session.query(OrderPaymentDetail).filter_by(order_id=order_id).first()

        if detail:
            for field, value in values.items():
                setattr(detail, field, value)

            if phase == PHASE_CHECK_ORDER:
                session.add(ClientOrderPostingStep(
                    client_id=client_id,
                    order_id=order_id,
                    last_step=STEP_CHECK_ORDER,
                ))
            session.flush()

            current_app.logger.info(f"[ORDER_PAYMENT] updated order_id={order_id} phase={phase}")
            return {"response": "success", "newOrder": False}

        session.add(OrderPaymentDetail(order_id=order_id, **values))

        if phase == PHASE_CHECK_ORDER:
            session.add(ClientOrderPostingStep(
                client_id=order.client_id,
                order_id=order_id,
                last_step=STEP_CHECK_ORDER,
            ))
        session.flush()

        current_app.logger.info(f"[ORDER_PAYMENT] created order_id={order_id} phase={phase}")
        return {"response": "success", "orderId": order_id}


def save_order_payment_details(req, session=None):
    return update_order_payment(req, PHASE_CHECK_ORDER, session=session)
