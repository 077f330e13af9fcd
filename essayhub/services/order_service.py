from flask import current_app
from essayhub.models.order import Order
from essayhub.models.order_file import OrderFile
from essayhub.models.order_payment_detail import OrderPaymentDetail
from essayhub.models.client_order_posting_step import ClientOrderPostingStep
from essayhub.models.reference import (
    Currency,
    EntityType,
    OrderFileType,
    OrderFormat,
    OrderServiceType,
    OrderStatus,
)
from essayhub.schemas.order_schema import PlaceOrderSchema, OrderRefSchema, RemoveFileSchema
from essayhub.services.constants import (
    FILE_CLIENT_SUPPORTING,
    PHASE_PLACE_ORDER,
    STATUS_AVAILABLE,
    STATUS_COMPLETED,
    STEP_ORDER_DETAILS,
    VISIBILITY_PRIVATE,
    VISIBILITY_PUBLIC,
)
from essayhub.services.identity_service import get_client_id
from essayhub.services.payment_service import update_order_payment
from essayhub.utils.exceptions import LookupFailure
from essayhub.utils.filenames import original_name_formatter
from essayhub.utils.lookups import get_required
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic, resolve_session


def attach_order_files(session, order_id, files, file_type, skip_existing=False):
    """
    Record supporting file metadata against an order.

    With `skip_existing`, files already attached to the order under the same
    URL and type are left alone.
    """
    attached = 0
    for f in files:
        if skip_existing:
            exists = (
                session.query(OrderFile.id)
                .filter_by(order_id=order_id, file_url=f["file_url"], type_id=file_type.id)
                .first()
            )
            if exists:
                continue

        session.add(OrderFile(
            order_id=order_id,
            file_url=f["file_url"],
            original_name=original_name_formatter(f["original_name"]),
            type_id=file_type.id,
            submitted_paper=False,
            is_deleted=False,
        ))
        session.flush()
        attached += 1
    return attached


def save_order_details(req, session=None):
    """Create (orderId 0) or update (orderId > 0) an order placed by a client."""
    data = load_request(PlaceOrderSchema(), req)

    with atomic(session) as session:
        client_id = get_client_id(data["email"], session=session)
        service_type = get_required(session, OrderServiceType, "Service type", type=data["service_type"])
        available = get_required(session, OrderStatus, "Order status", status=STATUS_AVAILABLE)
        order_format = get_required(session, OrderFormat, "Order format", currently_in_use=True)

        visibility_label = VISIBILITY_PUBLIC if data["type"] == "public" else VISIBILITY_PRIVATE
        visibility = get_required(session, EntityType, "Order type", type=visibility_label)

        values = {
            "client_id": client_id,
            "service_type_id": service_type.id,
            "type_id": visibility.id,
            "status_id": available.id,
            "subject_id": data["paper_subject"],
            "assignment_type_id": data["assignment_type"],
            "citation_style_id": data["citation_style_id"],
            "order_format_id": order_format.id,
            "study_level_id": data["study_level"],
            "deadline_date": data["deadline_date"],
            "deadline_time_id": data["deadline_time"],
            "page_count": data["page_count"],
            "sources": data["sources"],
            "topic": data["topic"],
            "instructions": data["instructions"],
        }
        files = data["supporting_files"]

        # --------------------------------------------------
        # Update an order the client already started
        # --------------------------------------------------
        if data["order_id"] and data["order_id"] > 0:
            order = (
                session.query(Order)
                .filter_by(id=data["order_id"], client_id=client_id)
                .first()
            )
            if not order:
                raise LookupFailure("Order not found", details={"order_id": data["order_id"]})

            for field, value in values.items():
                setattr(order, field, value)

            session.query(ClientOrderPostingStep).filter_by(order_id=order.id).update(
                {"last_step": STEP_ORDER_DETAILS}
            )

            if files:
                file_type = get_required(session, OrderFileType, "Order file type", type=FILE_CLIENT_SUPPORTING)
                attach_order_files(session, order.id, files, file_type, skip_existing=True)

            current_app.logger.info(f"[ORDER_UPDATE] order_id={order.id} client_id={client_id}")
            return update_order_payment(req, PHASE_PLACE_ORDER, session=session)

        # --------------------------------------------------
        # Create a new order
        # --------------------------------------------------
        order = Order(**values)
        session.add(order)
        session.flush()

        session.add(ClientOrderPostingStep(
            client_id=client_id,
            order_id=order.id,
            last_step=STEP_ORDER_DETAILS,
        ))

        if files:
            file_type = get_required(session, OrderFileType, "Order file type", type=FILE_CLIENT_SUPPORTING)
            attach_order_files(session, order.id, files, file_type)

        summary = data["payment_summary"]
        currency = get_required(session, Currency, "Currency", currency_code=summary["currency_code"])
        session.add(OrderPaymentDetail(
            order_id=order.id,
            currency_id=currency.id,
            extras=[extra["id"] for extra in summary["extras_list"]],
            extras_total_price=summary["extras_total_price"],
            total_price=summary["total_price"],
            cpp=summary["cpp"],
        ))
        session.flush()

        current_app.logger.info(f"[ORDER_CREATE] order_id={order.id} client_id={client_id}")
        return {"response": "success", "orderId": order.id, "newOrder": True}


def confirm_order_ownership(req, session=None):
    """The order if it belongs to the client behind `email`, else None."""
    session = resolve_session(session)
    data = load_request(OrderRefSchema(), req)
    client_id = get_client_id(data["email"], session=session)
    return (
        session.query(Order)
        .filter_by(id=data["order_id"], client_id=client_id)
        .first()
    )


def confirm_order_completion(req, session=None):
    with atomic(session) as session:
        order = confirm_order_ownership(req, session=session)
        if not order:
            return {"updated": False}

        completed = get_required(session, OrderStatus, "Order status", status=STATUS_COMPLETED)
        order.status_id = completed.id
        session.flush()

        current_app.logger.info(f"[ORDER_COMPLETE] order_id={order.id}")
        return {"updated": True}


def remove_file(req, session=None):
    """Soft-delete a client supporting file identified by its URL."""
    data = load_request(RemoveFileSchema(), req)

    with atomic(session) as session:
        file_type = get_required(session, OrderFileType, "Order file type", type=FILE_CLIENT_SUPPORTING)
        q = session.query(OrderFile).filter_by(
            order_id=data["order_id"],
            file_url=data["filename"],
            type_id=file_type.id,
        )
        if not q.first():
            return {"itemDeleted": False, "message": "Item not found"}

        updated = q.update({"is_deleted": True})
        if not updated:
            return {"itemDeleted": False, "message": "Failed to delete item"}
        return {"itemDeleted": True}
