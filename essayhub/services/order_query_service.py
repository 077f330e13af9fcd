from essayhub.models.order import Order
from essayhub.models.order_file import OrderFile
from essayhub.models.order_payment_detail import OrderPaymentDetail
from essayhub.models.order_revision import OrderRevision
from essayhub.models.client_order_posting_step import ClientOrderPostingStep
from essayhub.models.client_payment import ClientPayment
from essayhub.models.writer_order import WriterOrder
from essayhub.models.writer_rating import WriterRating
from essayhub.models.user import Client
from essayhub.models.reference import (
    OrderFileType,
    PaperDiscount,
    PaymentStatus,
    SubmissionChecklist,
)
from essayhub.schemas.order_schema import OrderQuerySchema, OrderDetailsQuerySchema
from essayhub.services.constants import (
    FILE_CLIENT_SUPPORTING,
    PAYMENT_SUCCESS,
    REVISABLE_ORDER_STATUSES,
    UNPAID_ORDER_STATUSES,
)
from essayhub.services.identity_service import get_client_id, get_user
from essayhub.utils.lookups import get_required
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic, resolve_session


# ------------------------------------------------------------
#  Serializers
# ------------------------------------------------------------
def serialize_payment(payment):
    if not payment:
        return None
    return {
        "total_price": payment.total_price,
        "cpp": payment.cpp,
        "currency_code": payment.currency.currency_code if payment.currency else None,
    }


def serialize_order_summary(order):
    return {
        "id": order.id,
        "deadline_date": order.deadline_date.isoformat() if order.deadline_date else None,
        "deadline_time": order.deadline_time.time if order.deadline_time else None,
        "page_count": order.page_count,
        "topic": order.topic,
        "status": order.status.status if order.status else None,
        "discipline": order.discipline.discipline if order.discipline else None,
        "education_level": order.study_level.to_dict() if order.study_level else None,
        "payment": serialize_payment(order.payment_detail),
    }


def serialize_order_detail(order, files):
    data = serialize_order_summary(order)
    order_format = order.order_format
    data.update({
        "instructions": order.instructions,
        "service_type": order.service_type.type if order.service_type else None,
        "citation_style": order.citation_style.citation if order.citation_style else None,
        # only the format currently offered is shown
        "order_format": {
            "words_per_page": order_format.words_per_page,
            "spacing": order_format.spacing,
        } if order_format and order_format.currently_in_use else None,
        "files": [f.to_dict() for f in files],
    })
    return data


def serialize_resume_order(order):
    order_format = order.order_format
    return {
        "id": order.id,
        "deadline_date": order.deadline_date.isoformat() if order.deadline_date else None,
        "page_count": order.page_count,
        "topic": order.topic,
        "instructions": order.instructions,
        "sources": order.sources,
        "service_type": {"id": order.service_type.id, "type": order.service_type.type} if order.service_type else None,
        "status": order.status.to_dict() if order.status else None,
        "discipline_id": order.subject_id,
        "citation_style_id": order.citation_style_id,
        "order_format": {
            "id": order_format.id,
            "words_per_page": order_format.words_per_page,
            "spacing": order_format.spacing,
        } if order_format else None,
        "deadline_time_id": order.deadline_time_id,
        "study_level_id": order.study_level_id,
        "assignment_type_id": order.assignment_type_id,
    }


# ------------------------------------------------------------
#  Queries
# ------------------------------------------------------------
def get_orders(req, session=None):
    """
    A client's orders (`multiple` true, optional `orderStatusID` filter) or
    the full detail of one of them (`multiple` false, `orderId`).
    """
    session = resolve_session(session)
    data = load_request(OrderQuerySchema(), req)
    client_id = get_client_id(data["email"], session=session)

    if data["multiple"]:
        q = session.query(Order).filter_by(client_id=client_id, is_deleted=False)
        if data["order_status_id"]:
            q = q.filter(Order.status_id == data["order_status_id"])
        orders = q.order_by(Order.created_at.desc(), Order.id.desc()).all()
        return {"orders": [serialize_order_summary(o) for o in orders]}

    order = (
        session.query(Order)
        .filter_by(client_id=client_id, id=data["order_id"])
        .first()
    )
    if not order:
        return None

    files = (
        session.query(OrderFile)
        .filter_by(order_id=order.id, is_deleted=False)
        .order_by(OrderFile.created_at.desc(), OrderFile.id.desc())
        .all()
    )

    revision_instructions = None
    submission_checklist = None
    if order.status and order.status.status in REVISABLE_ORDER_STATUSES:
        revisions = (
            session.query(OrderRevision)
            .filter_by(order_id=order.id, submitted=False, is_deleted=False)
            .order_by(OrderRevision.id)
            .all()
        )
        revision_instructions = [r.to_dict() for r in revisions]
        submission_checklist = [
            item.to_dict()
            for item in session.query(SubmissionChecklist).order_by(SubmissionChecklist.id).all()
        ]

    rated = session.query(WriterRating.id).filter_by(order_id=order.id).first() is not None

    return {
        "details": serialize_order_detail(order, files),
        "revisionInstructions": revision_instructions,
        "submissionChecklist": submission_checklist,
        "rated": rated,
    }


def get_paper_discount(session, page_count) -> float:
    """Discount of the highest tier whose lower bound the page count reaches."""
    if not page_count or page_count <= 1:
        return 0
    tier = (
        session.query(PaperDiscount)
        .filter(PaperDiscount.lower_limit <= page_count)
        .order_by(PaperDiscount.lower_limit.desc())
        .first()
    )
    return tier.discount if tier else 0


def order_details(client, order_id=None, got_started=False, session=None):
    """
    Where a client left off in the posting funnel.

    `got_started` is set when the client came in through "Get started"; they
    then never resume an earlier order.
    """
    with atomic(session) as session:
        base = {
            "type": "Client",
            "user": client.to_dict(),
            "loginVia": client.login_via or None,
        }

        q = session.query(Order).filter_by(client_id=client.id)
        if order_id:
            q = q.filter_by(id=order_id)
        latest = q.order_by(Order.created_at.desc(), Order.id.desc()).first()

        if not latest:
            return {**base, "orderDetails": None, "orderPostingStep": None}

        discount = get_paper_discount(session, latest.page_count)

        already_paid = got_started or (
            latest.status is None or latest.status.status not in UNPAID_ORDER_STATUSES
        )
        if already_paid:
            return {**base, "orderDetails": None, "orderPostingStep": "Finished"}

        payment = session.query(OrderPaymentDetail).filter_by(order_id=latest.id).first()

        success = get_required(session, PaymentStatus, "Payment status", status=PAYMENT_SUCCESS)
        paid_for = (
            session.query(ClientPayment.id)
            .filter_by(order_id=latest.id, status_id=success.id)
            .first()
        ) is not None

        assignment = (
            session.query(WriterOrder)
            .filter_by(order_id=latest.id)
            .order_by(WriterOrder.id)
            .first()
        )

        file_type = get_required(session, OrderFileType, "Order file type", type=FILE_CLIENT_SUPPORTING)
        files = (
            session.query(OrderFile)
            .filter_by(order_id=latest.id, is_deleted=False, type_id=file_type.id)
            .order_by(OrderFile.id)
            .all()
        )

        step = (
            session.query(ClientOrderPostingStep)
            .filter_by(client_id=client.id)
            .order_by(ClientOrderPostingStep.created_at.desc(), ClientOrderPostingStep.id.desc())
            .first()
        )

        return {
            **base,
            "orderDetails": serialize_resume_order(latest),
            "paperDiscount": discount,
            "orderPostingStep": step.to_dict() if step else None,
            "orderPaymentDetails": payment.to_dict() if payment else None,
            "orderAlreadyPaidFor": paid_for,
            "orderAssignment": {
                "id": assignment.id,
                "writer": {
                    "surname": assignment.writer.surname,
                    "other_names": assignment.writer.other_names,
                    "email": assignment.writer.user.email if assignment.writer.user else None,
                },
            } if assignment else None,
            "orderFiles": [
                {"file_url": f.file_url, "original_name": f.original_name} for f in files
            ],
        }


def get_order_details(req, session=None):
    """Resume projection for the client behind `email`; None without a client profile."""
    data = load_request(OrderDetailsQuerySchema(), req)

    with atomic(session) as session:
        user = get_user(data["email"], session=session)
        client = session.query(Client).filter_by(user_id=user.id).first()
        if not client:
            return None
        return order_details(client, data["order_id"], False, session=session)
