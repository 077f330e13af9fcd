from dateutil import parser
from flask import current_app
from essayhub.models.order_revision import OrderRevision
from essayhub.models.reference import OrderFileType, OrderStatus
from essayhub.schemas.revision_schema import RevisionRequestSchema
from essayhub.services.constants import FILE_REVISION_SUPPORTING, STATUS_UNDERGOING_REVISION
from essayhub.services.identity_service import get_user
from essayhub.services.order_service import attach_order_files, confirm_order_ownership
from essayhub.utils.exceptions import RequestValidationError
from essayhub.utils.lookups import get_required
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic


def combine_deadline(date_value: str, time_value: str):
    """Join a calendar date and an HH:MM time of day into one naive timestamp."""
    try:
        deadline = parser.isoparse(date_value)
        hours, minutes = (int(part) for part in time_value.split(":"))
        deadline = deadline.replace(hour=hours, minute=minutes, second=0, microsecond=0, tzinfo=None)
    except ValueError as e:
        raise RequestValidationError(details={"deadline": [str(e)]})
    return deadline


def revision_request(req, session=None):
    data = load_request(RevisionRequestSchema(), req)
    deadline = combine_deadline(data["deadline"]["date"], data["deadline"]["time"])

    with atomic(session) as session:
        user = get_user(data["email"], session=session)
        order = confirm_order_ownership(req, session=session)
        if not order:
            return {"success": False, "message": "Order does not exist"}

        instructions = {
            aspect: entry["value"]
            for aspect, entry in data["checklist"].items()
            if entry["selected"]
        }

        # revision files are always added, never edited
        if data["supporting_files"]:
            file_type = get_required(session, OrderFileType, "Order file type", type=FILE_REVISION_SUPPORTING)
            attach_order_files(session, order.id, data["supporting_files"], file_type)

        if not order.status or order.status.status != STATUS_UNDERGOING_REVISION:
            revision_status = get_required(session, OrderStatus, "Order status", status=STATUS_UNDERGOING_REVISION)
            order.status_id = revision_status.id

        session.add(OrderRevision(
            order_id=order.id,
            revision_instructions=instructions,
            deadline=deadline,
            creator=user.id,
            submitted=False,
            is_deleted=False,
        ))
        session.flush()

        current_app.logger.info(
            f"[REVISION_REQUEST] order_id={order.id} aspects={sorted(instructions)}"
        )
        return {"success": True}
