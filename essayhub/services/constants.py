# Order statuses
STATUS_AVAILABLE = "Available"
STATUS_PENDING_PAYMENT = "Pending payment"
STATUS_PENDING_WRITER_ACK = "Pending writer acknowledgement"
STATUS_BIDDING_ONGOING = "Bidding ongoing"
STATUS_ONGOING = "Ongoing"
STATUS_SUBMITTED = "Submitted"
STATUS_UNDERGOING_REVISION = "Undergoing revision"
STATUS_COMPLETED = "Completed"
STATUS_CANCELLED = "Cancelled"

# Statuses for which a client may ask for a revision
REVISABLE_ORDER_STATUSES = {STATUS_COMPLETED, STATUS_SUBMITTED, STATUS_UNDERGOING_REVISION}

# Orders in these statuses are not yet paid for when resuming the posting funnel
UNPAID_ORDER_STATUSES = {
    STATUS_PENDING_PAYMENT,
    STATUS_PENDING_WRITER_ACK,
    STATUS_AVAILABLE,
    STATUS_BIDDING_ONGOING,
}

# Order file types
FILE_CLIENT_SUPPORTING = "Client Supporting"
FILE_REVISION_SUPPORTING = "Revision Supporting"
FILE_SUBMITTED_PAPER = "Submitted Paper"

# Order visibility (EntityType rows)
VISIBILITY_PUBLIC = "Public"
VISIBILITY_PRIVATE = "Private"

PAYMENT_SUCCESS = "Success"
ACCOUNT_ACTIVE = "Active"

# Payment recording phases
PHASE_PLACE_ORDER = "place-order"
PHASE_CHECK_ORDER = "check-order"

# Posting funnel steps
STEP_ORDER_DETAILS = 1
STEP_CHECK_ORDER = 3
