from essayhub.utils.exceptions import LookupFailure


def get_required(session, model, label, **filters):
    """First row of `model` matching `filters`, or LookupFailure."""
    row = session.query(model).filter_by(**filters).first()
    if row is None:
        raise LookupFailure(f"{label} not found", details=filters)
    return row
