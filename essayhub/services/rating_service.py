from flask import current_app
from sqlalchemy import func
from essayhub.models.writer_order import WriterOrder
from essayhub.models.writer_rating import WriterRating, WriterAverageRating
from essayhub.schemas.revision_schema import RateWriterSchema
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import atomic


def rate_writer(req, session=None):
    """
    Record the client's one rating for an order and fold it into the
    writer's running average.

    Returns one of:
      {"rated": False, "alreadyRated": True}
      {"rated": False, "alreadyRated": False, "message": "No writer assigned to order"}
      {"rated": True, "alreadyRated": False, "averageRating": <float>}
    """
    data = load_request(RateWriterSchema(), req)
    order_id = data["order_id"]
    rating = data["rating"]

    with atomic(session) as session:
        if session.query(WriterRating.id).filter_by(order_id=order_id).first():
            return {"rated": False, "alreadyRated": True}

        assignment = (
            session.query(WriterOrder)
            .filter_by(order_id=order_id)
            .order_by(WriterOrder.created_at.asc(), WriterOrder.id.asc())
            .first()
        )
        if not assignment:
            return {"rated": False, "alreadyRated": False, "message": "No writer assigned to order"}

        writer_id = assignment.writer_id
        session.add(WriterRating(order_id=order_id, writer_id=writer_id, rating=rating))
        session.flush()

        # ratings for this writer, the new one included
        count = (
            session.query(func.count(WriterRating.id))
            .filter_by(writer_id=writer_id)
            .scalar()
        )

        average = session.query(WriterAverageRating).filter_by(writer_id=writer_id).first()
        if average:
            average.rating = (average.rating * (count - 1) + rating) / count
        else:
            average = WriterAverageRating(writer_id=writer_id, rating=rating)
            session.add(average)
        session.flush()

        current_app.logger.info(
            f"[WRITER_RATING] order_id={order_id} writer_id={writer_id} average={average.rating:.2f}"
        )
        return {"rated": True, "alreadyRated": False, "averageRating": average.rating}
