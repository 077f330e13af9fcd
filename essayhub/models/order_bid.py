from essayhub.extensions import db
from datetime import datetime

class OrderBid(db.Model):
    __tablename__ = "order_bids"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    writer_id = db.Column(db.Integer, db.ForeignKey("writers.id"), nullable=False, index=True)
    successful = db.Column(db.Boolean, default=False, nullable=False)
    is_deleted = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    order = db.relationship("Order", backref=db.backref("bids", lazy=True))
    writer = db.relationship("Writer", backref=db.backref("bids", lazy=True))

    def serialize(self):
        writer = self.writer
        return {
            "order_id": self.order_id,
            "successful": self.successful,
            "writer": {
                "user_id": writer.user_id,
                "surname": writer.surname,
                "other_names": writer.other_names,
                "rating": writer.average_rating.rating if writer.average_rating else None,
            } if writer else None,
        }
