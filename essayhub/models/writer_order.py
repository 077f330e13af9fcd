from essayhub.extensions import db
from datetime import datetime

class WriterOrder(db.Model):
    """Binds a writer to an order. Work starts once the order is paid for."""
    __tablename__ = "writer_orders"

    __table_args__ = (
        db.UniqueConstraint("order_id", "writer_id", name="uq_writer_orders_order_writer"),
    )

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    writer_id = db.Column(db.Integer, db.ForeignKey("writers.id"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    order = db.relationship("Order", backref=db.backref("assignments", lazy=True))
    writer = db.relationship("Writer", backref=db.backref("assignments", lazy=True))
