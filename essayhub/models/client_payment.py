from essayhub.extensions import db
from datetime import datetime

class ClientPayment(db.Model):
    __tablename__ = "client_payments"

    __table_args__ = (
        db.Index("idx_client_payments_order_status", "order_id", "status_id"),
    )

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False)
    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False)
    status_id = db.Column(db.Integer, db.ForeignKey("payment_statuses.id"), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    reference = db.Column(db.String(255), unique=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    order = db.relationship("Order", backref="payments")
    status = db.relationship("PaymentStatus", lazy=True)
