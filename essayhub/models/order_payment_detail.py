from essayhub.extensions import db
from datetime import datetime

class OrderPaymentDetail(db.Model):
    __tablename__ = "order_payment_details"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, unique=True)
    currency_id = db.Column(db.Integer, db.ForeignKey("currencies.id"), nullable=False)

    # ids of the paid extras (OrderServiceType rows flagged extra)
    extras = db.Column(db.JSON, nullable=False, default=list)
    extras_total_price = db.Column(db.Float, default=0.0)
    total_price = db.Column(db.Float, nullable=False)
    cpp = db.Column(db.Float, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    currency = db.relationship("Currency", lazy=True)

    def to_dict(self):
        return {
            "id": self.id,
            "extras": list(self.extras or []),
            "extras_total_price": self.extras_total_price,
            "total_price": self.total_price,
            "cpp": self.cpp,
            "currency": self.currency.to_dict() if self.currency else None,
        }
