from essayhub.extensions import db
from datetime import datetime

class ClientOrderPostingStep(db.Model):
    """How far a client got through the order posting screens."""
    __tablename__ = "client_order_posting_steps"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False, index=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    last_step = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {"id": self.id, "order_id": self.order_id, "last_step": self.last_step}
