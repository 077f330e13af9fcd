from essayhub.extensions import db
from datetime import datetime

class OrderRevision(db.Model):
    __tablename__ = "order_revisions"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    # aspect -> instruction, only the aspects the client ticked
    revision_instructions = db.Column(db.JSON, nullable=False, default=dict)
    deadline = db.Column(db.DateTime, nullable=False)
    creator = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    submitted = db.Column(db.Boolean, default=False, nullable=False)
    is_deleted = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    order = db.relationship("Order", backref=db.backref("revisions", lazy=True))

    def to_dict(self):
        return {
            "revision_instructions": self.revision_instructions,
            "deadline": self.deadline.isoformat() if self.deadline else None,
        }
