from essayhub.extensions import db
from datetime import datetime

class OrderFile(db.Model):
    __tablename__ = "order_files"

    __table_args__ = (
        db.Index("idx_order_files_order_url_type", "order_id", "file_url", "type_id"),
    )

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False)
    file_url = db.Column(db.String(1024), nullable=False)
    original_name = db.Column(db.String(50), nullable=False)
    type_id = db.Column(db.Integer, db.ForeignKey("order_file_types.id"), nullable=False)
    submitted_paper = db.Column(db.Boolean, default=False, nullable=False)
    # files are soft-deleted only
    is_deleted = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    order = db.relationship("Order", backref=db.backref("files", lazy=True))
    file_type = db.relationship("OrderFileType", lazy=True)

    def to_dict(self):
        return {
            "file_url": self.file_url,
            "original_name": self.original_name,
            "submitted_paper": self.submitted_paper,
            "type": self.file_type.type if self.file_type else None,
            "created_at": self.created_at.isoformat() + "Z" if self.created_at else None,
        }
