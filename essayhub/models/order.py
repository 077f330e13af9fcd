from essayhub.extensions import db
from datetime import datetime

class Order(db.Model):
    __tablename__ = "orders"

    __table_args__ = (
        db.Index("idx_orders_client_id", "client_id"),
        db.Index("idx_orders_status_id", "status_id"),
    )

    id = db.Column(db.Integer, primary_key=True)

    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False)
    service_type_id = db.Column(db.Integer, db.ForeignKey("order_service_types.id"), nullable=False)
    # public / private visibility
    type_id = db.Column(db.Integer, db.ForeignKey("entity_types.id"), nullable=False)
    status_id = db.Column(db.Integer, db.ForeignKey("order_statuses.id"), nullable=False)

    subject_id = db.Column(db.Integer, db.ForeignKey("disciplines.id"))
    assignment_type_id = db.Column(db.Integer, db.ForeignKey("assignment_types.id"))
    citation_style_id = db.Column(db.Integer, db.ForeignKey("citation_styles.id"))
    order_format_id = db.Column(db.Integer, db.ForeignKey("order_formats.id"))
    study_level_id = db.Column(db.Integer, db.ForeignKey("education_levels.id"))

    deadline_date = db.Column(db.Date)
    deadline_time_id = db.Column(db.Integer, db.ForeignKey("time_am_pm.id"))

    page_count = db.Column(db.Integer, default=1)
    sources = db.Column(db.Integer, default=0)
    topic = db.Column(db.String(255))
    instructions = db.Column(db.Text)

    is_deleted = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    client = db.relationship("Client", backref=db.backref("orders", lazy=True))
    service_type = db.relationship("OrderServiceType", lazy=True)
    visibility = db.relationship("EntityType", lazy=True)
    status = db.relationship("OrderStatus", lazy=True)
    discipline = db.relationship("Discipline", lazy=True)
    assignment_type = db.relationship("AssignmentType", lazy=True)
    citation_style = db.relationship("CitationStyle", lazy=True)
    order_format = db.relationship("OrderFormat", lazy=True)
    study_level = db.relationship("EducationLevel", lazy=True)
    deadline_time = db.relationship("TimeAmPm", lazy=True)
    payment_detail = db.relationship("OrderPaymentDetail", uselist=False, lazy=True)
