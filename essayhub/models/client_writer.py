from essayhub.extensions import db
from datetime import datetime

class ClientWriter(db.Model):
    """A client's personal connection to a writer."""
    __tablename__ = "client_writers"

    __table_args__ = (
        db.UniqueConstraint("client_id", "writer_id", name="uq_client_writers_client_writer"),
    )

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False)
    writer_id = db.Column(db.Integer, db.ForeignKey("writers.id"), nullable=False)
    connection_confirmed = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    client = db.relationship("Client", backref=db.backref("writer_connections", lazy=True))
    writer = db.relationship("Writer", lazy=True)
