from essayhub.extensions import db
from datetime import datetime

class WriterInvitation(db.Model):
    __tablename__ = "writer_invitations"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, unique=True)
    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False)
    invited_at = db.Column(db.DateTime, default=datetime.utcnow)

    client = db.relationship("Client", backref=db.backref("writer_invitations", lazy=True))
