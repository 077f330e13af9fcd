from essayhub.extensions import db
from datetime import datetime

class WriterRating(db.Model):
    __tablename__ = "writer_ratings"

    id = db.Column(db.Integer, primary_key=True)
    # one rating per order
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, unique=True)
    writer_id = db.Column(db.Integer, db.ForeignKey("writers.id"), nullable=False, index=True)
    rating = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class WriterAverageRating(db.Model):
    __tablename__ = "writer_average_ratings"

    id = db.Column(db.Integer, primary_key=True)
    writer_id = db.Column(db.Integer, db.ForeignKey("writers.id"), nullable=False, unique=True)
    rating = db.Column(db.Float, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
