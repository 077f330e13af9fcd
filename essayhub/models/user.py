from essayhub.extensions import db
from datetime import datetime

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    account_status_id = db.Column(db.Integer, db.ForeignKey("account_statuses.id"), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    account_status = db.relationship("AccountStatus", lazy=True)


class Client(db.Model):
    __tablename__ = "clients"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    surname = db.Column(db.String(100))
    other_names = db.Column(db.String(255))
    login_via = db.Column(db.String(50), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship("User", backref=db.backref("client", uselist=False))

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "email": self.user.email if self.user else None,
            "surname": self.surname,
            "other_names": self.other_names,
            "login_via": self.login_via,
        }


class Writer(db.Model):
    __tablename__ = "writers"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    surname = db.Column(db.String(100))
    other_names = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship("User", backref=db.backref("writer", uselist=False))
    average_rating = db.relationship("WriterAverageRating", uselist=False, lazy=True)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "surname": self.surname,
            "other_names": self.other_names,
            "rating": self.average_rating.rating if self.average_rating else None,
        }
