import pytest

from essayhub.main import create_app
from essayhub.extensions import db
from essayhub.seed import seed_reference_data
from essayhub.models.user import User, Client, Writer
from essayhub.models.reference import OrderStatus, PaymentStatus, AccountStatus


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        seed_reference_data(db.session)
        db.session.commit()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def make_client(session):
    def _make(email="client@example.com", login_via=None):
        user = User(email=email)
        session.add(user)
        session.flush()
        client = Client(user_id=user.id, surname="Otieno", other_names="Grace", login_via=login_via)
        session.add(client)
        session.commit()
        return client
    return _make


@pytest.fixture
def make_writer(session):
    def _make(email="writer@example.com", account_status="Active"):
        status = session.query(AccountStatus).filter_by(status=account_status).first()
        user = User(email=email, account_status_id=status.id if status else None)
        session.add(user)
        session.flush()
        writer = Writer(user_id=user.id, surname="Kamau", other_names="Peter")
        session.add(writer)
        session.commit()
        return writer
    return _make


@pytest.fixture
def client_profile(make_client):
    return make_client()


@pytest.fixture
def writer_profile(make_writer):
    return make_writer()


@pytest.fixture
def order_request(client_profile):
    def _build(**overrides):
        req = {
            "email": "client@example.com",
            "orderId": 0,
            "serviceType": "Writing",
            "type": "public",
            "paperSubject": 1,
            "assignmentType": 1,
            "citationStyleId": 1,
            "studyLevel": 2,
            "deadlineDate": "2030-01-15",
            "deadlineTime": 3,
            "pageCount": 3,
            "sources": 2,
            "topic": "Climate policy in East Africa",
            "instructions": "Use peer-reviewed sources only",
            "supportingFiles": [
                {"fileUrl": "https://files.example.com/brief.pdf", "originalName": "brief.pdf"},
            ],
            "paymentSummary": {
                "currencyCode": "USD",
                "extrasList": [{"id": 4}],
                "extrasTotalPrice": 7.99,
                "totalPrice": 52.99,
                "cpp": 15.0,
            },
        }
        req.update(overrides)
        return req
    return _build


@pytest.fixture
def status_id(session):
    def _lookup(name):
        return session.query(OrderStatus).filter_by(status=name).one().id
    return _lookup


@pytest.fixture
def payment_status_id(session):
    def _lookup(name):
        return session.query(PaymentStatus).filter_by(status=name).one().id
    return _lookup
