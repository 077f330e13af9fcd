import pytest
from sqlalchemy.exc import IntegrityError

from essayhub.extensions import db
from essayhub.models.order import Order
from essayhub.models.order_file import OrderFile
from essayhub.models.reference import Country
from essayhub.models.writer_order import WriterOrder
from essayhub.models.writer_rating import WriterRating
from essayhub.services.order_service import (
    confirm_order_completion,
    confirm_order_ownership,
    remove_file,
    save_order_details,
)
from essayhub.utils.transaction import atomic

BRIEF_URL = "https://files.example.com/brief.pdf"


@pytest.fixture
def placed_order(order_request):
    return save_order_details(order_request())["orderId"]


def test_owner_gets_their_order_back(placed_order):
    order = confirm_order_ownership({"email": "client@example.com", "orderId": placed_order})

    assert order.id == placed_order


def test_other_client_does_not_own_the_order(placed_order, make_client):
    make_client(email="other@example.com")

    assert confirm_order_ownership({"email": "other@example.com", "orderId": placed_order}) is None


def test_owner_can_mark_order_completed(session, placed_order):
    result = confirm_order_completion({"email": "client@example.com", "orderId": placed_order})

    assert result == {"updated": True}
    assert session.get(Order, placed_order).status.status == "Completed"


def test_completion_of_foreign_order_is_refused(session, placed_order, make_client):
    make_client(email="other@example.com")

    result = confirm_order_completion({"email": "other@example.com", "orderId": placed_order})

    assert result == {"updated": False}
    assert session.get(Order, placed_order).status.status == "Available"


def test_remove_file_soft_deletes_it(session, placed_order):
    result = remove_file({"orderId": placed_order, "filename": BRIEF_URL})

    assert result == {"itemDeleted": True}
    order_file = session.query(OrderFile).filter_by(order_id=placed_order).one()
    assert order_file.is_deleted is True


def test_remove_unknown_file_reports_not_found(placed_order):
    result = remove_file({"orderId": placed_order, "filename": "https://files.example.com/none.pdf"})

    assert result == {"itemDeleted": False, "message": "Item not found"}


def test_nested_blocks_commit_once_and_roll_back_together(session, app):
    with pytest.raises(RuntimeError):
        with atomic(session):
            session.add(Country(country="Uganda", country_code="UG"))
            with atomic(session):
                session.add(Country(country="Rwanda", country_code="RW"))
            raise RuntimeError("boom")

    assert session.query(Country).filter(Country.country_code.in_(["UG", "RW"])).count() == 0
    assert db.session.info["atomic_depth"] == 0


def test_duplicate_rating_row_is_refused_and_rolls_back(session, placed_order, writer_profile):
    with pytest.raises(IntegrityError):
        with atomic(session):
            session.add(Country(country="Uganda", country_code="UG"))
            session.add(WriterRating(order_id=placed_order, writer_id=writer_profile.id, rating=5))
            session.flush()
            session.add(WriterRating(order_id=placed_order, writer_id=writer_profile.id, rating=1))
            session.flush()

    assert session.query(WriterRating).count() == 0
    assert session.query(Country).filter_by(country_code="UG").count() == 0


def test_duplicate_assignment_row_is_refused_and_rolls_back(session, placed_order, writer_profile):
    with pytest.raises(IntegrityError):
        with atomic(session):
            session.add(WriterOrder(order_id=placed_order, writer_id=writer_profile.id))
            session.flush()
            session.add(WriterOrder(order_id=placed_order, writer_id=writer_profile.id))
            session.flush()

    assert session.query(WriterOrder).count() == 0
