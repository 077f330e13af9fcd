import pytest

from essayhub.models.order import Order
from essayhub.models.order_file import OrderFile
from essayhub.models.order_payment_detail import OrderPaymentDetail
from essayhub.models.client_order_posting_step import ClientOrderPostingStep
from essayhub.services.order_service import save_order_details
from essayhub.services.order_query_service import get_orders
from essayhub.utils.exceptions import LookupFailure, RequestValidationError


def test_create_order_returns_new_order_id(session, order_request):
    result = save_order_details(order_request())

    assert result["response"] == "success"
    assert result["newOrder"] is True
    assert isinstance(result["orderId"], int)

    order = session.get(Order, result["orderId"])
    assert order.status.status == "Available"
    assert order.visibility.type == "Public"
    assert order.order_format.currently_in_use is True
    assert order.service_type.type == "Writing"
    assert order.page_count == 3


def test_create_order_writes_dependent_rows(session, order_request):
    result = save_order_details(order_request())
    order_id = result["orderId"]

    steps = session.query(ClientOrderPostingStep).filter_by(order_id=order_id).all()
    assert [s.last_step for s in steps] == [1]

    files = session.query(OrderFile).filter_by(order_id=order_id).all()
    assert len(files) == 1
    assert files[0].file_type.type == "Client Supporting"
    assert files[0].original_name == "brief.pdf"

    payment = session.query(OrderPaymentDetail).filter_by(order_id=order_id).one()
    assert payment.currency.currency_code == "USD"
    assert payment.extras == [4]
    assert payment.total_price == pytest.approx(52.99)
    assert payment.cpp == pytest.approx(15.0)


def test_new_public_order_is_listed_as_available(order_request):
    save_order_details(order_request())

    listing = get_orders({"email": "client@example.com", "multiple": True})

    assert len(listing["orders"]) == 1
    assert listing["orders"][0]["status"] == "Available"


def test_private_order_gets_private_visibility(session, order_request):
    result = save_order_details(order_request(type="private"))
    assert session.get(Order, result["orderId"]).visibility.type == "Private"


def test_email_is_matched_case_insensitively(order_request):
    result = save_order_details(order_request(email="CLIENT@Example.com"))
    assert result["newOrder"] is True


def test_long_file_name_is_shortened(session, order_request):
    long_file = {"fileUrl": "https://files.example.com/long.pdf", "originalName": "n" * 70 + ".pdf"}
    result = save_order_details(order_request(supportingFiles=[long_file]))

    stored = session.query(OrderFile).filter_by(order_id=result["orderId"]).one()
    assert len(stored.original_name) == 50
    assert stored.original_name.endswith(".pdf")


def test_update_does_not_attach_same_file_twice(session, order_request):
    created = save_order_details(order_request())
    order_id = created["orderId"]

    first = save_order_details(order_request(orderId=order_id))
    second = save_order_details(order_request(orderId=order_id))

    assert first == {"response": "success", "newOrder": False}
    assert second == {"response": "success", "newOrder": False}
    assert session.query(OrderFile).filter_by(order_id=order_id).count() == 1


def test_update_attaches_new_files_and_rewrites_order(session, order_request):
    order_id = save_order_details(order_request())["orderId"]

    extra_file = {"fileUrl": "https://files.example.com/rubric.docx", "originalName": "rubric.docx"}
    save_order_details(order_request(
        orderId=order_id,
        topic="Revised topic",
        pageCount=5,
        supportingFiles=order_request()["supportingFiles"] + [extra_file],
    ))

    order = session.get(Order, order_id)
    assert order.topic == "Revised topic"
    assert order.page_count == 5
    urls = {f.file_url for f in session.query(OrderFile).filter_by(order_id=order_id)}
    assert urls == {"https://files.example.com/brief.pdf", "https://files.example.com/rubric.docx"}


def test_update_resets_posting_step_and_updates_payment_in_place(session, order_request):
    order_id = save_order_details(order_request())["orderId"]
    step = session.query(ClientOrderPostingStep).filter_by(order_id=order_id).one()
    step.last_step = 3
    session.commit()

    summary = {"currencyCode": "EUR", "extrasList": [], "extrasTotalPrice": 0, "totalPrice": 45.0, "cpp": 15.0}
    save_order_details(order_request(orderId=order_id, paymentSummary=summary))

    steps = session.query(ClientOrderPostingStep).filter_by(order_id=order_id).all()
    assert [s.last_step for s in steps] == [1]

    payments = session.query(OrderPaymentDetail).filter_by(order_id=order_id).all()
    assert len(payments) == 1
    assert payments[0].currency.currency_code == "EUR"
    assert payments[0].extras == []
    assert payments[0].total_price == pytest.approx(45.0)


def test_update_of_another_clients_order_is_rejected(make_client, order_request):
    order_id = save_order_details(order_request())["orderId"]
    make_client(email="other@example.com")

    with pytest.raises(LookupFailure):
        save_order_details(order_request(email="other@example.com", orderId=order_id))


def test_unknown_email_is_a_lookup_failure(session, order_request):
    with pytest.raises(LookupFailure):
        save_order_details(order_request(email="nobody@example.com"))
    assert session.query(Order).count() == 0


def test_unknown_service_type_is_a_lookup_failure(session, order_request):
    with pytest.raises(LookupFailure):
        save_order_details(order_request(serviceType="Ghostwriting"))
    assert session.query(Order).count() == 0


def test_unknown_currency_rolls_back_the_whole_order(session, order_request):
    summary = {"currencyCode": "XYZ", "extrasList": [], "extrasTotalPrice": 0, "totalPrice": 10, "cpp": 10}

    with pytest.raises(LookupFailure):
        save_order_details(order_request(paymentSummary=summary))

    assert session.query(Order).count() == 0
    assert session.query(OrderFile).count() == 0
    assert session.query(ClientOrderPostingStep).count() == 0
    assert session.query(OrderPaymentDetail).count() == 0


def test_missing_payment_summary_is_rejected_before_any_write(session, order_request):
    req = order_request()
    del req["paymentSummary"]

    with pytest.raises(RequestValidationError) as exc:
        save_order_details(req)

    assert "paymentSummary" in exc.value.details
    assert session.query(Order).count() == 0
