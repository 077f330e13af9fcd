import pytest

from essayhub.models.order_payment_detail import OrderPaymentDetail
from essayhub.models.client_order_posting_step import ClientOrderPostingStep
from essayhub.services.order_service import save_order_details
from essayhub.services.payment_service import save_order_payment_details, update_order_payment
from essayhub.utils.exceptions import LookupFailure

SUMMARY = {
    "currencyCode": "GBP",
    "extrasList": [{"id": 4}, {"id": 5}],
    "extrasTotalPrice": 17.98,
    "totalPrice": 62.98,
    "cpp": 15.0,
}


def payment_request(order_id, **overrides):
    req = {"email": "client@example.com", "orderId": order_id, "paymentSummary": SUMMARY}
    req.update(overrides)
    return req


def test_existing_payment_detail_is_updated_and_step_advances(session, order_request):
    order_id = save_order_details(order_request())["orderId"]

    result = save_order_payment_details(payment_request(order_id))

    assert result == {"response": "success", "newOrder": False}
    detail = session.query(OrderPaymentDetail).filter_by(order_id=order_id).one()
    assert detail.currency.currency_code == "GBP"
    assert detail.extras == [4, 5]
    assert detail.extras_total_price == pytest.approx(17.98)

    steps = [s.last_step for s in session.query(ClientOrderPostingStep).filter_by(order_id=order_id)]
    assert sorted(steps) == [1, 3]


def test_saving_payment_twice_keeps_a_single_detail_row(session, order_request):
    order_id = save_order_details(order_request())["orderId"]

    save_order_payment_details(payment_request(order_id))
    save_order_payment_details(payment_request(order_id, paymentSummary={**SUMMARY, "totalPrice": 70.0}))

    details = session.query(OrderPaymentDetail).filter_by(order_id=order_id).all()
    assert len(details) == 1
    assert details[0].total_price == pytest.approx(70.0)


def test_missing_order_id_is_reported_not_raised(order_request):
    order_request()  # creates the client profile

    assert save_order_payment_details(payment_request(0)) == {"response": "no order ID"}


def test_payment_detail_is_created_when_absent(session, order_request, client_profile):
    order_id = save_order_details(order_request())["orderId"]
    session.query(OrderPaymentDetail).filter_by(order_id=order_id).delete()
    session.commit()

    result = save_order_payment_details(payment_request(order_id))

    assert result == {"response": "success", "orderId": order_id}
    assert session.query(OrderPaymentDetail).filter_by(order_id=order_id).count() == 1
    step = (
        session.query(ClientOrderPostingStep)
        .filter_by(order_id=order_id, last_step=3)
        .one()
    )
    assert step.client_id == client_profile.id


def test_fallback_order_id_is_used_when_request_has_none(session, order_request):
    order_id = save_order_details(order_request())["orderId"]

    result = update_order_payment(payment_request(0), "check-order", request_order_id=order_id)

    assert result == {"response": "success", "newOrder": False}
    assert session.query(OrderPaymentDetail).filter_by(order_id=order_id).one().currency.currency_code == "GBP"


def test_place_order_phase_does_not_touch_the_funnel(session, order_request):
    order_id = save_order_details(order_request())["orderId"]

    update_order_payment(payment_request(order_id), "place-order")

    steps = [s.last_step for s in session.query(ClientOrderPostingStep).filter_by(order_id=order_id)]
    assert steps == [1]


def test_unknown_currency_is_a_lookup_failure(session, order_request):
    order_id = save_order_details(order_request())["orderId"]

    with pytest.raises(LookupFailure):
        save_order_payment_details(payment_request(order_id, paymentSummary={**SUMMARY, "currencyCode": "ZZZ"}))

    detail = session.query(OrderPaymentDetail).filter_by(order_id=order_id).one()
    assert detail.currency.currency_code == "USD"


@pytest.mark.parametrize("phase", ["place-order", "check-order"])
def test_unknown_order_is_a_lookup_failure(session, order_request, phase):
    order_request()  # creates the client profile

    with pytest.raises(LookupFailure):
        update_order_payment(payment_request(999), phase)

    assert session.query(OrderPaymentDetail).filter_by(order_id=999).count() == 0


def test_unknown_fallback_order_is_a_lookup_failure(session, order_request):
    order_request()

    with pytest.raises(LookupFailure):
        update_order_payment(payment_request(0), "check-order", request_order_id=999)

    assert session.query(OrderPaymentDetail).count() == 0
    assert session.query(ClientOrderPostingStep).count() == 0
