from urllib.parse import parse_qs, urlparse

import pytest

from squarespace_commerce import CommerceClient, QueryParams
from squarespace_commerce.exceptions import APIError, ValidationError
from squarespace_commerce.models import (
    Amount,
    CreateOrderLineItem,
    CreateOrderRequest,
    FulfillOrderRequest,
    Shipment,
)

BASE = "https://mock.test/1.0/commerce/orders"


def build_client(**kwargs):
    return CommerceClient(
        api_key="test-key", user_agent="test-agent", base_url="https://mock.test", **kwargs
    )


def make_order_request():
    return CreateOrderRequest(
        channel_name="POS",
        external_order_reference="ext-1",
        line_items=[
            CreateOrderLineItem(
                variant_id="v1",
                quantity=1,
                unit_price_paid=Amount(currency="USD", value="10.00"),
            )
        ],
        subtotal=Amount(currency="USD", value="10.00"),
        grand_total=Amount(currency="USD", value="10.00"),
        created_on="2024-01-01T00:00:00Z",
    )


def test_create_order_sends_idempotency_key(requests_mock):
    matcher = requests_mock.post(
        BASE,
        status_code=201,
        json={"id": "order1", "orderNumber": "1001", "fulfillmentStatus": "PENDING"},
    )
    client = build_client(idempotency_key="order-key")

    order = client.orders.create(make_order_request())

    assert order.id == "order1"
    assert order.order_number == "1001"
    assert matcher.last_request.headers["Idempotency-Key"] == "order-key"
    body = matcher.last_request.json()
    assert body["channelName"] == "POS"
    assert body["externalOrderReference"] == "ext-1"
    assert body["lineItems"][0]["lineItemType"] == "PHYSICAL_PRODUCT"
    assert body["lineItems"][0]["unitPricePaid"] == {"currency": "USD", "value": "10.00"}


def test_create_order_conflict(requests_mock):
    requests_mock.post(
        BASE,
        status_code=409,
        json={"type": "CONFLICT", "message": "Idempotency key reused"},
    )

    with pytest.raises(APIError) as excinfo:
        build_client(idempotency_key="order-key").orders.create(make_order_request())

    assert excinfo.value.type == "CONFLICT"
    assert "message: Idempotency key reused" in str(excinfo.value)


def test_fulfill_order(requests_mock):
    requests_mock.post(
        f"{BASE}/order1/fulfillments",
        status_code=204,
        additional_matcher=lambda request: request.json()
        == {
            "shouldSendNotification": True,
            "shipments": [
                {"shipDate": "2024-01-02T00:00:00Z", "carrierName": "UPS", "trackingNumber": "1Z"}
            ],
        },
    )
    request = FulfillOrderRequest(
        should_send_notification=True,
        shipments=[Shipment(ship_date="2024-01-02T00:00:00Z", carrier_name="UPS", tracking_number="1Z")],
    )

    assert build_client().orders.fulfill("order1", request) == 204


def test_fulfill_order_requires_id(requests_mock):
    with pytest.raises(ValidationError, match="orderID is required"):
        build_client().orders.fulfill("", FulfillOrderRequest())

    assert requests_mock.call_count == 0


def test_list_orders_maps_status_to_fulfillment_status(requests_mock):
    matcher = requests_mock.get(
        BASE,
        json={"result": [{"id": "order1"}], "pagination": {"hasNextPage": False}},
    )

    page = build_client().orders.list(QueryParams(status="FULFILLED"))

    assert page.result[0].id == "order1"
    assert parse_qs(urlparse(matcher.last_request.url).query) == {"fulfillmentStatus": ["FULFILLED"]}


def test_list_orders_rejects_cursor_with_status(requests_mock):
    with pytest.raises(ValidationError, match="cannot use cursor alongside other query parameters"):
        build_client().orders.list(QueryParams(cursor="c1", status="PENDING"))

    assert requests_mock.call_count == 0


def test_get_order(requests_mock):
    requests_mock.get(
        f"{BASE}/order1",
        json={
            "id": "order1",
            "customerEmail": "buyer@example.com",
            "grandTotal": {"currency": "USD", "value": "12.50"},
            "lineItems": [{"id": "li1", "quantity": 2}],
        },
    )

    order = build_client().orders.get("order1")

    assert order.customer_email == "buyer@example.com"
    assert order.grand_total.value == "12.50"
    assert order.line_items[0].quantity == 2
