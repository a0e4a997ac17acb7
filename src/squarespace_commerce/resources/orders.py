"""Order operations."""

from __future__ import annotations

from ..models.orders import CreateOrderRequest, FulfillOrderRequest, Order, OrdersResponse
from ..operations import Operation
from ..query import QueryParams, require_id
from .base import ResourceBase

CREATE_ORDER = Operation("CreateOrder", "POST", "commerce/orders", 201, Order, idempotent=True)
FULFILL_ORDER = Operation("FulfillOrder", "POST", "commerce/orders/{order_id}/fulfillments", 204)
LIST_ORDERS = Operation("RetrieveAllOrders", "GET", "commerce/orders", 200, OrdersResponse)
GET_ORDER = Operation("RetrieveSpecificOrder", "GET", "commerce/orders/{order_id}", 200, Order)


class OrdersResource(ResourceBase):
    """Import, fulfill and read orders."""

    def create(self, request: CreateOrderRequest) -> Order:
        return self._execute(CREATE_ORDER, payload=request)

    def fulfill(self, order_id: str, request: FulfillOrderRequest) -> int:
        return self._execute(
            FULFILL_ORDER,
            path_args={"order_id": require_id(order_id, "orderID")},
            payload=request,
        )

    def list(self, params: QueryParams | None = None) -> OrdersResponse:
        return self._list(
            LIST_ORDERS,
            params,
            ("cursor", "modified_after", "modified_before", "status"),
            renames={"status": "fulfillmentStatus"},
        )

    def get(self, order_id: str) -> Order:
        return self._execute(GET_ORDER, path_args={"order_id": require_id(order_id, "orderID")})
