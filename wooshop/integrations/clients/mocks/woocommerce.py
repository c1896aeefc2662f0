"""
WooCommerce MOCK store client.

⚠️  Development/testing only. Keeps orders and customers in memory and never
    touches the network. Bodies are built with the same payload helpers as the
    real client, so what the bot stores here is what the real store would get.
"""

import itertools
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from wooshop.integrations.contracts.store import (
    ContactInfo,
    LineItem,
    Payload,
    ShippingOption,
    StoreClient,
)
from wooshop.integrations.policy.store_payloads import (
    build_customer_payload,
    build_order_info_update,
    build_order_payload,
    project_shipping_methods,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_SHIPPING_ZONES: Dict[int, List[Dict[str, Any]]] = {
    1: [
        {"instance_id": 1, "method_id": "flat_rate", "method_title": "Flat rate", "enabled": True},
        {"instance_id": 2, "method_id": "free_shipping", "method_title": "Free shipping", "enabled": True},
        {"instance_id": 3, "method_id": "local_pickup", "method_title": "Local pickup", "enabled": False},
    ],
}


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------

class MockStoreClient(StoreClient):
    """
    In-memory store.

    Parameters
    ----------
    shipping_zones : dict, optional
        zone id -> list of WooCommerce shipping method resources.
        Defaults to a single zone (id 1) with two enabled methods.
    """

    def __init__(self, shipping_zones: Optional[Mapping[int, List[Dict[str, Any]]]] = None):
        self._shipping_zones = dict(shipping_zones if shipping_zones is not None else _MOCK_SHIPPING_ZONES)
        self._order_ids = itertools.count(1)
        self._customer_ids = itertools.count(1)

        # In-memory stores (reset on restart)
        self.orders: Dict[int, Payload] = {}
        self.customers: Dict[int, Payload] = {}

        logger.info("[STORE MOCK] Client initialised with %d shipping zone(s)", len(self._shipping_zones))

    @staticmethod
    def _response(status_code: int, data: Any) -> httpx.Response:
        return httpx.Response(status_code, json=data)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def create_order(self, line_items: Sequence[LineItem], customer_note: str) -> Payload:
        body = build_order_payload(line_items, customer_note)
        order_id = next(self._order_ids)
        order = {
            "id": order_id,
            "status": "pending",
            "line_items": [dict(item) for item in body["line_items"]],
            "customer_note": body.get("customer_note", ""),
            "shipping": {},
            "billing": {},
        }
        self.orders[order_id] = order
        logger.info("[STORE MOCK] Order %s created with %d line item(s)", order_id, len(order["line_items"]))
        return dict(order)

    async def update_order(self, order_id: int, update: Payload) -> httpx.Response:
        order = self.orders.get(order_id)
        if order is None:
            return self._response(
                404,
                {"code": "woocommerce_rest_shop_order_invalid_id", "message": "Invalid ID.", "data": {"status": 404}},
            )
        for key, value in update.items():
            if key == "set_paid":
                if value:
                    order["status"] = "processing"
            elif isinstance(value, dict) and isinstance(order.get(key), dict):
                order[key].update(value)
            else:
                order[key] = value
        logger.info("[STORE MOCK] Order %s updated: %s", order_id, sorted(update))
        return self._response(200, order)

    async def update_order_info(self, order_id: int, contact_info: ContactInfo) -> httpx.Response:
        return await self.update_order(order_id, build_order_info_update(contact_info))

    async def set_order_paid(self, order_id: int) -> httpx.Response:
        return await self.update_order(order_id, {"set_paid": True})

    # ------------------------------------------------------------------
    # Shipping
    # ------------------------------------------------------------------

    async def get_shipping_options(self, zone_id: int) -> List[ShippingOption]:
        return project_shipping_methods(self._shipping_zones.get(zone_id, []))

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    async def create_user(self, contact_info: ContactInfo) -> Payload:
        customer_id = next(self._customer_ids)
        customer = {"id": customer_id, "role": "customer", **build_customer_payload(contact_info)}
        self.customers[customer_id] = customer
        logger.info("[STORE MOCK] Customer %s created", customer_id)
        return dict(customer)
