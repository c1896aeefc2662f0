"""
Store contracts.

Shapes exchanged between the ordering bot and the WooCommerce store:
- ContactInfo / ShippingAddress: the order form filled in by the customer in chat
- ShippingOption / LabeledPrice: delivery choices offered back to the customer
- StoreClient: the interface both the real HTTP client and the mock implement

Line items, order updates and remote resources stay plain dicts. The remote
API accepts partial objects and extra fields, so we do not pin a schema here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

Payload = Dict[str, Any]
LineItem = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Order form
# ---------------------------------------------------------------------------

@dataclass
class ShippingAddress:
    street_line1: Optional[str] = None
    street_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    post_code: Optional[str] = None
    country_code: Optional[str] = None     # ISO 3166-1 alpha-2

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ShippingAddress":
        return cls(
            street_line1=raw.get("street_line1"),
            street_line2=raw.get("street_line2"),
            city=raw.get("city"),
            state=raw.get("state"),
            post_code=raw.get("post_code"),
            country_code=raw.get("country_code"),
        )


@dataclass
class ContactInfo:
    """
    Customer details collected by the chat checkout.

    There is a single ``name`` field; the store wants first/last names, and
    both are filled with this value.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ContactInfo":
        """Build from the messaging platform's ``order_info`` object."""
        address = raw.get("shipping_address")
        return cls(
            name=raw.get("name"),
            email=raw.get("email"),
            phone_number=raw.get("phone_number"),
            shipping_address=ShippingAddress.from_dict(address) if address else None,
        )


# ---------------------------------------------------------------------------
# Shipping
# ---------------------------------------------------------------------------

@dataclass
class LabeledPrice:
    label: str
    amount: int                           # smallest currency unit

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "amount": self.amount}


@dataclass
class ShippingOption:
    id: str
    title: str
    prices: List[LabeledPrice] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "prices": [price.to_dict() for price in self.prices],
        }


# ---------------------------------------------------------------------------
# Client interface
# ---------------------------------------------------------------------------

class StoreClient(ABC):
    """Every store client (real or mock) must implement this interface."""

    # -- Orders --

    @abstractmethod
    async def create_order(self, line_items: Sequence[LineItem], customer_note: str) -> Payload:
        """Create an unpaid order and return the store's order resource."""

    @abstractmethod
    async def update_order(self, order_id: int, update: Payload) -> httpx.Response:
        """Apply ``update`` to an existing order."""

    @abstractmethod
    async def update_order_info(self, order_id: int, contact_info: ContactInfo) -> httpx.Response:
        """Copy the customer's contact details onto the order's shipping and billing."""

    @abstractmethod
    async def set_order_paid(self, order_id: int) -> httpx.Response:
        """Mark an order as paid."""

    # -- Shipping --

    @abstractmethod
    async def get_shipping_options(self, zone_id: int) -> List[ShippingOption]:
        """Return the enabled shipping methods of a zone."""

    # -- Customers --

    @abstractmethod
    async def create_user(self, contact_info: ContactInfo) -> Payload:
        """Register a customer account from the order form."""
