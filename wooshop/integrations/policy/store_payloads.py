"""
Request/response shaping for the WooCommerce REST API.

Shared by the real HTTP client and the mock so both speak the same dialect:
- order form (ContactInfo) -> shipping / billing / customer bodies
- shipping method resources -> ShippingOption
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from wooshop.integrations.contracts.store import (
    ContactInfo,
    LabeledPrice,
    LineItem,
    Payload,
    ShippingOption,
)

# TODO: derive prices from the method's settings (cost) once the bot supports paid delivery.
PLACEHOLDER_SHIPPING_PRICES = (("Free", 0),)


def _without_none(values: Dict[str, Any]) -> Dict[str, Any]:
    # The store treats a missing key as "leave unchanged"; never send nulls.
    return {k: v for k, v in values.items() if v is not None}


def build_address_block(contact_info: ContactInfo, include_contact: bool = False) -> Dict[str, Any]:
    """
    Build a WooCommerce ``shipping`` or ``billing`` object.

    Both names are set from the single ``name`` field. ``include_contact``
    adds email and phone, which only the billing object carries.
    """
    address = contact_info.shipping_address
    block: Dict[str, Any] = {
        "first_name": contact_info.name,
        "last_name": contact_info.name,
    }
    if include_contact:
        block["email"] = contact_info.email
        block["phone"] = contact_info.phone_number
    block.update(
        {
            "address_1": address.street_line1 if address else None,
            "address_2": address.street_line2 if address else None,
            "city": address.city if address else None,
            "state": address.state if address else None,
            "postcode": address.post_code if address else None,
            "country": address.country_code if address else None,
        }
    )
    return _without_none(block)


def build_order_payload(line_items: Sequence[LineItem], customer_note: Optional[str]) -> Payload:
    return _without_none(
        {
            "set_paid": False,
            "line_items": list(line_items),
            "customer_note": customer_note,
        }
    )


def build_order_info_update(contact_info: ContactInfo) -> Payload:
    return {
        "shipping": build_address_block(contact_info),
        "billing": build_address_block(contact_info, include_contact=True),
    }


def build_customer_payload(contact_info: ContactInfo) -> Payload:
    """Customer body; the chat form has no username so the name is reused."""
    body = _without_none(
        {
            "email": contact_info.email,
            "first_name": contact_info.name,
            "last_name": contact_info.name,
            "username": contact_info.name,
        }
    )
    body.update(build_order_info_update(contact_info))
    return body


def project_shipping_methods(methods: Iterable[Mapping[str, Any]]) -> List[ShippingOption]:
    """Keep enabled methods and turn them into shipping options."""
    return [
        ShippingOption(
            id=method.get("method_id"),
            title=method.get("method_title"),
            prices=[LabeledPrice(label=label, amount=amount) for label, amount in PLACEHOLDER_SHIPPING_PRICES],
        )
        for method in methods
        if isinstance(method, Mapping) and method.get("enabled")
    ]
