"""
Integrations layer.
This package contains the code used to talk to the WooCommerce store that backs
the chat ordering bot.

Key rule:
- Bot handlers MUST NOT call the store API directly.
- Handlers call a StoreClient (under wooshop/integrations/clients).
- We use the MOCK client during development and the REAL_HTTP client against a store.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (integrations/factory.py).
"""

from .contracts.store import (
    ContactInfo,
    LabeledPrice,
    ShippingAddress,
    ShippingOption,
    StoreClient,
)
from .factory import get_store_client

__all__ = [
    "ContactInfo", "LabeledPrice", "ShippingAddress", "ShippingOption", "StoreClient",
    "get_store_client",
]
