"""
Store client selection.

The choice between the mock and the real WooCommerce client happens here
and nowhere else. Set WOO_CLIENT_MODE=mock to run the bot without a store.
"""

import logging
import os
from typing import Optional

import httpx

from wooshop.error_handler import StoreConfigurationError
from wooshop.integrations.clients.mocks.woocommerce import MockStoreClient
from wooshop.integrations.clients.real_http.woocommerce import WooCommerceClient
from wooshop.integrations.contracts.store import StoreClient
from wooshop.utils.store_config_loader import StoreSettings, load_store_settings

logger = logging.getLogger(__name__)

CLIENT_MODES = ("real", "mock")


def get_store_client(
    mode: Optional[str] = None,
    settings: Optional[StoreSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> StoreClient:
    mode = (mode or os.getenv("WOO_CLIENT_MODE") or "real").strip().lower()
    if mode not in CLIENT_MODES:
        raise StoreConfigurationError(f"Unknown WOO_CLIENT_MODE '{mode}', expected one of {CLIENT_MODES}")

    if mode == "mock":
        logger.warning("Using the in-memory mock store; no orders reach WooCommerce.")
        return MockStoreClient()

    return WooCommerceClient(settings or load_store_settings(), transport=transport)
