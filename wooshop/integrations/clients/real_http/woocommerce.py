"""
WooCommerce REST HTTP Client.

Purpose:
- Turns bot-side order operations into calls against the store's /wp-json/wc/v3 API
- Authenticates with the consumer key/secret pair sent as query parameters
- Returns the store's JSON (or the raw response for updates) without reshaping it

Behaviour notes:
- Error statuses are NOT detected unless ``check_status`` is enabled in settings;
  a 4xx/5xx with a JSON body comes back like a success.
- A body that is not JSON raises StoreResponseError.
- Transport failures (httpx.RequestError) propagate as-is. No retries.

Important:
- Keep this client as the ONLY place where store HTTP calls are made.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from wooshop.error_handler import StoreResponseError
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
from wooshop.utils.store_config_loader import StoreSettings

logger = logging.getLogger(__name__)

REDACTED = "REDACTED"
_BODY_EXCERPT_CHARS = 500


def build_url(base_url: str, api_prefix: str, endpoint: str) -> str:
    """Join the parts and collapse the first doubled slash after the scheme."""
    url = f"{base_url}/{api_prefix}/{endpoint}"
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url.replace("//", "/", 1)
    return f"{scheme}{sep}{rest.replace('//', '/', 1)}"


class WooCommerceClient(StoreClient):
    def __init__(
        self,
        settings: StoreSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    # ------------------------------------------------------------------
    # Low-level calls
    # ------------------------------------------------------------------

    async def get(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return await self.call("GET", endpoint, query)

    async def post(self, endpoint: str, body: Any, query: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return await self.call("POST", endpoint, query, body)

    async def put(self, endpoint: str, body: Any, query: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return await self.call("PUT", endpoint, query, body)

    async def call(
        self,
        method: str,
        endpoint: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> httpx.Response:
        """
        Send one authenticated request to the store.

        Args:
            method: HTTP method (GET, POST, PUT, ...)
            endpoint: Path below the API prefix, e.g. "orders/42"
            query: Extra query parameters; the credential parameters always win
            body: JSON-serialisable body, sent whenever not None (an empty patch is still sent)

        Returns:
            The raw httpx response
        """
        url = build_url(self.settings.base_url, self.settings.api_prefix, endpoint)
        params: Dict[str, Any] = dict(query or {})
        params["consumer_secret"] = self.settings.consumer_secret
        params["consumer_key"] = self.settings.consumer_key

        headers = {"Content-Type": "application/json"}
        content = json.dumps(body) if body is not None else None

        client_kwargs: Dict[str, Any] = {"transport": self._transport}
        if self.settings.timeout_seconds is not None:
            client_kwargs["timeout"] = self.settings.timeout_seconds

        async with httpx.AsyncClient(**client_kwargs) as client:
            request = client.build_request(method, url, params=params, content=content, headers=headers)
            init = {"body": content, "method": method, "headers": headers}
            logger.info("Proxy woo: %s | %s", self._loggable_url(request.url), json.dumps(init))
            response = await client.send(request)

        logger.debug("Store responded: %s %s -> %s", method, endpoint, response.status_code)
        if self.settings.check_status:
            response.raise_for_status()
        return response

    def _loggable_url(self, url: httpx.URL) -> str:
        if not self.settings.redact_credentials:
            return str(url)
        return str(url.copy_set_param("consumer_secret", REDACTED).copy_set_param("consumer_key", REDACTED))

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            excerpt = response.text[:_BODY_EXCERPT_CHARS]
            logger.error(f"Store returned a non-JSON body (status={response.status_code}): {excerpt!r}")
            raise StoreResponseError(
                f"Store response is not valid JSON (status {response.status_code}).",
                status_code=response.status_code,
                payload={"body": excerpt},
            ) from e

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def create_order(self, line_items: Sequence[LineItem], customer_note: str) -> Payload:
        response = await self.post("orders", build_order_payload(line_items, customer_note))
        return self._json(response)

    async def update_order(self, order_id: int, update: Payload) -> httpx.Response:
        return await self.put(f"orders/{order_id}", update)

    async def update_order_info(self, order_id: int, contact_info: ContactInfo) -> httpx.Response:
        return await self.update_order(order_id, build_order_info_update(contact_info))

    async def set_order_paid(self, order_id: int) -> httpx.Response:
        return await self.update_order(order_id, {"set_paid": True})

    # ------------------------------------------------------------------
    # Shipping
    # ------------------------------------------------------------------

    async def get_shipping_options(self, zone_id: int) -> List[ShippingOption]:
        response = await self.get(f"shipping/zones/{zone_id}/methods")
        methods = self._json(response)
        if not isinstance(methods, list):
            raise StoreResponseError(
                f"Expected a list of shipping methods for zone {zone_id}.",
                status_code=response.status_code,
                payload={"body": methods},
            )
        return project_shipping_methods(methods)

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    async def create_user(self, contact_info: ContactInfo) -> Payload:
        response = await self.post("customers", build_customer_payload(contact_info))
        return self._json(response)
