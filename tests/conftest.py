"""Pytest fixtures for the store client tests."""

import json

import httpx
import pytest

from wooshop.integrations.contracts.store import ContactInfo, ShippingAddress
from wooshop.utils.store_config_loader import StoreSettings


class RecordingTransport(httpx.MockTransport):
    """Answers every request with a canned response and keeps what was sent."""

    def __init__(self, response: httpx.Response = None, handler=None):
        self.requests = []
        self._canned = response if response is not None else httpx.Response(200, json={})
        self._handler = handler
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        # Fresh response per request; the client closes what it receives.
        return httpx.Response(
            self._canned.status_code,
            content=self._canned.content,
            headers=self._canned.headers,
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture
def settings():
    return StoreSettings(
        base_url="https://shop.example",
        consumer_key="ck_test",
        consumer_secret="cs_test",
    )


@pytest.fixture
def contact_info():
    return ContactInfo(
        name="Alice",
        email="alice@example.com",
        phone_number="+15550100",
        shipping_address=ShippingAddress(
            street_line1="1 Main St",
            street_line2="Apt 2",
            city="Springfield",
            state="IL",
            post_code="62701",
            country_code="US",
        ),
    )
