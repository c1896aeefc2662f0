"""
Real HTTP integration clients.

These clients communicate with the WooCommerce REST API over HTTP.

Important:
- Must implement the same interface as the mock clients (contracts/store.py)

Switching:
The selection of mock vs real clients happens in wooshop/integrations/factory.py only.
"""
