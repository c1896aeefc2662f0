"""
Mock integration clients.

These clients return fake (but realistic) store responses without calling WooCommerce.
They are used when:
- No store credentials are available (local development)
- We want to test bot flows end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.

Switching to real:
Set WOO_CLIENT_MODE=real (the default); see wooshop/integrations/factory.py.
"""
