"""
Contracts (data models).

Request/response shapes shared by the mock and real store clients:
- the customer's order form (ContactInfo, ShippingAddress)
- shipping options offered back to the customer
- the StoreClient interface itself
"""
