"""
Bitstamp API Integration

Modular pieces of the Bitstamp REST client:
- Authentication (nonce generation and HMAC signing)
- Request dispatch and response handling
- Public market data
- Balances, orders, transactions and withdrawals
"""
