"""
Bank Ledger

A small in-memory banking ledger: accounts with deposits, withdrawals and
transfers, an append-only transaction history per account, and fixed-point
Decimal arithmetic for every balance.
"""

__version__ = "1.0.0"
