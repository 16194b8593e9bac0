"""
Service layer for business logic.

This package contains the in-memory ledger that owns transaction records
and the chat service that turns messages into ledger updates and replies.
"""
