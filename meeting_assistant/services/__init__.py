"""Services Layer — request handlers that orchestrate core logic and schemas.

Invariants:
    - Handlers return result values; the API layer owns HTTP status mapping
"""
