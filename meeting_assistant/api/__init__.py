"""API Layer — FastAPI routes, CORS middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All non-preflight endpoints return structured JSON responses
"""
