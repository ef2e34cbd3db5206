"""API Layer — FastAPI routes, actor dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes: lookups, ownership and mutations go through services/lifecycle.py,
      searches through services/listing.py
"""
