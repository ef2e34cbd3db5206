"""Pydantic Schemas — request/response contracts at the API boundary.

Invariants:
    - Request models validate field rules (non-empty codes, money >= 0, quantity >= 1)
    - Response models read straight from ORM rows (from_attributes)
"""
