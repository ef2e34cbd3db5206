"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock and ids are injected)

Design Decisions:
    - Pagination, sort parsing, and sparse-patch rules live here so every
      endpoint shares one definition of them
"""
