"""Infrastructure Layer — database, logging, tokens, passwords, clock.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Library exceptions are mapped to core/errors.py types at this boundary
"""
