"""Service Layer — shared request pipelines used by the route modules.

Invariants:
    - listing.py owns filter/paginate/map for searches
    - lifecycle.py owns lookup/authorize/mutate for writes
    - Services raise core/errors.py types, never HTTPException
"""
