"""Route Modules — one file per resource family.

Invariants:
    - Each module defines its own APIRouter(s) with prefix and tags
    - Paths follow /shoppingMall/{role}User/... ; auth lives under /auth/{role}User/...

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
