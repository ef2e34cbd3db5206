"""Domain Types — identity and actor types shared across handlers.

Invariants:
    - Every authenticated request resolves to exactly one Actor (id + role)
    - ActorType values match the "type" claim carried in tokens
    - Status fields stay free-form strings: no transition vocabulary is enforced

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ActorId = NewType("ActorId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ActorType(str, Enum):
    """The four caller roles. Route prefixes use the camelCase form."""
    MEMBER = "member"
    SELLER = "seller"
    ADMIN = "admin"
    GUEST = "guest"

    @property
    def route_segment(self) -> str:
        return f"{self.value}User"


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class SoftDeleteMode(str, Enum):
    """Which rows a listing includes with respect to deleted_at."""
    LIVE = "live"
    DELETED = "deleted"
    ALL = "all"


@dataclass(frozen=True)
class Actor:
    """Decoded identity of the caller, handed to every handler."""
    id: ActorId
    type: ActorType

    def owns(self, owner_id: UUID | None) -> bool:
        return owner_id is not None and owner_id == self.id
