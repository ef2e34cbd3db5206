"""Boundary Protocols — injected clock and identifier capabilities.

Invariants:
    - Handlers never call datetime.now() or uuid4() directly; they use Stamps
    - Clock.now() returns an aware UTC datetime

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain objects
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


class Clock(Protocol):
    def now(self) -> datetime: ...


class IdFactory(Protocol):
    def __call__(self) -> UUID: ...


@dataclass(frozen=True)
class Stamps:
    """Clock + id factory pair handed to mutation helpers."""
    clock: Clock
    new_id: IdFactory

    def now(self) -> datetime:
        return self.clock.now()
