"""System clock and UUID factory behind the Stamps capability."""

import uuid
from datetime import datetime, timezone

from shopping_mall.core.capabilities import Stamps


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


_system_stamps = Stamps(clock=SystemClock(), new_id=uuid.uuid4)


def get_stamps() -> Stamps:
    """FastAPI dependency — overridden in tests with a fixed clock."""
    return _system_stamps
