"""Event model for the portfolio dashboard."""
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Any


class EventType(Enum):
    """Outcome of a refresh cycle."""
    SNAPSHOT_REPLACED = "snapshot_replaced"  # Sheet parsed into a new snapshot
    REFRESH_FAILED = "refresh_failed"        # Example data shown instead


@dataclass
class Event:
    """Notification published by the refresh controller."""
    type: EventType
    timestamp: datetime      # When the refresh finished
    source: str | None       # URL the sheet came from (None for fallback data)
    payload: dict[str, Any]  # Summary figures and holdings

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        d = asdict(self)
        d["type"] = self.type.value
        d["timestamp"] = self.timestamp.isoformat()
        return d
