"""Decision logging for the Tic-Tac-Toe bot."""

import json
import threading
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from tictactoe_bot.exceptions import DecisionLogError


class EventType(str, Enum):
    """Types of events that can be logged."""

    DECISION = "decision"
    TERMINAL = "terminal"


class DecisionEvent(BaseModel):
    """A single engine call."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: EventType = Field(..., description="Type of event")
    message: str = Field(..., description="Event message")

    marker: str = Field(..., description="Marker the bot plays")
    strategy: str = Field(..., description="Move selection strategy")
    outcome: str = Field(..., description="Outcome after the call")
    placement: Optional[List[int]] = Field(None, description="Placed (row, col)")

    duration_ms: Optional[float] = Field(None, description="Duration in milliseconds")
    board: Optional[str] = Field(None, description="Rendered board after the call")


class DecisionLogger:
    """Thread-safe JSONL logger for engine decisions."""

    def __init__(self, log_file: Path):
        """Initialize decision logger.

        Args:
            log_file: JSONL file to append events to
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        self._lock = threading.Lock()

    def log_event(
        self,
        event_type: EventType,
        message: str,
        **kwargs,
    ) -> DecisionEvent:
        """Log a decision event.

        Args:
            event_type: Type of event
            message: Event message
            **kwargs: DecisionEvent fields

        Returns:
            The event that was written
        """
        event = DecisionEvent(event_type=event_type, message=message, **kwargs)
        self._write_event(event)
        return event

    def get_recent_events(self, limit: int = 100) -> List[DecisionEvent]:
        """Get recent events from the log.

        Args:
            limit: Maximum number of events to return

        Returns:
            List of recent events, oldest first
        """
        if limit <= 0:
            return []

        events = []

        if self.log_file.exists():
            with open(self.log_file, "r", encoding="utf-8") as f:
                lines = f.readlines()

            for line in lines[-limit:]:
                try:
                    events.append(DecisionEvent(**json.loads(line.strip())))
                except (json.JSONDecodeError, ValueError):
                    continue

        return events

    def _write_event(self, event: DecisionEvent) -> None:
        with self._lock:
            try:
                with open(self.log_file, "a", encoding="utf-8") as f:
                    json.dump(event.model_dump(mode="json"), f, separators=(",", ":"))
                    f.write("\n")
            except OSError as e:
                raise DecisionLogError(
                    f"Failed to write decision event to {self.log_file}: {e}"
                ) from e
