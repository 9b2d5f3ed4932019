"""Reading entity."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Reading:
    """A single timestamped temperature observation."""

    time: datetime  # timezone-aware
    temperature: Optional[float] = None  # Celsius, None when absent

    @property
    def collection_date(self) -> date:
        """Calendar date of the reading in its own timezone."""
        return self.time.date()
