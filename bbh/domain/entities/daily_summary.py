"""Daily summary entity."""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional


def _clean(value: Any) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return None if math.isnan(value) else value


@dataclass(frozen=True)
class DailySummary:
    """Min/max/mean temperature for one calendar date.

    All three statistics are None when the date had no valid readings.
    """

    collection_date: date
    temp_min: Optional[float] = None  # Celsius
    temp_max: Optional[float] = None  # Celsius
    temp_avg: Optional[float] = None  # Celsius

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DailySummary":
        """Create DailySummary from a table row, mapping NaN to None."""
        return cls(
            collection_date=row["collection_date"],
            temp_min=_clean(row["temp_min"]),
            temp_max=_clean(row["temp_max"]),
            temp_avg=_clean(row["temp_avg"]),
        )

    @property
    def has_values(self) -> bool:
        """Whether the date had at least one valid reading."""
        return self.temp_avg is not None

    @property
    def temp_range(self) -> Optional[float]:
        """Daily temperature range."""
        if self.temp_max is not None and self.temp_min is not None:
            return self.temp_max - self.temp_min
        return None
