"""SST table entity."""

from dataclasses import InitVar, dataclass, field
from datetime import date
from typing import Any, Dict, List

import pandas as pd

from .daily_summary import DailySummary
from .dataset import Form
from .provenance import Provenance

DATE_COLUMN = "collection_date"
TIME_COLUMN = "time"
DAILY_COLUMNS = [DATE_COLUMN, "temp_min", "temp_max", "temp_avg"]


@dataclass(frozen=True, eq=False)
class SSTTable:
    """Rows of SST data paired with their provenance.

    Rows are sorted ascending by collection date (daily tables) or by
    timestamp (hourly tables) when the table is built. ``data`` hands out a
    copy, so a table never changes after construction.
    """

    frame: InitVar[pd.DataFrame]
    provenance: Provenance
    form: Form = Form.DAILY
    _frame: pd.DataFrame = field(init=False, repr=False)

    def __post_init__(self, frame: pd.DataFrame):
        key = DATE_COLUMN if self.form == Form.DAILY else TIME_COLUMN
        frame = frame.copy()
        if key in frame.columns:
            frame = frame.sort_values(key, kind="stable")
        object.__setattr__(self, "_frame", frame.reset_index(drop=True))

    @property
    def data(self) -> pd.DataFrame:
        """A copy of the row data."""
        return self._frame.copy()

    @property
    def name(self) -> str:
        """Short name of the dataset."""
        return self.provenance.name

    @property
    def collection_dates(self) -> List[date]:
        """Calendar dates covered by the table, in row order."""
        if DATE_COLUMN in self._frame.columns:
            return list(self._frame[DATE_COLUMN])
        return [ts.date() for ts in self._frame[TIME_COLUMN]]

    def to_summaries(self) -> List[DailySummary]:
        """Convert a daily table to DailySummary entities."""
        if self.form != Form.DAILY:
            raise ValueError("Only daily tables can be converted to summaries")
        return [DailySummary.from_row(row) for _, row in self._frame.iterrows()]

    def to_records(self) -> List[Dict[str, Any]]:
        """Rows as JSON-friendly dictionaries (missing values become None)."""
        frame = self._frame.astype(object).where(self._frame.notna(), None)
        records = frame.to_dict(orient="records")
        for record in records:
            for key, value in record.items():
                if hasattr(value, "isoformat"):
                    record[key] = value.isoformat()
        return records

    def __len__(self) -> int:
        return len(self._frame)

    def __str__(self) -> str:
        return f"{self.provenance.name} ({self.form.value}, {len(self)} rows)"
