"""Use case for aggregating sub-daily readings into daily summaries."""

import logging
from typing import Iterable, List
import pandas as pd
from ..entities.reading import Reading
from ..entities.daily_summary import DailySummary
from ..entities.sst_table import DATE_COLUMN, DAILY_COLUMNS

logger = logging.getLogger(__name__)


def _calendar_dates(times: pd.Series) -> pd.Series:
    """Truncate timestamps to calendar dates in their own timezone."""
    if pd.api.types.is_datetime64_any_dtype(times):
        return times.dt.date
    return times.map(lambda t: pd.Timestamp(t).date() if pd.notna(t) else None)


class AggregateDailyUseCase:
    """Use case to reduce timestamped temperatures to daily min/max/mean.

    Values that are absent or cannot be parsed as numbers are ignored. A date
    whose readings are all absent is kept, with every statistic set to the
    missing sentinel (NaN in frames, None on DailySummary).
    """

    def __init__(self, time_column: str = "time", value_column: str = "temperature"):
        """
        Initialize use case.

        Args:
            time_column: Column holding reading timestamps
            value_column: Column holding temperature values
        """
        self.time_column = time_column
        self.value_column = value_column

    def _reduce(self, dates: pd.Series, values: pd.Series) -> pd.DataFrame:
        df = pd.DataFrame(
            {
                DATE_COLUMN: dates.to_numpy(dtype=object),
                "value": pd.to_numeric(values, errors="coerce").to_numpy(dtype=float),
            }
        )
        if df.empty:
            return pd.DataFrame(columns=DAILY_COLUMNS)

        daily = (
            df.groupby(DATE_COLUMN, sort=True)["value"]
            .agg(temp_min="min", temp_max="max", temp_avg="mean")
            .reset_index()
        )
        empty_days = int(daily["temp_avg"].isna().sum())
        if empty_days:
            logger.warning(f"{empty_days} day(s) have no valid temperature readings")
        return daily[DAILY_COLUMNS]

    def execute(self, observations: pd.DataFrame) -> pd.DataFrame:
        """
        Execute the use case.

        Args:
            observations: DataFrame with a timestamp column and a temperature column

        Returns:
            DataFrame with columns collection_date, temp_min, temp_max, temp_avg;
            one row per distinct date, ascending
        """
        logger.info(f"Aggregating {len(observations)} readings by date")
        if observations.empty:
            return pd.DataFrame(columns=DAILY_COLUMNS)

        daily = self._reduce(
            _calendar_dates(observations[self.time_column]),
            observations[self.value_column],
        )
        logger.info(f"Aggregated into {len(daily)} daily summaries")
        return daily

    def summarize(self, readings: Iterable[Reading]) -> List[DailySummary]:
        """
        Aggregate Reading entities.

        Args:
            readings: Readings in any order

        Returns:
            List of DailySummary entities sorted by date
        """
        readings = list(readings)
        daily = self._reduce(
            pd.Series([r.collection_date for r in readings], dtype=object),
            pd.Series([r.temperature for r in readings], dtype=object),
        )
        return [DailySummary.from_row(row) for _, row in daily.iterrows()]
