"""Buoy telemetry repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Union
import pandas as pd


class BuoyRepository(ABC):
    """Abstract repository for buoy time-series data."""

    @abstractmethod
    def get_observations(
        self,
        begin: Union[str, date],
        end: Union[str, date],
    ) -> pd.DataFrame:
        """
        Retrieve buoy observations between two dates.

        Args:
            begin: Start date as YYYY-mm-dd (inclusive)
            end: End date as YYYY-mm-dd (inclusive)

        Returns:
            DataFrame with one row per observation and a UTC ``time`` column

        Raises:
            InvalidDateFormat: If either date cannot be parsed
            UpstreamFetchError: If the request fails
        """
        pass
