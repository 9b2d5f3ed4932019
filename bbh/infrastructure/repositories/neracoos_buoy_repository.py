"""NERACOOS ERDDAP buoy repository implementation."""

import logging
from datetime import date
from io import StringIO
from typing import Optional, Union
import pandas as pd
import requests
from ...domain.exceptions import UpstreamFetchError
from ...domain.repositories.buoy_repository import BuoyRepository
from ...domain.use_cases.build_buoy_uri import BuildBuoyUriUseCase

logger = logging.getLogger(__name__)

# Header of the E01 SBE37 tabledap query, in order
COLUMNS = [
    "station",
    "time",
    "mooring_site_desc",
    "conductivity",
    "conductivity_qc",
    "temperature",
    "temperature_qc",
    "salinity",
    "salinity_qc",
    "sigma_t",
    "sigma_t_qc",
    "longitude",
    "latitude",
    "depth",
]
TEXT_COLUMNS = ["station", "mooring_site_desc"]
TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_observations(text: str) -> pd.DataFrame:
    """
    Parse ERDDAP tabledap CSV into a typed DataFrame.

    The row after the header holds units, not data, and is always dropped.

    Args:
        text: CSV body as returned by ERDDAP

    Returns:
        DataFrame with the E01 columns; ``time`` is UTC, numeric columns are
        floats with NaN for anything unparseable
    """
    df = pd.read_csv(StringIO(text), skiprows=[1], dtype=str)

    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise UpstreamFetchError(f"Buoy response is missing columns: {', '.join(missing)}")

    df = df[COLUMNS].copy()
    df["time"] = pd.to_datetime(df["time"], format=TIME_FORMAT, utc=True, errors="coerce")
    for col in COLUMNS:
        if col not in TEXT_COLUMNS and col != "time":
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


class NeracoosBuoyRepository(BuoyRepository):
    """Repository for buoy telemetry from the NERACOOS ERDDAP server."""

    def __init__(
        self,
        uri_template: str,
        session: Optional[requests.Session] = None,
        timeout: float = 60,
    ):
        """
        Initialize repository.

        Args:
            uri_template: tabledap CSV query with [BEGIN] and [END] tokens
            session: HTTP session to use (a new one if omitted)
            timeout: Request timeout in seconds
        """
        self.build_uri = BuildBuoyUriUseCase(uri_template)
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_observations(
        self,
        begin: Union[str, date],
        end: Union[str, date],
    ) -> pd.DataFrame:
        """Retrieve buoy observations between two dates."""
        uri = self.build_uri.execute(begin, end)
        logger.info(f"Fetching buoy data from {begin} to {end}")

        try:
            response = self.session.get(uri, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching buoy data: {e}")
            raise UpstreamFetchError(f"Buoy request failed: {e}") from e

        try:
            df = parse_observations(response.text)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            logger.error(f"Error parsing buoy data: {e}")
            raise UpstreamFetchError(f"Buoy response is not valid CSV: {e}") from e

        logger.info(f"Loaded {len(df)} buoy observations")
        return df
