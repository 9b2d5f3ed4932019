"""Service routing dataset requests to their fetch and normalize steps."""

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional, Union
import pandas as pd

from ...domain.entities.dataset import Dataset, Form
from ...domain.entities.provenance import Provenance
from ...domain.entities.sst_table import SSTTable
from ...domain.repositories.portal_repository import PortalRepository
from ...domain.repositories.buoy_repository import BuoyRepository
from ...domain.repositories.table_repository import TableRepository

# Use cases
from ...domain.use_cases.normalize_records import NormalizeRecordsUseCase
from ...domain.use_cases.aggregate_daily import AggregateDailyUseCase

logger = logging.getLogger(__name__)

DateLike = Union[str, date]


class SSTService:
    """Fetches SST tables for the supported datasets."""

    def __init__(
        self,
        portal_repo: PortalRepository,
        buoy_repo: BuoyRepository,
        provenance: Dict[str, Dict[str, str]],
        default_begin: DateLike = "2001-07-09",
        portal_timezone: Optional[str] = "US/Eastern",
        portal_date_format: Optional[str] = "%Y-%m-%dT%H:%M:%SZ",
        table_repo: Optional[TableRepository] = None,
    ):
        self.portal_repo = portal_repo
        self.buoy_repo = buoy_repo
        self.table_repo = table_repo
        self.default_begin = default_begin

        self.provenance = {
            Dataset.from_name(name): Provenance.from_dict(definition)
            for name, definition in provenance.items()
        }

        self.normalize_uc = NormalizeRecordsUseCase(
            date_format=portal_date_format, timezone=portal_timezone
        )
        self.aggregate_uc = AggregateDailyUseCase()

        # Every dataset has exactly one handler
        self._handlers: Dict[Dataset, Callable[..., SSTTable]] = {
            Dataset.BBH: self._fetch_bbh_table,
            Dataset.E01: self.fetch_e01,
        }

    def fetch_sst(
        self,
        name: Union[str, Dataset] = "bbh",
        form: Union[str, Form] = Form.DAILY,
        begin: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ) -> SSTTable:
        """
        Fetch a dataset by name.

        Args:
            name: 'bbh' or 'e01', case-insensitive
            form: 'daily' or 'hourly'; BBH is a daily product and ignores it
            begin: Start date for E01 (defaults to the start of the record)
            end: End date for E01 (defaults to today)

        Returns:
            SSTTable for the dataset

        Raises:
            UnknownDataset: If the name is not a supported dataset
        """
        dataset = Dataset.from_name(name)
        form = Form.from_name(form)
        logger.info(f"Fetching {dataset.value} ({form.value})")
        return self._handlers[dataset](begin=begin, end=end, form=form)

    def _fetch_bbh_table(self, **_: Any) -> SSTTable:
        return self.fetch_bbh()

    def fetch_bbh(self, raw: bool = False) -> Union[SSTTable, Dict[str, Any]]:
        """
        Retrieve Boothbay Harbor data from the open-data portal.

        Args:
            raw: Return the GeoJSON document instead of the normalized table

        Returns:
            Daily SSTTable, or the raw document when ``raw`` is True
        """
        document = self.portal_repo.get_document()
        if raw:
            return document
        return self.normalize_uc.from_geojson(document, self.provenance[Dataset.BBH])

    def fetch_e01(
        self,
        begin: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
        form: Union[str, Form] = Form.HOURLY,
    ) -> SSTTable:
        """
        Fetch buoy E01 observations between two dates.

        Args:
            begin: The starting date as YYYY-mm-dd
            end: The end date as YYYY-mm-dd (defaults to today)
            form: 'hourly' for the observations, 'daily' for daily summaries

        Returns:
            SSTTable of hourly observations or daily summaries
        """
        form = Form.from_name(form)
        begin = begin if begin is not None else self.default_begin
        end = end if end is not None else date.today()

        observations = self.buoy_repo.get_observations(begin, end)
        hourly = SSTTable(observations, self.provenance[Dataset.E01], Form.HOURLY)
        if form == Form.DAILY:
            return self.e01_bydate(hourly)
        return hourly

    def e01_bydate(self, observations: Union[SSTTable, pd.DataFrame]) -> SSTTable:
        """
        Create by-date E01 data.

        Args:
            observations: Hourly E01 table or DataFrame with time and temperature

        Returns:
            Daily SSTTable tagged with E01 provenance
        """
        frame = observations.data if isinstance(observations, SSTTable) else observations
        daily = self.aggregate_uc.execute(frame)
        return SSTTable(daily, self.provenance[Dataset.E01], Form.DAILY)

    def save(self, table: SSTTable, filename: Optional[str] = None):
        """
        Save a table under the configured data root.

        Args:
            table: Table to save
            filename: Target file name (defaults to '<name>_<form>.csv')

        Returns:
            Path of the written file
        """
        if self.table_repo is None:
            raise ValueError("No table repository configured for saving")
        filename = filename or f"{table.name.lower()}_{table.form.value}.csv"
        return self.table_repo.save_table(table, filename)
