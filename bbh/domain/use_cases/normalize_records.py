"""Use case for normalizing fetched rows into the canonical SST schema."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union
import numpy as np
import pandas as pd
from ..entities.dataset import Form
from ..entities.provenance import Provenance
from ..entities.sst_table import SSTTable, DATE_COLUMN, DAILY_COLUMNS
from ..exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)

# Column names used by the Maine DMR Boothbay Harbor dataset
BBH_COLUMN_MAP = {
    "COLLECTION_DATE": DATE_COLUMN,
    "SEA_SURFACE_TEMP_MIN_C": "temp_min",
    "SEA_SURFACE_TEMP_MAX_C": "temp_max",
    "SEA_SURFACE_TEMP_AVG_C": "temp_avg",
}
BBH_ID_COLUMNS = ["ObjectId"]


class NormalizeRecordsUseCase:
    """Use case to map source rows onto collection_date/temp_min/temp_max/temp_avg."""

    def __init__(
        self,
        column_map: Optional[Dict[str, str]] = None,
        drop_columns: Optional[Sequence[str]] = None,
        date_format: Optional[str] = None,
        timezone: Optional[str] = None,
    ):
        """
        Initialize use case.

        Args:
            column_map: Source column name -> canonical column name
            drop_columns: Source identifier columns to remove
            date_format: strptime format of the source collection date
            timezone: Timezone the collection date is interpreted in; ignored
                when the parsed dates already carry an offset
        """
        self.column_map = dict(column_map if column_map is not None else BBH_COLUMN_MAP)
        self.drop_columns = list(drop_columns if drop_columns is not None else BBH_ID_COLUMNS)
        self.date_format = date_format
        self.timezone = timezone

    def _parse_dates(self, values: pd.Series) -> pd.Series:
        if self.date_format and "%z" in self.date_format:
            # Offsets differ row to row across DST, so each row keeps its own
            return values.map(self._parse_offset_date)
        times = pd.to_datetime(values, format=self.date_format, errors="coerce")
        if self.timezone and times.dt.tz is None:
            # Wall-clock times; ambiguous DST hours resolve to standard time
            times = times.dt.tz_localize(
                self.timezone,
                ambiguous=np.zeros(len(times), dtype=bool),
                nonexistent="shift_forward",
            )
        return times.dt.date

    def _parse_offset_date(self, value: Any):
        ts = pd.to_datetime(value, format=self.date_format, errors="coerce")
        if pd.isna(ts):
            ts = pd.to_datetime(value, errors="coerce")
        return ts.date() if pd.notna(ts) else None

    def execute(
        self,
        rows: Union[pd.DataFrame, List[Dict[str, Any]]],
        provenance: Provenance,
    ) -> SSTTable:
        """
        Execute the use case.

        Args:
            rows: Fetched rows, as a DataFrame or a list of dictionaries
            provenance: Provenance to attach to the table

        Returns:
            Daily SSTTable sorted by collection date
        """
        df = pd.DataFrame(rows).copy()
        logger.info(f"Normalizing {len(df)} {provenance.name} records")

        df = df.drop(columns=[c for c in self.drop_columns if c in df.columns])
        df = df.rename(columns=self.column_map)

        missing = [c for c in DAILY_COLUMNS if c not in df.columns]
        if missing and not df.empty:
            raise UpstreamFetchError(
                f"{provenance.name} records are missing columns: {', '.join(missing)}"
            )
        for col in missing:
            df[col] = pd.Series(dtype=object)

        df[DATE_COLUMN] = self._parse_dates(df[DATE_COLUMN])
        for col in DAILY_COLUMNS[1:]:
            df[col] = pd.to_numeric(df[col], errors="coerce")

        # Canonical columns first, anything else the source sent after them
        extra = [c for c in df.columns if c not in DAILY_COLUMNS]
        return SSTTable(df[DAILY_COLUMNS + extra], provenance, Form.DAILY)

    def from_geojson(self, document: Dict[str, Any], provenance: Provenance) -> SSTTable:
        """
        Normalize the per-feature properties of a GeoJSON feature collection.

        Args:
            document: Parsed GeoJSON FeatureCollection
            provenance: Provenance to attach to the table

        Returns:
            Daily SSTTable sorted by collection date
        """
        features = document.get("features") if isinstance(document, dict) else None
        if not isinstance(features, list):
            raise UpstreamFetchError(
                f"{provenance.name} response is not a GeoJSON feature collection"
            )
        rows = [feature.get("properties") or {} for feature in features]
        return self.execute(rows, provenance)
