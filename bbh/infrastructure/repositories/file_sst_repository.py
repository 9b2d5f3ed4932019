"""File-based SST table repository implementation."""

import json
import logging
from pathlib import Path
from typing import Union
import pandas as pd
from ...domain.entities.dataset import Form
from ...domain.entities.provenance import Provenance
from ...domain.entities.sst_table import SSTTable, DATE_COLUMN, TIME_COLUMN
from ...domain.exceptions import NotFound
from ...domain.repositories.table_repository import TableRepository
from ...domain.use_cases.normalize_records import NormalizeRecordsUseCase

logger = logging.getLogger(__name__)

PROVENANCE_SUFFIX = ".provenance.json"


class FileSSTRepository(TableRepository):
    """Repository for saving/loading SST tables under a local root directory."""

    def __init__(self, root: Union[str, Path]):
        """
        Initialize repository.

        Args:
            root: Directory that holds the tables; created on first use
        """
        self.root = Path(root).expanduser()

    def get_path(self, *segments: str) -> Path:
        """Resolve path segments under the root, creating the root if absent."""
        if not self.root.exists():
            logger.info(f"Creating data root {self.root}")
            self.root.mkdir(parents=True, exist_ok=True)
        return self.root.joinpath(*segments)

    def _existing(self, filename: str) -> Path:
        path = self.get_path(filename)
        if not path.exists():
            raise NotFound(f"File not found: {path}")
        return path

    def save_table(self, table: SSTTable, filename: str) -> Path:
        """Write table rows as CSV with a JSON provenance sidecar."""
        path = self.get_path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Saving {len(table)} {table.name} rows to {path}")

        table.data.to_csv(path, index=False)
        sidecar = path.with_name(path.name + PROVENANCE_SUFFIX)
        with open(sidecar, "w", encoding="utf-8") as f:
            json.dump(
                {"provenance": table.provenance.to_dict(), "form": table.form.value},
                f,
                indent=2,
            )

        logger.info("Table saved successfully")
        return path

    def load_table(self, filename: str) -> SSTTable:
        """Load a table written by save_table."""
        path = self._existing(filename)
        sidecar = path.with_name(path.name + PROVENANCE_SUFFIX)
        if not sidecar.exists():
            raise NotFound(f"Provenance file not found: {sidecar}")

        logger.info(f"Loading table from {path}")
        with open(sidecar, "r", encoding="utf-8") as f:
            meta = json.load(f)

        df = pd.read_csv(path)
        if DATE_COLUMN in df.columns:
            df[DATE_COLUMN] = pd.to_datetime(df[DATE_COLUMN], errors="coerce").dt.date
        if TIME_COLUMN in df.columns:
            df[TIME_COLUMN] = pd.to_datetime(df[TIME_COLUMN], utc=True, errors="coerce")

        table = SSTTable(df, Provenance.from_dict(meta["provenance"]), Form(meta["form"]))
        logger.info(f"Loaded {len(table)} rows")
        return table

    def read_portal_export(
        self,
        filename: str,
        provenance: Provenance,
        date_format: str = "%Y/%m/%d %H:%M:%S%z",
    ) -> SSTTable:
        """
        Read a CSV export of the portal dataset (optionally gzipped).

        Args:
            filename: Export file name relative to the root
            provenance: Provenance to attach to the table
            date_format: Format of the COLLECTION_DATE column in the export

        Returns:
            Daily SSTTable sorted by collection date
        """
        path = self._existing(filename)
        logger.info(f"Reading portal export from {path}")

        try:
            df = pd.read_csv(path, dtype={"COLLECTION_DATE": str})
        except Exception as e:
            logger.error(f"Error reading export file: {e}")
            raise

        return NormalizeRecordsUseCase(date_format=date_format).execute(df, provenance)
