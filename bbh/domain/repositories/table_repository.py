"""Local table repository interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..entities.sst_table import SSTTable


class TableRepository(ABC):
    """Abstract repository for SST tables stored under a local root."""

    @abstractmethod
    def get_path(self, *segments: str) -> Path:
        """
        Resolve path segments under the repository root.

        Args:
            segments: Path segments relative to the root

        Returns:
            The resolved path (the root is created if missing)
        """
        pass

    @abstractmethod
    def save_table(self, table: SSTTable, filename: str) -> Path:
        """
        Save a table and its provenance.

        Args:
            table: Table to save
            filename: File name relative to the root

        Returns:
            Path of the written data file
        """
        pass

    @abstractmethod
    def load_table(self, filename: str) -> SSTTable:
        """
        Load a table previously written with save_table.

        Raises:
            NotFound: If the file does not exist
        """
        pass
