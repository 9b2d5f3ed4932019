"""Dataset and form enumerations."""

from enum import Enum

from ..exceptions import UnknownDataset


class Dataset(str, Enum):
    """Supported SST datasets."""

    BBH = "bbh"  # Boothbay Harbor, Maine DMR portal
    E01 = "e01"  # NERACOOS buoy E01, Central Maine Shelf

    @classmethod
    def from_name(cls, name: str) -> "Dataset":
        """Look up a dataset by case-insensitive name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownDataset(name) from None


class Form(str, Enum):
    """Temporal granularity of a table."""

    HOURLY = "hourly"
    DAILY = "daily"

    @classmethod
    def from_name(cls, name: str) -> "Form":
        """Look up a form by case-insensitive name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Form must be 'hourly' or 'daily', got: {name}") from None
