"""Domain exceptions."""


class SSTError(Exception):
    """Base class for all SST retrieval errors."""


class NotFound(SSTError, FileNotFoundError):
    """A referenced local resource does not exist."""


class InvalidDateFormat(SSTError, ValueError):
    """A supplied date string cannot be parsed as a calendar date."""


class UnknownDataset(SSTError, ValueError):
    """The requested dataset name is not one of the supported datasets."""

    def __init__(self, name: str):
        super().__init__(f"Name not known: {name}")
        self.name = name


class UpstreamFetchError(SSTError):
    """The remote data source failed or returned an unusable response."""
