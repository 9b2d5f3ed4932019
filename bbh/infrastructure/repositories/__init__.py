"""Concrete repository implementations."""

from .arcgis_portal_repository import ArcGISPortalRepository
from .neracoos_buoy_repository import NeracoosBuoyRepository
from .file_sst_repository import FileSSTRepository

__all__ = [
    "ArcGISPortalRepository",
    "NeracoosBuoyRepository",
    "FileSSTRepository",
]
