"""Repository interfaces."""

from .portal_repository import PortalRepository
from .buoy_repository import BuoyRepository
from .table_repository import TableRepository

__all__ = [
    "PortalRepository",
    "BuoyRepository",
    "TableRepository",
]
