"""Open-data portal repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class PortalRepository(ABC):
    """Abstract repository for the GeoJSON open-data portal."""

    @abstractmethod
    def get_document(self) -> Dict[str, Any]:
        """
        Retrieve the dataset as a GeoJSON feature collection.

        Returns:
            Parsed GeoJSON document

        Raises:
            UpstreamFetchError: If the request fails
        """
        pass
