"""ArcGIS open-data portal repository implementation."""

import logging
from typing import Any, Dict, Optional
import requests
from ...domain.exceptions import UpstreamFetchError
from ...domain.repositories.portal_repository import PortalRepository

logger = logging.getLogger(__name__)


class ArcGISPortalRepository(PortalRepository):
    """Repository for a GeoJSON dataset published on the ArcGIS open-data portal."""

    def __init__(
        self,
        uri: str,
        session: Optional[requests.Session] = None,
        timeout: float = 60,
    ):
        """
        Initialize repository.

        Args:
            uri: URI of the GeoJSON dataset
            session: HTTP session to use (a new one if omitted)
            timeout: Request timeout in seconds
        """
        self.uri = uri
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_document(self) -> Dict[str, Any]:
        """Retrieve the dataset as a GeoJSON feature collection."""
        logger.info(f"Fetching portal dataset from {self.uri}")

        try:
            response = self.session.get(self.uri, timeout=self.timeout)
            response.raise_for_status()
            document = response.json()
        except requests.RequestException as e:
            logger.error(f"Error fetching portal dataset: {e}")
            raise UpstreamFetchError(f"Portal request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Portal returned invalid JSON: {e}")
            raise UpstreamFetchError(f"Portal returned invalid JSON: {e}") from e

        if not isinstance(document, dict):
            raise UpstreamFetchError("Portal response is not a JSON object")

        logger.info(f"Fetched {len(document.get('features') or [])} features")
        return document
