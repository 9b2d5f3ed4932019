"""Shared fixtures: in-memory stand-ins for the remote sources."""

from datetime import date
from typing import Any, Dict, List, Optional, Union

import pandas as pd
import pytest

from bbh.application.services.sst_service import SSTService
from bbh.domain.repositories.buoy_repository import BuoyRepository
from bbh.domain.repositories.portal_repository import PortalRepository
from bbh.domain.use_cases.build_buoy_uri import format_date
from bbh.infrastructure.repositories.file_sst_repository import FileSSTRepository
from config.settings import PROVENANCE


def make_feature(object_id: int, collection_date: str, tmin, tmax, tavg) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": None,
        "properties": {
            "ObjectId": object_id,
            "COLLECTION_DATE": collection_date,
            "SEA_SURFACE_TEMP_MIN_C": tmin,
            "SEA_SURFACE_TEMP_MAX_C": tmax,
            "SEA_SURFACE_TEMP_AVG_C": tavg,
        },
    }


@pytest.fixture
def geojson_document() -> Dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature(2, "2020-06-02T00:00:00Z", 12.0, 14.0, 13.0),
            make_feature(1, "2020-06-01T00:00:00Z", 11.0, 13.5, 12.1),
            make_feature(3, "2020-06-03T00:00:00Z", None, None, None),
        ],
    }


@pytest.fixture
def observations() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "station": ["E01"] * 4,
            "time": pd.to_datetime(
                [
                    "2020-01-02T00:00:00Z",
                    "2020-01-01T00:00:00Z",
                    "2020-01-01T01:00:00Z",
                    "2020-01-02T01:00:00Z",
                ],
                utc=True,
            ),
            "temperature": [5.0, 10.0, 20.0, float("nan")],
        }
    )


class FakePortalRepository(PortalRepository):
    def __init__(self, document: Dict[str, Any]):
        self.document = document
        self.calls = 0

    def get_document(self) -> Dict[str, Any]:
        self.calls += 1
        return self.document


class FakeBuoyRepository(BuoyRepository):
    def __init__(self, frame: pd.DataFrame, error: Optional[Exception] = None):
        self.frame = frame
        self.error = error
        self.calls: List[tuple] = []

    def get_observations(self, begin: Union[str, date], end: Union[str, date]) -> pd.DataFrame:
        self.calls.append((format_date(begin), format_date(end)))
        if self.error is not None:
            raise self.error
        return self.frame.copy()


@pytest.fixture
def portal_repo(geojson_document) -> FakePortalRepository:
    return FakePortalRepository(geojson_document)


@pytest.fixture
def buoy_repo(observations) -> FakeBuoyRepository:
    return FakeBuoyRepository(observations)


@pytest.fixture
def service(portal_repo, buoy_repo, tmp_path) -> SSTService:
    return SSTService(
        portal_repo=portal_repo,
        buoy_repo=buoy_repo,
        provenance=PROVENANCE,
        table_repo=FileSSTRepository(tmp_path / "sst"),
    )
