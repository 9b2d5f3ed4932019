"""Tests for domain entities."""

import dataclasses
from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from bbh.domain.entities.daily_summary import DailySummary
from bbh.domain.entities.dataset import Dataset, Form
from bbh.domain.entities.provenance import Provenance
from bbh.domain.entities.reading import Reading
from bbh.domain.entities.sst_table import SSTTable
from bbh.domain.exceptions import UnknownDataset

PROVENANCE = Provenance(name="E01", long_name="Central Maine Shelf", source="http://example/e01")


def test_reading():
    """Test Reading entity."""
    tz = timezone(timedelta(hours=-4))
    reading = Reading(time=datetime(2021, 7, 1, 22, 0, tzinfo=tz), temperature=14.2)
    assert reading.collection_date == date(2021, 7, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        reading.temperature = 15.0


def test_daily_summary():
    """Test DailySummary entity."""
    summary = DailySummary(date(2021, 7, 1), temp_min=12.0, temp_max=15.0, temp_avg=13.4)
    assert summary.temp_range == 3.0
    assert summary.has_values


def test_daily_summary_from_row_maps_nan():
    """Test NaN statistics become None."""
    summary = DailySummary.from_row(
        {
            "collection_date": date(2021, 7, 1),
            "temp_min": float("nan"),
            "temp_max": float("nan"),
            "temp_avg": float("nan"),
        }
    )
    assert summary == DailySummary(date(2021, 7, 1))
    assert summary.temp_range is None


def test_provenance():
    """Test Provenance entity."""
    provenance = Provenance.from_dict(PROVENANCE.to_dict())
    assert provenance == PROVENANCE
    assert str(provenance) == "E01"
    with pytest.raises(dataclasses.FrozenInstanceError):
        provenance.name = "BBH"


def test_dataset_from_name():
    """Test Dataset lookup."""
    assert Dataset.from_name("BBH") is Dataset.BBH
    assert Dataset.from_name(" e01 ") is Dataset.E01
    assert Dataset.from_name(Dataset.E01) is Dataset.E01
    with pytest.raises(UnknownDataset):
        Dataset.from_name("xyz")


def test_form_from_name():
    """Test Form lookup."""
    assert Form.from_name("Hourly") is Form.HOURLY
    assert Form.from_name(Form.DAILY) is Form.DAILY
    with pytest.raises(ValueError):
        Form.from_name("monthly")


def test_sst_table_sorts_and_copies():
    """Test SSTTable sorts rows and never exposes its own frame."""
    frame = pd.DataFrame(
        {
            "collection_date": [date(2021, 1, 3), date(2021, 1, 1)],
            "temp_min": [1.0, 2.0],
            "temp_max": [3.0, 4.0],
            "temp_avg": [2.0, 3.0],
        }
    )
    table = SSTTable(frame, PROVENANCE)

    assert table.collection_dates == [date(2021, 1, 1), date(2021, 1, 3)]
    # the caller's frame is untouched
    assert frame.loc[0, "collection_date"] == date(2021, 1, 3)

    data = table.data
    data.loc[0, "temp_avg"] = 99.0
    assert table.data.loc[0, "temp_avg"] == 3.0

    with pytest.raises(dataclasses.FrozenInstanceError):
        table.provenance = PROVENANCE


def test_sst_table_records_and_summaries():
    """Test conversions to records and DailySummary entities."""
    frame = pd.DataFrame(
        {
            "collection_date": [date(2021, 1, 1), date(2021, 1, 2)],
            "temp_min": [2.0, float("nan")],
            "temp_max": [4.0, float("nan")],
            "temp_avg": [3.0, float("nan")],
        }
    )
    table = SSTTable(frame, PROVENANCE, Form.DAILY)

    assert table.to_records() == [
        {"collection_date": "2021-01-01", "temp_min": 2.0, "temp_max": 4.0, "temp_avg": 3.0},
        {"collection_date": "2021-01-02", "temp_min": None, "temp_max": None, "temp_avg": None},
    ]
    assert table.to_summaries()[1] == DailySummary(date(2021, 1, 2))
    assert str(table) == "E01 (daily, 2 rows)"


def test_hourly_table_sorted_by_time():
    """Test hourly tables are ordered by timestamp."""
    frame = pd.DataFrame(
        {
            "time": pd.to_datetime(["2021-01-01T05:00:00Z", "2021-01-01T01:00:00Z"], utc=True),
            "temperature": [1.0, 2.0],
        }
    )
    table = SSTTable(frame, PROVENANCE, Form.HOURLY)

    assert list(table.data["temperature"]) == [2.0, 1.0]
    assert table.collection_dates == [date(2021, 1, 1), date(2021, 1, 1)]
    with pytest.raises(ValueError):
        table.to_summaries()


def test_sst_table_rows_cannot_change_in_place():
    """Test edits to the source frame or to data copies leave the table alone."""
    frame = pd.DataFrame(
        {
            "collection_date": [date(2021, 1, 1)],
            "temp_min": [1.0],
            "temp_max": [3.0],
            "temp_avg": [2.0],
        }
    )
    table = SSTTable(frame, PROVENANCE)

    frame.loc[0, "temp_min"] = 99.0
    table.data.loc[0, "temp_min"] = 99.0
    rows = table.data
    rows.loc[0, "temp_max"] = 99.0

    assert table.data.loc[0, "temp_min"] == 1.0
    assert table.data.loc[0, "temp_max"] == 3.0
    assert not hasattr(table, "frame")
