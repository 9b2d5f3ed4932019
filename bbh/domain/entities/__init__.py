"""Domain entities."""

from .reading import Reading
from .daily_summary import DailySummary
from .provenance import Provenance
from .dataset import Dataset, Form
from .sst_table import SSTTable, DAILY_COLUMNS

__all__ = [
    "Reading",
    "DailySummary",
    "Provenance",
    "Dataset",
    "Form",
    "SSTTable",
    "DAILY_COLUMNS",
]
