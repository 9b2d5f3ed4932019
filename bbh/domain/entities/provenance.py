"""Provenance entity."""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class Provenance:
    """Where a table of SST data came from."""

    name: str  # e.g., 'BBH', 'E01'
    long_name: str
    source: str  # URI

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "Provenance":
        """Create Provenance from dictionary definition."""
        return cls(
            name=definition["name"],
            long_name=definition["long_name"],
            source=definition["source"],
        )

    def to_dict(self) -> Dict[str, str]:
        """Provenance as a plain dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        return self.name
