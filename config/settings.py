"""Application settings and configuration."""

import os
from typing import Dict, Any, Optional

# Local data root. Never defaulted to a user path; None means the caller
# must pass an explicit root.
DATA_ROOT: Optional[str] = os.getenv("BBH_DATA_ROOT") or None

# HTTP settings
HTTP_TIMEOUT = float(os.getenv("BBH_HTTP_TIMEOUT", "60"))

# Boothbay Harbor (Maine DMR) open-data portal
BBH_URI = (
    "https://opendata.arcgis.com/datasets/"
    "5fd6f3e57d794a409d72f47d78f15a32_0.geojson"
)
BBH_TIMEZONE = "US/Eastern"
BBH_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# NERACOOS buoy E01 (SBE37 at the Central Maine Shelf mooring)
E01_URI_TEMPLATE = (
    "http://www.neracoos.org/erddap/tabledap/E01_sbe37_all.csv?"
    "station%2Ctime%2Cmooring_site_desc%2Cconductivity%2Cconductivity_qc"
    "%2Ctemperature%2Ctemperature_qc%2Csalinity%2Csalinity_qc%2Csigma_t"
    "%2Csigma_t_qc%2Clongitude%2Clatitude%2Cdepth"
    "&time%3E=[BEGIN]T00%3A00%3A00Z&time%3C=[END]T23%3A00%3A00Z"
)
E01_SOURCE = "http://www.neracoos.org/erddap/tabledap/E01_sbe37_all.html"
E01_DEFAULT_BEGIN = "2001-07-09"

# Provenance records per dataset
PROVENANCE: Dict[str, Dict[str, str]] = {
    "bbh": {
        "name": "BBH",
        "long_name": "Boothbay Harbor Maine",
        "source": BBH_URI,
    },
    "e01": {
        "name": "E01",
        "long_name": "Central Maine Shelf",
        "source": E01_SOURCE,
    },
}

# API settings
API_SETTINGS: Dict[str, Any] = {
    "title": "Maine SST API",
    "description": "Sea surface temperature from Boothbay Harbor and buoy E01",
    "version": "1.0.0",
}
