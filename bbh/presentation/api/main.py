"""FastAPI main application."""

import logging
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from ...domain.entities.dataset import Dataset, Form
from ...domain.exceptions import (
    InvalidDateFormat,
    NotFound,
    UnknownDataset,
    UpstreamFetchError,
)
from ..cli.main import build_service
from config.settings import API_SETTINGS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize service (network access happens per request only)
service = build_service()


# Response models
class ProvenanceResponse(BaseModel):
    """Provenance of a table."""

    name: str
    long_name: str
    source: str


class SSTResponse(BaseModel):
    """Response model for an SST table."""

    provenance: ProvenanceResponse
    form: str = Field(..., description="'hourly' or 'daily'")
    count: int
    records: List[Dict[str, Any]]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Maine SST API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "datasets": "/datasets",
            "sst": "/sst/{name}",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/datasets")
async def datasets():
    """List supported datasets and their provenance."""
    return {
        dataset.value: service.provenance[dataset].to_dict() for dataset in Dataset
    }


@app.get("/sst/{name}", response_model=SSTResponse)
def sst(
    name: str,
    form: str = Query(Form.DAILY.value, description="'daily' or 'hourly'"),
    begin: Optional[str] = Query(None, description="E01 start date, YYYY-mm-dd"),
    end: Optional[str] = Query(None, description="E01 end date, YYYY-mm-dd"),
) -> SSTResponse:
    """
    Fetch an SST dataset.

    Args:
        name: Dataset name, 'bbh' or 'e01'
        form: Granularity
        begin: Start date for E01
        end: End date for E01

    Returns:
        Provenance and rows of the table
    """
    try:
        table = service.fetch_sst(name, form=form, begin=begin, end=end)
    except (UnknownDataset, NotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamFetchError as e:
        logger.error(f"Upstream error: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail=str(e))
    except (InvalidDateFormat, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SSTResponse(
        provenance=ProvenanceResponse(**table.provenance.to_dict()),
        form=table.form.value,
        count=len(table),
        records=table.to_records(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
