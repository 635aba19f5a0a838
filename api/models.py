"""
Pydantic models for API responses.
Auto-generates OpenAPI documentation.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from models import CompanyRecord


class SearchResponse(BaseModel):
    """Companies matching a search query, in directory order."""
    companies: List[CompanyRecord]


class DownloadUrlResponse(BaseModel):
    """Archive URL of a filing document."""
    model_config = ConfigDict(populate_by_name=True)

    download_url: str = Field(alias="downloadUrl")


class HealthResponse(BaseModel):
    """Liveness check."""
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str
