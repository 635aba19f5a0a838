"""
FastAPI application for the SEC 10-K Fetcher.

Company search, latest 10-K lookup and filing document download, with
auto-generated OpenAPI documentation at /docs.
"""

from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from models import Filing10KResult
from sources.sec_edgar.base import NotFoundError, ValidationError
from sources.sec_edgar.provider import SecEdgarProvider

from .config import settings
from .models import DownloadUrlResponse, ErrorResponse, HealthResponse, SearchResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize SEC provider
try:
    edgar = SecEdgarProvider(settings.edgar())
    logger.info(f"SEC client ready ({edgar.directory.name}, User-Agent: {edgar.config.user_agent})")
except Exception as e:
    logger.error(f"Failed to initialize SEC client: {e}")
    raise


def get_provider() -> SecEdgarProvider:
    return edgar


ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _fail(e: Exception, what: str) -> HTTPException:
    """Map a lookup exception to an HTTP error, logging it."""
    if isinstance(e, ValidationError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, NotFoundError):
        logger.info(f"{what}: {e}")
        return HTTPException(status_code=404, detail=str(e))
    logger.error(f"{what}: {e}")
    return HTTPException(status_code=500, detail=f"{what}: {e}")


# ----------------------------------------------------------------
# Search & Lookup
# ----------------------------------------------------------------

@app.get("/api/search", response_model=SearchResponse, responses=ERRORS, tags=["Companies"])
def search_companies(q: Optional[str] = None, provider: SecEdgarProvider = Depends(get_provider)):
    """
    Search companies by ticker, name or CIK.

    - **q**: case-insensitive ticker/name substring, or a CIK
    """
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail='Query parameter "q" is required')
    try:
        return {"companies": provider.search_companies(q)}
    except Exception as e:
        raise _fail(e, "Failed to search companies")


@app.get("/api/company/{identifier}/10k", response_model=Filing10KResult, responses=ERRORS, tags=["Filings"])
def get_latest_10k(identifier: str, provider: SecEdgarProvider = Depends(get_provider)):
    """
    Most recent 10-K filing for a company.

    Args:
        identifier: ticker (AAPL), company name (Apple) or CIK (320193)
    """
    try:
        return provider.get_most_recent_10k(identifier)
    except Exception as e:
        raise _fail(e, "Failed to fetch 10-K data")


# ----------------------------------------------------------------
# Documents
# ----------------------------------------------------------------

@app.get("/api/download/{cik}/{accession_number}/{primary_document}", responses=ERRORS, tags=["Documents"])
def download_document(
    cik: str,
    accession_number: str,
    primary_document: str,
    provider: SecEdgarProvider = Depends(get_provider),
):
    """Proxy a filing document from the EDGAR archive as an attachment."""
    try:
        content, content_type = provider.download_document(cik, accession_number, primary_document)
    except Exception as e:
        raise _fail(e, "Failed to download document")

    return Response(
        content=content,
        media_type=content_type or settings.DOWNLOAD_CONTENT_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{primary_document}"'},
    )


@app.get(
    "/api/download-url/{cik}/{accession_number}/{primary_document}",
    response_model=DownloadUrlResponse,
    responses=ERRORS,
    tags=["Documents"],
)
def get_download_url(
    cik: str,
    accession_number: str,
    primary_document: str,
    provider: SecEdgarProvider = Depends(get_provider),
):
    """Archive URL of a filing document, without fetching it."""
    try:
        return DownloadUrlResponse(download_url=provider.get_download_url(cik, accession_number, primary_document))
    except Exception as e:
        raise _fail(e, "Failed to generate download URL")


# ----------------------------------------------------------------
# Health
# ----------------------------------------------------------------

@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


# ----------------------------------------------------------------
# Cleanup
# ----------------------------------------------------------------

@app.on_event("shutdown")
def shutdown_event():
    """Close the HTTP session on shutdown."""
    edgar.session.close()
    logger.info("SEC session closed")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
