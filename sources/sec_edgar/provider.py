"""
SEC EDGAR provider.

Ties the directory, resolver, submissions endpoint, extractor and document
locator together. Each lookup makes exactly one submissions request.
https://www.sec.gov/search-filings/edgar-application-programming-interfaces
"""

import logging
from typing import Dict, List, Optional, Tuple

import requests

from utils.session import RequestSession
from models import CompanyRecord, Filing10KResult

from .base import (
    CompanyDirectory,
    MalformedDataError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from .config import EdgarConfig
from .directory import SecTickerDirectory, StaticCompanyDirectory
from .extractor import UNKNOWN_NAME, build_filing_result
from .identifiers import is_numeric_identifier, normalize_cik
from .locator import locate_document
from .resolver import CompanyResolver

logger = logging.getLogger(__name__)


class SecEdgarProvider:
    """Company search, latest-10-K lookup and filing document access."""

    def __init__(
        self,
        config: Optional[EdgarConfig] = None,
        directory: Optional[CompanyDirectory] = None,
        session: Optional[RequestSession] = None,
    ):
        self.config = config or EdgarConfig()
        self.session = session or RequestSession.from_config(self.config)
        self.directory = directory or self._default_directory()
        self.resolver = CompanyResolver(self.directory)
        self.name = "SEC EDGAR"

    def _default_directory(self) -> CompanyDirectory:
        if self.config.directory == "sec":
            return SecTickerDirectory(self.session, url=self.config.tickers_url)
        return StaticCompanyDirectory.from_json(self.config.companies_file)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _get(self, url: str):
        """GET `url`, mapping failures onto the EDGAR error taxonomy."""
        try:
            resp = self.session.get(url)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Could not reach {url}: {e}")
        if not resp:
            raise UpstreamError(resp.status_code, url)
        return resp

    def fetch_submissions(self, cik: str) -> Dict:
        """
        Full submissions record for a company.

        Args:
            cik: any numeric CIK form; padded to 10 digits for the URL

        Raises:
            TransportError, UpstreamError, MalformedDataError
        """
        cik = normalize_cik(cik)
        if not is_numeric_identifier(cik):
            raise ValidationError(f"CIK '{cik}' is not numeric")

        resp = self._get(self.config.submissions_url(cik))
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedDataError(f"Submissions response for CIK {cik} is not JSON: {e}")

    def download_document(self, cik: str, accession_number: str, document: str) -> Tuple[bytes, str]:
        """Raw bytes and content type of a filing document."""
        url = self.get_download_url(cik, accession_number, document)
        logger.info(f"Downloading {url}")
        resp = self._get(url)
        content_type = resp.headers.get("Content-Type") or "text/html"
        return resp.content, content_type

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def search_companies(self, query: str) -> List[CompanyRecord]:
        return list(self.resolver.resolve(query))

    def resolve_company(self, identifier: str) -> CompanyRecord:
        """
        Company for a ticker, name or CIK.

        A numeric identifier is used as the CIK directly, whether or not the
        directory knows it.
        """
        if identifier is None or not identifier.strip():
            raise ValidationError("Company identifier is required")

        if is_numeric_identifier(identifier):
            cik = normalize_cik(identifier)
            # An index not yet downloaded is not fetched just to name the company
            known = self.directory.get_by_cik(cik) if self.directory.is_loaded() else None
            return known or CompanyRecord(cik=cik, name=UNKNOWN_NAME)

        return self.resolver.first(identifier)

    def get_most_recent_10k(self, identifier: str) -> Filing10KResult:
        company = self.resolve_company(identifier)
        logger.info(f"Found company: {company.name} (CIK: {company.cik})")

        submissions = self.fetch_submissions(company.cik)
        return build_filing_result(submissions, company, self.config.form_type)

    def get_download_url(self, cik: str, accession_number: str, document: str) -> str:
        return locate_document(cik, accession_number, document, archive_root=self.config.archive_root)
