"""
Company directories: where ticker/name -> CIK mappings come from.

StaticCompanyDirectory serves the bundled config/companies.json table.
SecTickerDirectory downloads the registry's full company_tickers.json index.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import requests

from models import CompanyRecord

from .base import CompanyDirectory, MalformedDataError, TransportError, UpstreamError
from .config import TICKERS_URL
from .identifiers import normalize_cik

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent.parent
DEFAULT_COMPANIES_FILE = BASE_DIR / "config" / "companies.json"

class StaticCompanyDirectory(CompanyDirectory):
    """Fixed, in-memory list of companies. Order is preserved."""

    def __init__(self, records: Iterable[CompanyRecord]):
        super().__init__()
        self._records = tuple(records)

    @classmethod
    def from_json(cls, path) -> "StaticCompanyDirectory":
        """Load a JSON list of {cik, ticker, name} objects."""
        with open(path, "r") as f:
            raw = json.load(f)
        records = []
        for entry in raw:
            records.append(CompanyRecord(
                cik=normalize_cik(str(entry["cik"])),
                ticker=entry.get("ticker"),
                name=entry["name"],
            ))
        logger.debug(f"Loaded {len(records)} companies from {path}")
        return cls(records)

    @classmethod
    def default(cls) -> "StaticCompanyDirectory":
        return cls.from_json(DEFAULT_COMPANIES_FILE)

    def companies(self) -> Iterator[CompanyRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


class SecTickerDirectory(CompanyDirectory):
    """
    The registry's own ticker index (~10k filers).

    Downloaded once, on first use, and kept for the lifetime of the instance.
    """

    def __init__(self, session, url: str = TICKERS_URL):
        super().__init__()
        self.session = session
        self.url = url
        self._records: Optional[List[CompanyRecord]] = None
        self._lock = threading.Lock()

    def _load(self) -> List[CompanyRecord]:
        logger.info(f"Downloading ticker index: {self.url}")
        try:
            resp = self.session.get(self.url)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Could not reach {self.url}: {e}")
        if not resp:
            raise UpstreamError(resp.status_code, self.url)

        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedDataError(f"Ticker index is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise MalformedDataError("Unexpected JSON format for company_tickers.json")

        records = []
        for entry in data.values():
            if not isinstance(entry, dict):
                continue
            cik = str(entry.get("cik_str", "")).strip()
            if not cik.isdigit():
                continue
            records.append(CompanyRecord(
                cik=normalize_cik(cik),
                ticker=entry.get("ticker") or None,
                name=entry.get("title", ""),
            ))
        logger.debug(f"Ticker index holds {len(records)} companies")
        return records

    def is_loaded(self) -> bool:
        return self._records is not None

    def companies(self) -> Iterator[CompanyRecord]:
        if self._records is None:
            with self._lock:
                if self._records is None:
                    self._records = self._load()
        return iter(self._records)
