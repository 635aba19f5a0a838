"""
Base interfaces and exceptions for the SEC EDGAR source.

A CompanyDirectory is the lookup provider the resolver searches. The static
table bundled in config/ and the registry's own ticker index both implement it.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from models import CompanyRecord


class CompanyDirectory(ABC):
    """Abstract base class for ticker/name -> CIK directories."""

    def __init__(self):
        self.name = self.__class__.__name__

    @abstractmethod
    def companies(self) -> Iterator[CompanyRecord]:
        """
        Iterate every company in directory order.

        Returns:
            Iterator of CompanyRecord (cik already zero-padded to 10 digits)
        """
        pass

    def is_loaded(self) -> bool:
        """False while companies() would still need a network download."""
        return True

    def get_by_cik(self, cik: str) -> Optional[CompanyRecord]:
        """Return the record whose canonical CIK equals `cik`, or None."""
        for company in self.companies():
            if company.cik == cik:
                return company
        return None


class EdgarError(Exception):
    """Base exception for SEC EDGAR lookup errors."""
    pass


class ValidationError(EdgarError):
    """Raised when caller input is missing or malformed."""
    pass


class NotFoundError(EdgarError):
    """Raised when no company or no filing of the requested form exists."""
    pass


class UpstreamError(EdgarError):
    """Raised when the registry answers with a non-success status."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        msg = f"SEC returned HTTP {status_code}"
        if url:
            msg += f" for {url}"
        super().__init__(msg)


class TransportError(EdgarError):
    """Raised when the registry could not be reached (connection, timeout)."""
    pass


class MalformedDataError(EdgarError):
    """Raised when an upstream response lacks the expected structure."""
    pass
