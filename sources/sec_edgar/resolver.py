"""Free-text company lookup against a CompanyDirectory."""

from typing import Iterator

from models import CompanyRecord

from .base import CompanyDirectory, NotFoundError, ValidationError
from .identifiers import CIK_WIDTH, is_numeric_identifier, normalize_cik


class CompanyResolver:
    """
    Matches a query against ticker substring, name substring (both
    case-insensitive) or exact canonical CIK. Results come back in directory
    order, not ranked.
    """

    def __init__(self, directory: CompanyDirectory):
        self.directory = directory

    def resolve(self, query: str) -> Iterator[CompanyRecord]:
        """
        Lazily yield every matching company.

        The returned iterator is computed fresh for each call and can only
        be consumed once. No match is an empty iterator, not an error.

        Raises:
            ValidationError: blank query (raised immediately, not on iteration)
        """
        if query is None or not query.strip():
            raise ValidationError('Query parameter "q" is required')

        needle = query.strip().lower()
        cik = None
        if is_numeric_identifier(query) and len(query.strip()) <= CIK_WIDTH:
            cik = normalize_cik(query)
        return self._matches(needle, cik)

    def _matches(self, needle: str, cik) -> Iterator[CompanyRecord]:
        for company in self.directory.companies():
            if company.ticker and needle in company.ticker.lower():
                yield company
            elif needle in company.name.lower():
                yield company
            elif cik is not None and company.cik == cik:
                yield company

    def first(self, query: str) -> CompanyRecord:
        """First match for `query`; NotFoundError when there is none."""
        for company in self.resolve(query):
            return company
        raise NotFoundError(f"No company found for: {query}")
