"""
Filing extraction from a submissions response.

SEC lists `filings.recent` newest first, but nothing in the API contract
guarantees it, so the latest filing is chosen by an explicit sort on
filing date rather than by position.
"""

import datetime
import logging
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from models import (
    CompanyRecord,
    FactUnit,
    Filing10KResult,
    FilingRecord,
    SubmissionsHistory,
    empty_financial_data,
)

from .base import MalformedDataError, NotFoundError
from .identifiers import normalize_cik

logger = logging.getLogger(__name__)

TARGET_FORM = "10-K"
UNKNOWN_NAME = "Unknown"


def parse_history(submissions: Dict) -> SubmissionsHistory:
    """
    Pull the `filings.recent` columns out of a submissions response.

    Raises:
        MalformedDataError: block absent, a required column missing, or
            columns of different lengths
    """
    if not isinstance(submissions, dict):
        raise MalformedDataError("Submissions response is not an object")

    recent = (submissions.get("filings") or {}).get("recent")
    if not recent:
        raise MalformedDataError("No filings data found")

    try:
        return SubmissionsHistory.model_validate(recent)
    except PydanticValidationError as e:
        raise MalformedDataError(f"Malformed filings data: {e}")


def _filing_day(history: SubmissionsHistory, i: int) -> datetime.date:
    raw = history.filing_date[i]
    try:
        return datetime.date.fromisoformat(raw)
    except (TypeError, ValueError):
        raise MalformedDataError(f"Bad filing date '{raw}' at index {i}")


def extract_latest_filing(history: SubmissionsHistory, form_type: str = TARGET_FORM) -> FilingRecord:
    """
    Most recent filing whose form equals `form_type` exactly.

    Candidates are ordered by filing date, newest first. The sort is
    stable, so filings sharing a date keep registry order and the first
    listed wins.

    Raises:
        NotFoundError: history empty or no filing of that form
        MalformedDataError: a candidate's filing date is not YYYY-MM-DD
    """
    if history is None:
        raise MalformedDataError("No filings data found")

    candidates = [i for i, form in enumerate(history.form) if form == form_type]
    if not candidates:
        raise NotFoundError(f"No {form_type} filings found")

    candidates.sort(key=lambda i: _filing_day(history, i), reverse=True)
    if candidates[0] != min(candidates):
        logger.warning(
            f"Registry order is not newest-first: picked index {candidates[0]} "
            f"over first-listed {form_type} at index {min(candidates)}"
        )
    return history.filing_at(candidates[0])


def company_from_submissions(submissions: Dict, known: Optional[CompanyRecord] = None) -> CompanyRecord:
    """
    Merge the registry's company header with what the directory already knows.

    Directory values win over the registry's, except the placeholder name
    used for bare-CIK lookups.
    """
    tickers = submissions.get("tickers") or []
    registry = {
        "cik": normalize_cik(str(submissions.get("cik", ""))) if submissions.get("cik") else None,
        "ticker": tickers[0] if tickers else None,
        "name": submissions.get("name"),
        "entity_type": submissions.get("entityType") or None,
        "sic": submissions.get("sic") or None,
        "sic_description": submissions.get("sicDescription") or None,
        "fiscal_year_end": submissions.get("fiscalYearEnd") or None,
        "state_of_incorporation": submissions.get("stateOfIncorporation") or None,
        "exchanges": [e for e in (submissions.get("exchanges") or []) if e],
    }

    merged = {k: v for k, v in registry.items() if v}
    if known is not None:
        for key, value in known.model_dump().items():
            if key == "name" and value == UNKNOWN_NAME and merged.get("name"):
                continue
            if value:
                merged[key] = value

    if not merged.get("cik"):
        raise MalformedDataError("Submissions response has no CIK")
    merged.setdefault("name", UNKNOWN_NAME)
    return CompanyRecord(**merged)


def build_filing_result(
    submissions: Dict,
    company: Optional[CompanyRecord] = None,
    form_type: str = TARGET_FORM,
) -> Filing10KResult:
    """Company header + latest `form_type` filing + empty financial-data placeholder."""
    history = parse_history(submissions)
    filing = extract_latest_filing(history, form_type)
    logger.debug(f"Latest {form_type}: {filing.accession_number} filed {filing.filing_date}")

    return Filing10KResult(
        company_info=company_from_submissions(submissions, company),
        latest_filing=filing,
        financial_data=empty_financial_data(),
    )


def format_fact(units: List[FactUnit]) -> Optional[Dict]:
    """
    Display form of the most recent fact in `units`.

    Numeric values are shown in millions ("383285.00M"); other values as-is.
    Returns None for an empty list.
    """
    if not units:
        return None

    latest = max(units, key=lambda u: u.end)
    if isinstance(latest.val, (int, float)):
        value = f"{latest.val / 1_000_000:.2f}M"
    else:
        value = str(latest.val)

    return {"value": value, "year": latest.fy, "date": latest.end}
