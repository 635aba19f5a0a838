"""
CIK and accession-number normalization.

The registry keys every lookup on a 10-digit zero-padded CIK, while the
public archive paths use the unpadded number and dash-free accession numbers.
"""

import re

from .base import ValidationError

CIK_WIDTH = 10

_DIGITS = re.compile(r"^[0-9]+$")


def is_numeric_identifier(value: str) -> bool:
    """True when `value` (ignoring surrounding whitespace) is all ASCII digits."""
    return bool(value) and bool(_DIGITS.match(value.strip()))


def normalize_cik(value: str) -> str:
    """
    Canonical form of a company identifier.

    Numeric input is left-padded with zeros to 10 digits ("320193" ->
    "0000320193"). Anything else is a ticker or name and is returned
    stripped, unchanged.

    Raises:
        ValidationError: empty input, or a number wider than 10 digits
    """
    if value is None or not str(value).strip():
        raise ValidationError("Company identifier is required")

    value = str(value).strip()
    if not _DIGITS.match(value):
        return value
    if len(value) > CIK_WIDTH:
        raise ValidationError(f"CIK '{value}' is longer than {CIK_WIDTH} digits")
    return value.zfill(CIK_WIDTH)


def to_url_form(cik: str) -> str:
    """Unpadded CIK as used in archive URLs ("0000320193" -> "320193")."""
    cik = str(cik).strip()
    if not _DIGITS.match(cik):
        raise ValidationError(f"CIK '{cik}' is not numeric")
    return cik.lstrip("0") or "0"


def strip_accession(accession_number: str) -> str:
    """Directory form of an accession number ("0000320193-23-000106" -> "000032019323000106")."""
    return accession_number.strip().replace("-", "")
