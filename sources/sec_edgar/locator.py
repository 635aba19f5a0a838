"""Build archive URLs for filing documents."""

from .base import ValidationError
from .config import ARCHIVE_ROOT
from .identifiers import normalize_cik, strip_accession, to_url_form

# Characters that would break the Content-Disposition header a document is served under
UNSAFE_NAME_CHARS = set('"\\\r\n')


def locate_document(
    cik: str,
    accession_number: str,
    document_name: str,
    archive_root: str = ARCHIVE_ROOT,
) -> str:
    """
    URL of a filing document in the EDGAR archive.

        {archive_root}/{unpadded cik}/{accession without dashes}/{document}

    The document name is only checked for presence and for characters that
    cannot appear in a header filename; it is expected to come from a
    FilingRecord of the same filing.
    """
    if not cik or not accession_number or not document_name:
        raise ValidationError("CIK, accession number, and primary document are required")
    if UNSAFE_NAME_CHARS & set(document_name):
        raise ValidationError(f"Invalid document name: {document_name!r}")

    unpadded = to_url_form(normalize_cik(cik))
    return f"{archive_root.rstrip('/')}/{unpadded}/{strip_accession(accession_number)}/{document_name}"
