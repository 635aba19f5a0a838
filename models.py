"""
Pydantic data models for the SEC 10-K fetcher.

These models enforce type safety and validation for every entity flowing
from the registry to the API and CLI. Field names are snake_case in Python;
the aliases are the camelCase names SEC uses in its JSON and that the HTTP
API returns.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Dict, List, Optional, Union


FINANCIAL_METRICS = (
    "revenue",
    "netIncome",
    "totalAssets",
    "totalLiabilities",
    "stockholdersEquity",
)


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Core Entities
# ---------------------------------------------------------------------------

class CompanyRecord(_WireModel):
    """
    A filer known to the registry.
    `cik` is always the canonical 10-digit zero-padded form.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    cik: str
    ticker: Optional[str] = None
    name: str
    entity_type: Optional[str] = Field(default=None, alias="entityType")
    sic: Optional[str] = None
    sic_description: Optional[str] = Field(default=None, alias="sicDescription")
    fiscal_year_end: Optional[str] = Field(default=None, alias="fiscalYearEnd")
    state_of_incorporation: Optional[str] = Field(default=None, alias="stateOfIncorporation")
    exchanges: List[str] = Field(default_factory=list)


class FilingRecord(_WireModel):
    """A single filing selected from a SubmissionsHistory."""
    accession_number: str = Field(alias="accessionNumber")
    filing_date: str = Field(alias="filingDate")
    report_date: Optional[str] = Field(default=None, alias="reportDate")
    form: str
    primary_document: str = Field(alias="primaryDocument")
    size: int = 0
    primary_doc_description: Optional[str] = Field(default=None, alias="primaryDocDescription")

    @field_validator("report_date", "primary_doc_description", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if v == "":
            return None
        return v


class SubmissionsHistory(_WireModel):
    """
    Column-oriented filing history (the `filings.recent` block of a
    submissions response). Index i of every column describes the same filing.
    """
    form: List[str]
    filing_date: List[str] = Field(alias="filingDate")
    accession_number: List[str] = Field(alias="accessionNumber")
    primary_document: List[str] = Field(alias="primaryDocument")
    report_date: List[Optional[str]] = Field(default_factory=list, alias="reportDate")
    size: List[int] = Field(default_factory=list)
    acceptance_date_time: List[Optional[str]] = Field(default_factory=list, alias="acceptanceDateTime")
    primary_doc_description: List[Optional[str]] = Field(default_factory=list, alias="primaryDocDescription")

    @model_validator(mode="after")
    def _columns_aligned(self):
        n = len(self.form)
        required = {
            "filingDate": self.filing_date,
            "accessionNumber": self.accession_number,
            "primaryDocument": self.primary_document,
        }
        optional = {
            "reportDate": self.report_date,
            "size": self.size,
            "acceptanceDateTime": self.acceptance_date_time,
            "primaryDocDescription": self.primary_doc_description,
        }
        for name, column in required.items():
            if len(column) != n:
                raise ValueError(f"column '{name}' has {len(column)} entries, expected {n}")
        for name, column in optional.items():
            if column and len(column) != n:
                raise ValueError(f"column '{name}' has {len(column)} entries, expected {n}")
        return self

    def __len__(self) -> int:
        return len(self.form)

    def filing_at(self, i: int) -> FilingRecord:
        """Assemble the FilingRecord for index i."""
        return FilingRecord(
            accession_number=self.accession_number[i],
            filing_date=self.filing_date[i],
            report_date=self.report_date[i] if self.report_date else None,
            form=self.form[i],
            primary_document=self.primary_document[i],
            size=self.size[i] if self.size else 0,
            primary_doc_description=self.primary_doc_description[i] if self.primary_doc_description else None,
        )


class FactUnit(_WireModel):
    """One XBRL fact observation (companyfacts `units` entry)."""
    end: str
    val: Union[float, str]
    accn: str
    fy: int
    fp: str
    form: str
    filed: str
    frame: Optional[str] = None


def empty_financial_data() -> Dict[str, List[FactUnit]]:
    return {metric: [] for metric in FINANCIAL_METRICS}


class Filing10KResult(_WireModel):
    """Result of a 10-K lookup. `financial_data` is reserved and left empty."""
    company_info: CompanyRecord = Field(alias="companyInfo")
    latest_filing: Optional[FilingRecord] = Field(default=None, alias="latestFiling")
    financial_data: Dict[str, List[FactUnit]] = Field(default_factory=empty_financial_data, alias="financialData")
