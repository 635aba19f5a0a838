"""
Configuration for the SEC EDGAR client.

One EdgarConfig is built at startup (from the environment or CLI flags) and
passed to every component that talks to the registry.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

BASE_DIR = Path(__file__).parent.parent.parent

DEFAULT_USER_AGENT = "SEC-10K-Fetcher/1.0.0 (contact@company.com)"

DATA_ROOT = "https://data.sec.gov"
ARCHIVE_ROOT = "https://www.sec.gov/Archives/edgar/data"
TICKERS_URL = "https://www.sec.gov/files/company_tickers.json"


class EdgarConfig(BaseModel):
    """Registry endpoints, request identity and network policy."""

    # SEC rejects requests without an identifying User-Agent
    user_agent: str = DEFAULT_USER_AGENT

    # Endpoints
    data_root: str = DATA_ROOT
    archive_root: str = ARCHIVE_ROOT
    tickers_url: str = TICKERS_URL

    # Network policy (0 retries = one attempt)
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=0, ge=0)
    retry_backoff: float = Field(default=1.0, ge=0)

    form_type: str = "10-K"

    # "static" = config/companies.json, "sec" = registry ticker index
    directory: str = Field(default="static", pattern="^(static|sec)$")
    companies_file: str = str(BASE_DIR / "config" / "companies.json")

    def submissions_url(self, cik: str) -> str:
        return f"{self.data_root}/submissions/CIK{cik}.json"

    @classmethod
    def from_env(cls, **overrides) -> "EdgarConfig":
        """Read SEC_* variables (and .env at the repo root); keyword args win."""
        load_dotenv(BASE_DIR / ".env")
        values = {}
        env_map = {
            "user_agent": "SEC_USER_AGENT",
            "timeout": "SEC_TIMEOUT",
            "max_retries": "SEC_MAX_RETRIES",
            "retry_backoff": "SEC_RETRY_BACKOFF",
            "directory": "SEC_DIRECTORY",
            "companies_file": "SEC_COMPANIES_FILE",
        }
        for field, var in env_map.items():
            if os.getenv(var):
                values[field] = os.getenv(var)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
