"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock

from models import CompanyRecord
from sources.sec_edgar.config import EdgarConfig
from sources.sec_edgar.directory import StaticCompanyDirectory
from sources.sec_edgar.provider import SecEdgarProvider


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, json_data=None, content=b"", headers=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data or {}
        resp.content = content
        resp.headers = headers or {}
        # truthy when status_code is 2xx
        resp.__bool__ = lambda self: 200 <= self.status_code < 300
        return resp
    return _make


@pytest.fixture
def directory():
    """The bundled ten-company directory."""
    return StaticCompanyDirectory.default()


@pytest.fixture
def small_directory():
    return StaticCompanyDirectory([
        CompanyRecord(cik="0000320193", ticker="AAPL", name="Apple Inc."),
        CompanyRecord(cik="0000789019", ticker="MSFT", name="Microsoft Corporation"),
        CompanyRecord(cik="0000002488", ticker="AMD", name="Advanced Micro Devices"),
    ])


@pytest.fixture
def session():
    """Stand-in for RequestSession; set .get.return_value per test."""
    return MagicMock()


@pytest.fixture
def provider(session, directory):
    """SecEdgarProvider over the bundled directory and a mocked session."""
    return SecEdgarProvider(EdgarConfig(), directory=directory, session=session)


@pytest.fixture
def sample_recent():
    """Factory for a `filings.recent` block; overrides replace whole columns."""
    def _make(**overrides):
        recent = {
            "accessionNumber": [
                "0000320193-23-000106",
                "0000320193-23-000105",
                "0000320193-22-000108",
                "0000320193-23-000077",
            ],
            "filingDate": ["2023-11-03", "2023-11-02", "2022-10-28", "2023-08-04"],
            "reportDate": ["2023-09-30", "2023-11-01", "2022-09-24", "2023-07-01"],
            "acceptanceDateTime": [
                "2023-11-02T18:08:27.000Z",
                "2023-11-02T16:30:57.000Z",
                "2022-10-27T18:01:14.000Z",
                "2023-08-04T18:03:37.000Z",
            ],
            "form": ["10-K", "8-K", "10-K", "10-Q"],
            "primaryDocument": [
                "aapl-20230930.htm",
                "aapl-20231102.htm",
                "aapl-20220924.htm",
                "aapl-20230701.htm",
            ],
            "primaryDocDescription": ["10-K", "8-K", "10-K", "10-Q"],
            "size": [9578061, 369125, 10332356, 5389478],
        }
        recent.update(overrides)
        return recent
    return _make


@pytest.fixture
def sample_submissions(sample_recent):
    """Factory for a submissions response shaped like data.sec.gov's."""
    def _make(recent=None, **overrides):
        data = {
            "cik": "320193",
            "entityType": "operating",
            "sic": "3571",
            "sicDescription": "Electronic Computers",
            "name": "Apple Inc.",
            "tickers": ["AAPL"],
            "exchanges": ["Nasdaq"],
            "fiscalYearEnd": "0930",
            "stateOfIncorporation": "CA",
            "filings": {
                "recent": sample_recent() if recent is None else recent,
                "files": [],
            },
        }
        data.update(overrides)
        return data
    return _make
