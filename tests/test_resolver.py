"""Tests for company directories and CompanyResolver."""

import json
import threading
import time
import types

import pytest
import requests

from sources.sec_edgar.base import (
    MalformedDataError,
    NotFoundError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from sources.sec_edgar.config import EdgarConfig
from sources.sec_edgar.directory import SecTickerDirectory, StaticCompanyDirectory
from sources.sec_edgar.resolver import CompanyResolver


# ---------------------------------------------------------------------------
# StaticCompanyDirectory
# ---------------------------------------------------------------------------

class TestStaticCompanyDirectory:
    def test_bundled_table(self, directory):
        assert len(directory) == 10
        first = next(directory.companies())
        assert first.ticker == "AAPL"
        assert first.cik == "0000320193"

    def test_from_json_pads_cik(self, tmp_path):
        path = tmp_path / "companies.json"
        path.write_text(json.dumps([{"cik": "51143", "ticker": "IBM", "name": "IBM"}]))
        d = StaticCompanyDirectory.from_json(path)
        assert d.get_by_cik("0000051143").ticker == "IBM"

    def test_get_by_cik_missing(self, directory):
        assert directory.get_by_cik("0000000001") is None


# ---------------------------------------------------------------------------
# SecTickerDirectory
# ---------------------------------------------------------------------------

class TestSecTickerDirectory:
    def test_parses_index(self, session, mock_response):
        session.get.return_value = mock_response(json_data={
            "0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."},
            "1": {"cik_str": 789019, "ticker": "MSFT", "title": "MICROSOFT CORP"},
            "2": {"cik_str": "bad", "ticker": "X", "title": "skipped"},
        })
        d = SecTickerDirectory(session)
        records = list(d.companies())
        assert [r.cik for r in records] == ["0000320193", "0000789019"]
        assert records[1].name == "MICROSOFT CORP"

    def test_downloads_once(self, session, mock_response):
        session.get.return_value = mock_response(json_data={
            "0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."},
        })
        d = SecTickerDirectory(session)
        list(d.companies())
        list(d.companies())
        assert session.get.call_count == 1

    def test_concurrent_first_use_downloads_once(self, session, mock_response):
        resp = mock_response(json_data={"0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."}})

        def slow_get(url, **kwargs):
            time.sleep(0.05)
            return resp

        session.get.side_effect = slow_get
        d = SecTickerDirectory(session)
        threads = [threading.Thread(target=lambda: list(d.companies())) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert session.get.call_count == 1
        assert d.is_loaded()

    def test_not_loaded_until_used(self, session):
        d = SecTickerDirectory(session)
        assert not d.is_loaded()
        session.get.assert_not_called()

    def test_default_url_from_config(self, session):
        assert SecTickerDirectory(session).url == EdgarConfig().tickers_url

    def test_http_error(self, session, mock_response):
        session.get.return_value = mock_response(status_code=403)
        with pytest.raises(UpstreamError) as exc:
            list(SecTickerDirectory(session).companies())
        assert exc.value.status_code == 403

    def test_no_response(self, session):
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError):
            list(SecTickerDirectory(session).companies())

    def test_unexpected_shape(self, session, mock_response):
        resp = mock_response()
        resp.json.return_value = ["not", "a", "dict"]
        session.get.return_value = resp
        with pytest.raises(MalformedDataError):
            list(SecTickerDirectory(session).companies())


# ---------------------------------------------------------------------------
# CompanyResolver
# ---------------------------------------------------------------------------

class TestResolve:
    def test_name_case_insensitive(self, directory):
        results = list(CompanyResolver(directory).resolve("apple"))
        assert [c.ticker for c in results] == ["AAPL"]

    def test_ticker_substring(self, directory):
        results = list(CompanyResolver(directory).resolve("msf"))
        assert results[0].name == "Microsoft Corporation"

    def test_no_match_is_empty(self, directory):
        assert list(CompanyResolver(directory).resolve("zzzz")) == []

    def test_cik_unpadded(self, directory):
        results = list(CompanyResolver(directory).resolve("320193"))
        assert [c.ticker for c in results] == ["AAPL"]

    def test_cik_padded(self, directory):
        results = list(CompanyResolver(directory).resolve("0000789019"))
        assert [c.ticker for c in results] == ["MSFT"]

    def test_directory_order(self, small_directory):
        # MSFT and AMD both match "m"; no relevance ranking
        results = list(CompanyResolver(small_directory).resolve("m"))
        assert [c.ticker for c in results] == ["MSFT", "AMD"]

    def test_order_preserved(self, small_directory):
        results = list(CompanyResolver(small_directory).resolve("i"))
        assert [c.ticker for c in results] == ["AAPL", "MSFT", "AMD"]

    def test_lazy_generator(self, small_directory):
        result = CompanyResolver(small_directory).resolve("a")
        assert isinstance(result, types.GeneratorType)
        assert next(result).ticker == "AAPL"

    def test_not_restartable(self, small_directory):
        result = CompanyResolver(small_directory).resolve("aapl")
        assert len(list(result)) == 1
        assert list(result) == []

    def test_fresh_per_call(self, small_directory):
        resolver = CompanyResolver(small_directory)
        assert list(resolver.resolve("aapl")) == list(resolver.resolve("aapl"))

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_raises_eagerly(self, small_directory, query):
        with pytest.raises(ValidationError):
            CompanyResolver(small_directory).resolve(query)

    def test_wide_number_is_no_match(self, small_directory):
        assert list(CompanyResolver(small_directory).resolve("12345678901")) == []


class TestFirst:
    def test_first_match(self, directory):
        assert CompanyResolver(directory).first("NVDA").name == "NVIDIA Corporation"

    def test_none_raises(self, directory):
        with pytest.raises(NotFoundError, match="No company found"):
            CompanyResolver(directory).first("zzzz")
