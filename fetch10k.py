"""
SEC 10-K Fetcher

Looks up a company on SEC EDGAR and prints the metadata of its most recent
10-K filing.

Usage:
    python fetch10k.py AAPL                  # Lookup by ticker symbol
    python fetch10k.py Apple                 # Lookup by company name
    python fetch10k.py 320193                # Lookup by CIK
    python fetch10k.py search Micro          # List matching companies
    python fetch10k.py --retries 1 MSFT      # Retry once on network errors
"""

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent))

from utils import log
from models import Filing10KResult
from sources.sec_edgar.config import EdgarConfig
from sources.sec_edgar.extractor import format_fact
from sources.sec_edgar.provider import SecEdgarProvider

logger = log.setup_verbose_logging("fetch10k")

MAX_RESULTS = 10

EPILOG = """
examples:
  fetch10k.py AAPL            search by ticker symbol
  fetch10k.py Apple           search by company name
  fetch10k.py 320193          search by CIK number
  fetch10k.py "Microsoft"     quote multi-word names
  fetch10k.py search Apple    list matching companies

Only filing metadata is shown; financial statement figures would require
parsing the filing's XBRL documents.
Data is sourced from SEC EDGAR (https://www.sec.gov/edgar), no API key required.
"""


class TenKFetcher:
    """Console front end over SecEdgarProvider."""

    def __init__(self, provider: SecEdgarProvider):
        self.provider = provider

    def display(self, data: Filing10KResult) -> None:
        company = data.company_info
        log.header(f"COMPANY: {company.name}")
        rows = [("CIK", company.cik)]
        if company.ticker:
            rows.append(("Ticker", company.ticker))
        if company.sic_description:
            rows.append(("Industry", company.sic_description))
        if company.fiscal_year_end:
            rows.append(("Fiscal year end", company.fiscal_year_end))
        log.summary_table("Company", rows)

        filing = data.latest_filing
        if filing:
            rows = [
                ("Filing Date", filing.filing_date),
                ("Form Type", filing.form),
                ("Accession Number", filing.accession_number),
                ("Primary Document", filing.primary_document),
                ("File Size", f"{filing.size / 1024:.1f} KB"),
            ]
            if filing.report_date:
                rows.append(("Report Date", filing.report_date))
            rows.append(("Download URL", self.provider.get_download_url(
                company.cik, filing.accession_number, filing.primary_document,
            )))
            log.summary_table(f"Latest {filing.form} Filing", rows)

        metrics = [(name, format_fact(units)) for name, units in data.financial_data.items()]
        metrics = [(name, fact) for name, fact in metrics if fact]
        if metrics:
            log.summary_table("Financial Data", [
                (name, f"{fact['value']} (FY{fact['year']}, {fact['date']})") for name, fact in metrics
            ])
        else:
            log.info("Only filing metadata is shown; financial figures need XBRL parsing.")

    def search(self, query: str) -> None:
        """Print up to MAX_RESULTS companies matching `query`."""
        log.step(f'Searching for companies matching: "{query}"')
        try:
            companies = self.provider.search_companies(query)
        except Exception as e:
            log.err(f"Error searching for companies: {e}")
            logger.exception("Search failed")
            return

        if not companies:
            log.warn("No companies found matching your search.")
            return

        log.ok(f"Found {len(companies)} companies:")
        for i, company in enumerate(companies[:MAX_RESULTS], 1):
            log.company_line(i, company.name, company.ticker or "N/A", company.cik)
        if len(companies) > MAX_RESULTS:
            print(f"... and {len(companies) - MAX_RESULTS} more results.")

    def fetch(self, identifier: str) -> bool:
        """Look up and print the latest 10-K; on failure suggest similar companies."""
        log.step(f"Fetching 10-K data for: {identifier}")
        try:
            data = self.provider.get_most_recent_10k(identifier)
        except Exception as e:
            log.err(f"Error fetching 10-K data: {e}")
            logger.exception(f"Lookup failed for {identifier}")
            log.info("Trying to find similar companies...")
            self.search(identifier)
            return False

        self.display(data)
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fetch10k.py",
        description="Fetch the most recent 10-K filing for a company from SEC EDGAR",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("terms", nargs="*", help='Company identifier, or "search" followed by a query')
    parser.add_argument("--timeout", type=float, help="Seconds before a request to SEC is abandoned (default: 30)")
    parser.add_argument("--retries", type=int, help="Extra attempts after a network failure (default: 0)")
    parser.add_argument("--user-agent", help="Identifying User-Agent sent to SEC")
    parser.add_argument("--directory", choices=["static", "sec"], help="Company directory to search")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.terms:
        parser.print_help()
        return 0

    config = EdgarConfig.from_env(
        timeout=args.timeout,
        max_retries=args.retries,
        user_agent=args.user_agent,
        directory=args.directory,
    )
    fetcher = TenKFetcher(SecEdgarProvider(config))

    if args.terms[0].lower() == "search":
        if len(args.terms) < 2:
            log.warn("Please provide a search term. Example: fetch10k.py search Apple")
            return 0
        fetcher.search(" ".join(args.terms[1:]))
        return 0

    fetcher.fetch(" ".join(args.terms).strip())
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        log.err(f"Application error: {e}")
        logger.exception("Unhandled error")
        sys.exit(1)
