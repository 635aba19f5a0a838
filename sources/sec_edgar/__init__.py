"""
SEC EDGAR filing lookup.

Resolves a company from a ticker, name or CIK, fetches its submissions
history from data.sec.gov and locates the most recent 10-K filing.
"""
