"""
REST API for SEC 10-K lookups.

Exposes company search, latest-10-K metadata and filing document
download over HTTP.
"""

__version__ = "1.0.0"
