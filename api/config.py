"""
Configuration management for the SEC 10-K API server.
"""

import os
from typing import List

from sources.sec_edgar.config import EdgarConfig


class Settings:
    """API server configuration."""

    # Server
    API_TITLE: str = "SEC 10-K Fetcher API"
    API_DESCRIPTION: str = "Look up a company's most recent 10-K filing on SEC EDGAR"
    API_VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # CORS
    CORS_ORIGINS: List[str] = ["*"]  # Allow all origins (restrict in production)

    # Fallback when the registry omits Content-Type on a document
    DOWNLOAD_CONTENT_TYPE: str = "text/html"

    def edgar(self) -> EdgarConfig:
        """Registry client configuration (SEC_* environment variables)."""
        return EdgarConfig.from_env()


settings = Settings()
