"""
Shared HTTP session for SEC endpoints.

Wraps requests.Session with the identifying headers SEC requires, a bounded
timeout on every call and an optional retry budget.
"""

import logging
import time

import requests

logger = logging.getLogger(__name__)

RETRY_STATUSES = {429, 500, 502, 503, 504}


class RequestSession:
    """
    GET-only session.

    get() returns the final Response (falsy when the status is not 2xx/3xx)
    or re-raises the last requests exception when no attempt got an answer.
    """

    def __init__(
        self,
        user_agent: str,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_backoff: float = 1.0,
    ):
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept-Encoding": "gzip, deflate",
        })

    @classmethod
    def from_config(cls, config) -> "RequestSession":
        return cls(
            user_agent=config.user_agent,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_backoff=config.retry_backoff,
        )

    def get(self, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        resp = None
        error = None

        for attempt in range(self.max_retries + 1):
            if attempt:
                delay = self.retry_backoff * attempt
                logger.warning(f"Retrying {url} in {delay:.1f}s (attempt {attempt + 1}/{self.max_retries + 1})")
                time.sleep(delay)

            try:
                logger.debug(f"GET {url}")
                resp = self.session.get(url, **kwargs)
            except requests.exceptions.RequestException as e:
                logger.error(f"Request failed: {url}: {e}")
                error = e
                resp = None
                continue

            if resp.status_code not in RETRY_STATUSES:
                return resp
            logger.warning(f"HTTP {resp.status_code} from {url}")

        if resp is None:
            raise error
        return resp

    def close(self) -> None:
        self.session.close()
