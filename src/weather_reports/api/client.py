"""
Base HTTP client.

Handles session management and turns transport failures into typed errors.
"""

import logging
from typing import Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from ..core.errors import TransportError

# Characters of an error response body kept in the error context
BODY_EXCERPT_LENGTH = 500


class HTTPClient:
    """Base client for fetching pages over HTTP."""

    def __init__(
        self,
        timeout: int = constants.HTTP_TIMEOUT,
        max_retries: int = constants.HTTP_MAX_RETRIES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            max_retries: Number of retry attempts (0 disables retrying)
            logger: Logger instance
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Accept": "text/html"
        })

    def get_text(self, url: str) -> str:
        """
        GET a page and return its decoded body.

        Args:
            url: Absolute URL

        Returns:
            Response body as text

        Raises:
            TransportError: On network failure or a non-2xx response
        """
        self.logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"HTTP request failed: GET {url} - {e}")
            raise TransportError("HTTP request failed", {"url": url, "error": str(e)})

        if not 200 <= response.status_code < 300:
            body = response.text
            self.logger.error(
                f"HTTP request returned an error response: GET {url} - "
                f"{response.status_code} - body: {body[:BODY_EXCERPT_LENGTH]}"
            )
            raise TransportError(
                "HTTP request returned an error response",
                {
                    "url": url,
                    "status_code": response.status_code,
                    "body": body[:BODY_EXCERPT_LENGTH],
                }
            )

        return response.text

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
