"""
Sunrise/sunset pages of the Royal Observatory of Belgium.
"""

import logging
from typing import Optional

from ..core import constants
from .client import HTTPClient


class SunPageClient(HTTPClient):
    """Fetch the yearly sunrise/sunset page."""

    def __init__(
        self,
        url_template: str = constants.SUN_URL_TEMPLATE,
        timeout: int = constants.HTTP_TIMEOUT,
        max_retries: int = constants.HTTP_MAX_RETRIES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize page client.

        Args:
            url_template: Page URL with a {year} placeholder
            timeout: Request timeout in seconds
            max_retries: Number of retry attempts
            logger: Logger instance
        """
        super().__init__(timeout=timeout, max_retries=max_retries, logger=logger)
        self.url_template = url_template

    def url_for_year(self, year: int) -> str:
        return self.url_template.format(year=year)

    def fetch_year(self, year: int) -> str:
        """
        Fetch the page for one year.

        Raises:
            TransportError: On network failure or a non-2xx response
        """
        return self.get_text(self.url_for_year(year))
