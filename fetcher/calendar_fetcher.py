"""HTTP fetcher for remote iCalendar documents."""
import logging
import time
from urllib.parse import urlparse

import requests

from processor.errors import FetchError

logger = logging.getLogger(__name__)


class CalendarFetcher:
    """Downloads calendar documents over HTTP."""

    ALLOWED_SCHEMES = ('http', 'https')
    USER_AGENT = 'calconv/1.0'

    def __init__(self, timeout: int = 30, max_retries: int = 3, base_delay: float = 1):
        """
        Initialize the calendar fetcher.

        Args:
            timeout: HTTP request timeout in seconds (default: 30)
            max_retries: Number of attempts before giving up (default: 3)
            base_delay: Initial retry delay in seconds, doubled per attempt
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_delay = base_delay

    def fetch(self, url: str) -> str:
        """
        Fetch a calendar document with retry logic.

        Args:
            url: Calendar URL, webcal:// URLs are fetched over https

        Returns:
            Document text

        Raises:
            FetchError: If the URL is unsupported
            requests.RequestException: If all retry attempts fail
        """
        url = self._normalize_url(url)

        for attempt in range(self.max_retries):
            try:
                logger.info(
                    f"Fetching calendar (attempt {attempt + 1}/{self.max_retries})"
                )
                response = requests.get(
                    url,
                    headers={'User-Agent': self.USER_AGENT},
                    timeout=self.timeout
                )
                response.raise_for_status()
                return self._decode(response.content)

            except requests.RequestException as e:
                if attempt < self.max_retries - 1:
                    delay = self.base_delay * (2 ** attempt)
                    logger.warning(
                        f"Request failed (attempt {attempt + 1}/{self.max_retries}): {e}. "
                        f"Retrying in {delay} seconds..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"All {self.max_retries} retry attempts failed. Last error: {e}"
                    )
                    raise

    def _normalize_url(self, url: str) -> str:
        """
        Rewrite webcal:// to https:// and reject other schemes.

        Args:
            url: URL as supplied by the caller

        Returns:
            URL that can be requested
        """
        url = url.strip()
        if url.lower().startswith('webcal://'):
            url = 'https://' + url[len('webcal://'):]

        parsed = urlparse(url)
        if parsed.scheme.lower() not in self.ALLOWED_SCHEMES or not parsed.netloc:
            raise FetchError(f"Unsupported calendar URL: {url}")
        return url

    @staticmethod
    def _decode(content: bytes) -> str:
        try:
            return content.decode('utf-8')
        except UnicodeDecodeError:
            return content.decode('latin-1')
