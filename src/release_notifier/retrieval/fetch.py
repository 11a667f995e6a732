"""Async HTTP page loading for the scrape extractor.

No retries here: a failed page load aborts the run.
"""

import httpx
from ..log import get_logger

logger = get_logger("fetch")

class PageLoader:
    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout
        self.headers = {
            "User-Agent": "ReleaseNotifier/1.0 (release notes digest)"
        }

    async def load(self, url: str) -> str:
        """
        Fetches the HTML of a URL.
        Raises httpx.HTTPError on network failure or non-2xx status.
        """
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True, headers=self.headers) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            logger.debug(f"Loaded {url} ({len(resp.text)} bytes)")
            return resp.text
