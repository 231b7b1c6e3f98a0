"""HTTP client for MVG API requests.

Uses the MVG routing API behind https://www.mvg.de/api/fib/v2/.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin

import aiohttp

from mvg_home.domain.errors import MvgApiError

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from mvg_home.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)


def create_session(config: "AppConfig") -> "ClientSession":
    """Create the aiohttp session shared by all MVG API requests of a run.

    Proxies are taken from the usual ``*_proxy`` environment variables.
    """
    return aiohttp.ClientSession(
        headers={"User-Agent": config.user_agent, "Accept": "application/json"},
        timeout=aiohttp.ClientTimeout(total=config.mvg_api_timeout),
        trust_env=True,
    )


class MvgHttpClient:
    """HTTP client for the MVG routing API."""

    def __init__(self, session: "ClientSession", base_url: str) -> None:
        """Initialize with an aiohttp session and the API base URL.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the API, ending with a slash.
        """
        self._session = session
        self._base_url = base_url

    async def _read_json(self, response: "ClientResponse", url: str) -> Any:
        """Return the decoded JSON body of a successful response."""
        if response.status != 200:
            response_text = await response.text()
            logger.error(
                f"MVG API returned status {response.status} for {url}: {response_text[:500]}"
            )
            raise MvgApiError(
                f"MVG API returned status {response.status} for {url}",
                status_code=response.status,
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise MvgApiError(f"Failed to parse response from {url}: {e}") from e

    async def get_json(self, path: str, params: dict[str, str]) -> Any:
        """Send a GET request to an API endpoint and return the decoded JSON body.

        Args:
            path: Endpoint path relative to the base URL.
            params: Query parameters.

        Returns:
            The decoded JSON body.

        Raises:
            MvgApiError: On transport errors, timeouts, non-200 responses, or invalid JSON.
        """
        url = urljoin(self._base_url, path)
        logger.debug(f"GET {url} {params}")
        try:
            async with self._session.get(url, params=params) as response:
                return await self._read_json(response, url)
        except aiohttp.ClientError as e:
            raise MvgApiError(f"Failed to query {url}: {e}") from e
        except asyncio.TimeoutError as e:
            raise MvgApiError(f"Timed out querying {url}") from e
