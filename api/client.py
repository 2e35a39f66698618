"""
Store client for the Slack draft webhook

aiohttp-based HTTP client for the Firebase Realtime Database REST API.
Provides session management, JSON helpers and error handling.
"""
import aiohttp
import logging
from typing import Optional, Any

from exceptions import APIException, ConfigurationException

logger = logging.getLogger(f'{__name__}.StoreClient')


class StoreClient:
    """
    Async HTTP client for Firebase REST communication.

    Features:
    - Lazily created session, reused across requests
    - Firebase path to URL mapping (`<base>/<path>.json`)
    - Standardized error handling
    - Debug logging with response truncation
    """

    def __init__(self, base_url: str, timeout: int = 30):
        """
        Initialize store client.

        Args:
            base_url: Firebase database URL
            timeout: Total request timeout in seconds

        Raises:
            ConfigurationException: If the base URL is missing
        """
        if not base_url:
            raise ConfigurationException("FIREBASE_URL must be configured")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

        logger.debug(f"StoreClient initialized with base_url: {self.base_url}")

    @property
    def headers(self) -> dict[str, str]:
        """Get default request headers."""
        return {
            'Content-Type': 'application/json',
            'User-Agent': 'slack-draft-webhook/1.0'
        }

    def _build_url(self, path: str) -> str:
        """
        Build complete store URL from a database path.

        Args:
            path: Slash separated database path (e.g. 'draftData/batters')

        Returns:
            Complete REST URL for the path
        """
        return f"{self.base_url}/{path.strip('/')}.json"

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session exists and is not closed."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
            logger.debug("Created new aiohttp session")

    async def get(self, path: str) -> Any:
        """
        Read the value stored at a path.

        Args:
            path: Database path

        Returns:
            Decoded JSON value, or None when the path holds no data

        Raises:
            APIException: For HTTP errors or network issues
        """
        url = self._build_url(path)

        await self._ensure_session()

        try:
            logger.debug(f"GET: {path}")

            async with self._session.get(url) as response:
                if response.status == 404:
                    logger.warning(f"Resource not found: {url}")
                    return None
                elif response.status in (401, 403):
                    logger.error(f"Access denied for: {url}")
                    raise APIException(f"Access denied - check database rules ({response.status})")
                elif response.status >= 400:
                    error_text = await response.text()
                    logger.error(f"Store error {response.status}: {url} - {error_text}")
                    raise APIException(f"GET request failed with status {response.status}: {error_text}")

                body = await response.text()
                if not body:
                    return None
                data = await response.json(content_type=None)

                data_str = str(data)
                logger.debug(f"Response: {data_str[:1200]}{'...' if len(data_str) > 1200 else ''}")
                return data

        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for {url}: {e}")
            raise APIException(f"Network error: {e}")
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise APIException(f"Invalid JSON response: {e}")

    async def put(self, path: str, data: Any) -> Any:
        """
        Overwrite the value stored at a path.

        Args:
            path: Database path
            data: JSON-serializable value

        Returns:
            Decoded JSON response (Firebase echoes the written value)

        Raises:
            APIException: For HTTP errors or network issues
        """
        url = self._build_url(path)

        await self._ensure_session()

        try:
            logger.debug(f"PUT: {path} data: {data}")

            async with self._session.put(url, json=data) as response:
                if response.status in (401, 403):
                    logger.error(f"Access denied for PUT: {url}")
                    raise APIException(f"Access denied - check database rules ({response.status})")
                elif response.status not in (200, 201, 204):
                    error_text = await response.text()
                    logger.error(f"PUT error {response.status}: {url} - {error_text}")
                    raise APIException(f"PUT request failed with status {response.status}: {error_text}")

                body = await response.text()
                result = await response.json(content_type=None) if body else None
                logger.debug(f"PUT Response: {str(result)[:1200]}{'...' if len(str(result)) > 1200 else ''}")
                return result

        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for PUT {url}: {e}")
            raise APIException(f"Network error: {e}")
        except ValueError as e:
            logger.error(f"Invalid JSON from PUT {url}: {e}")
            raise APIException(f"Invalid JSON response: {e}")

    async def close(self) -> None:
        """Close the HTTP session and clean up resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()

