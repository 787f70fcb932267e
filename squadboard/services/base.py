"""Base HTTP client with JSON caching for the team data service."""

import hashlib
import json
import logging
import os
import threading
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Optional

import requests


logger = logging.getLogger(__name__)


# Default team data service location
API_BASE_URL = os.environ.get("SQUADBOARD_API_URL", "http://localhost:3000/api")

# Default cache directory
CACHE_DIR = Path(__file__).parent.parent.parent / "data" / "cache"


class DataServiceError(Exception):
    """Base exception for team data service errors."""

    pass


class FetchError(DataServiceError):
    """Raised when a request to the data service fails."""

    pass


class ParseError(DataServiceError):
    """Raised when a response cannot be turned into models."""

    pass


class BaseClient:
    """
    JSON client with a time-limited file cache.

    Responses are cached per URL so that repeated dashboard refreshes do not
    hammer the data service. Writes are never cached.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        cache_dir: Optional[Path] = None,
        cache_ttl_minutes: int = 5,
        timeout_seconds: float = 15.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Root URL of the team data service.
            cache_dir: Directory for caching responses.
            cache_ttl_minutes: Cache time-to-live in minutes.
            timeout_seconds: Per-request timeout.
        """
        self.base_url = base_url.rstrip("/")
        self.cache_dir = cache_dir or CACHE_DIR
        self.cache_ttl = timedelta(minutes=cache_ttl_minutes)
        self.timeout_seconds = timeout_seconds

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        # One requests.Session per thread
        self._local = threading.local()

    def _new_session(self) -> requests.Session:
        """Create a session with the client's default headers."""
        session = requests.Session()
        session.headers.update(
            {
                "User-Agent": "SquadBoard/1.0 (club dashboard)",
                "Accept": "application/json",
            }
        )
        return session

    @property
    def _session(self) -> requests.Session:
        """Session for connection reuse within the calling thread."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._new_session()
            self._local.session = session
        return session

    def url(self, path: str) -> str:
        """Absolute URL for a path relative to the service root."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _cache_key(self, url: str) -> str:
        """Generate a cache key from URL."""
        return hashlib.md5(url.encode()).hexdigest()

    def _cache_path(self, url: str) -> Path:
        """Get the cache file path for a URL."""
        return self.cache_dir / f"{self._cache_key(url)}.json"

    def _read_cache(self, url: str) -> Optional[Any]:
        """
        Read cached data if still fresh.

        Args:
            url: The URL to look up in cache.

        Returns:
            Cached data if valid, None otherwise.
        """
        cache_path = self._cache_path(url)
        if not cache_path.exists():
            return None

        try:
            with open(cache_path, "r") as f:
                entry = json.load(f)

            timestamp = datetime.fromisoformat(entry["timestamp"])
            if datetime.now() - timestamp < self.cache_ttl:
                return entry["data"]
        except (json.JSONDecodeError, KeyError, ValueError):
            logger.warning("Discarding corrupt cache entry %s", cache_path.name)
            cache_path.unlink(missing_ok=True)

        return None

    def _write_cache(self, url: str, data: Any) -> None:
        """
        Write data to cache.

        Args:
            url: The URL being cached.
            data: JSON-serialisable data.
        """
        entry = {
            "url": url,
            "timestamp": datetime.now().isoformat(),
            "data": data,
        }
        with open(self._cache_path(url), "w") as f:
            json.dump(entry, f)

    def get_json(self, path: str, params: Optional[dict] = None, use_cache: bool = True) -> Any:
        """
        GET a JSON document from the service.

        Args:
            path: Path relative to the service root.
            params: Query parameters.
            use_cache: Whether to use cached data if available.

        Returns:
            Decoded JSON.

        Raises:
            FetchError: If the request fails.
            ParseError: If the body is not JSON.
        """
        url = self.url(path)
        cache_key = requests.Request("GET", url, params=params).prepare().url

        if use_cache:
            cached = self._read_cache(cache_key)
            if cached is not None:
                logger.debug("Cache hit for %s", cache_key)
                return cached

        response = self._send("GET", url, params=params)
        try:
            data = response.json()
        except ValueError:
            raise ParseError(f"Response is not JSON: {cache_key}")

        if use_cache:
            self._write_cache(cache_key, data)
        return data

    def post_json(self, path: str, payload: dict) -> Any:
        """
        POST a JSON document to the service.

        Args:
            path: Path relative to the service root.
            payload: Body to send.

        Returns:
            Decoded JSON response, or None for an empty body.

        Raises:
            FetchError: If the request fails.
        """
        response = self._send("POST", self.url(path), json=payload)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send a request and translate transport errors."""
        try:
            response = self._session.request(method, url, timeout=self.timeout_seconds, **kwargs)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise FetchError(f"Request timed out: {url}")
        except requests.exceptions.HTTPError as e:
            raise FetchError(f"HTTP error {e.response.status_code}: {url}")
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request failed: {url} - {e}")
        return response

    def clear_cache(self) -> int:
        """
        Clear all cached responses.

        Returns:
            Number of cache entries cleared.
        """
        count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            try:
                with open(cache_file, "r") as f:
                    entry = json.load(f)
                if not all(k in entry for k in ("url", "timestamp", "data")):
                    continue
            except (json.JSONDecodeError, IOError):
                continue
            cache_file.unlink()
            count += 1
        return count
