"""Client for a PostgREST (Supabase REST) backend."""

from typing import Any, Dict, List, Optional

import httpx

from disc_profile.config import get_settings
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)

REST_PATH = "/rest/v1"


class RemoteStoreError(Exception):
    """Raised when the remote backend is unavailable or rejects a request."""


class RemoteStore:
    """Insert and query rows in remote backend tables."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize remote store.

        Args:
            base_url: Backend URL (uses REMOTE_URL if None)
            api_key: Backend API key (uses REMOTE_API_KEY if None)
            timeout: Request timeout in seconds (uses REMOTE_TIMEOUT if None)
        """
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.remote_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.remote_api_key
        self.timeout = timeout if timeout is not None else settings.remote_timeout

    @property
    def enabled(self) -> bool:
        """Whether both URL and API key are configured."""
        return bool(self.base_url and self.api_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _table_url(self, table: str) -> str:
        return f"{self.base_url}{REST_PATH}/{table}"

    def _require_enabled(self) -> None:
        if not self.enabled:
            raise RemoteStoreError("Remote backend is not configured")

    def insert(self, table: str, rows: List[Dict[str, Any]]) -> None:
        """
        Insert rows into a table.

        Args:
            table: Table name
            rows: Rows to insert

        Raises:
            RemoteStoreError: On transport errors or non-success responses
        """
        self._require_enabled()
        headers = {**self._headers(), "Prefer": "return=minimal"}

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self._table_url(table), json=rows, headers=headers)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise RemoteStoreError(f"Insert into '{table}' failed: {e}") from e

        logger.debug(f"Inserted {len(rows)} rows into remote table: {table}")

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch rows from a table.

        Args:
            table: Table name
            filters: Column equality filters
            order: PostgREST order clause, e.g. "created_at.desc"

        Returns:
            List of row dicts

        Raises:
            RemoteStoreError: On transport errors, non-success responses or
                a body that is not a JSON list
        """
        self._require_enabled()
        params: Dict[str, str] = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params["order"] = order

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(self._table_url(table), params=params, headers=self._headers())
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise RemoteStoreError(f"Select from '{table}' failed: {e}") from e
        except ValueError as e:
            raise RemoteStoreError(f"Select from '{table}' returned invalid JSON: {e}") from e

        if data is not None and not isinstance(data, list):
            raise RemoteStoreError(
                f"Select from '{table}' returned {type(data).__name__}, expected a list"
            )

        logger.debug(f"Fetched {len(data or [])} rows from remote table: {table}")
        return data or []
