"""
Xtream-Codes panel API client.

Thin glue over ``player_api.php``: each method fetches one action and
decodes the body with the models in ``xtream_data.models``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import Settings, get_settings
from .http import AuthenticationError, BaseApiClient, ExternalAPIError, ResponseDecodeError
from .logging_config import configure_logging
from .models import (
    AuthenticationResponse,
    Category,
    EPGContainer,
    EPGInfo,
    SeriesInfo,
    Stream,
    VideoOnDemandInfo,
)

logger = logging.getLogger(__name__)

CategoryKind = Literal["live", "vod", "series"]
StreamKind = Literal["live", "vod"]

_CATEGORY_ACTIONS: dict[str, str] = {
    "live": "get_live_categories",
    "vod": "get_vod_categories",
    "series": "get_series_categories",
}

_STREAM_ACTIONS: dict[str, str] = {
    "live": "get_live_streams",
    "vod": "get_vod_streams",
}

# URL path segment per stream kind
_STREAM_PATHS: dict[str, str] = {
    "live": "live",
    "vod": "movie",
    "series": "series",
}

T = TypeVar("T")


class XtreamClient(BaseApiClient):
    """Xtream-Codes API client."""

    API_PATH = "/player_api.php"

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        user_agent: str = "xtream-data/0.1.0",
        requests_per_minute: int = 600,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            base_url=base_url,
            headers={"User-Agent": user_agent},
            params={"username": username, "password": password},
            requests_per_minute=requests_per_minute,
            timeout=timeout,
            max_retries=max_retries,
            transport=transport,
        )
        self.username = username
        self.password = password

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> XtreamClient:
        """Build a client from environment configuration and apply its log level."""
        settings = settings or get_settings()
        configure_logging(settings.log_level)
        if not settings.base_url or not settings.username or not settings.password:
            raise ValueError("XTREAM_BASE_URL, XTREAM_USERNAME and XTREAM_PASSWORD must be set")
        return cls(
            settings.base_url,
            settings.username,
            settings.password,
            user_agent=settings.user_agent,
            requests_per_minute=settings.requests_per_minute,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            transport=transport,
        )

    # =========================================================================
    # Decoding
    # =========================================================================

    @staticmethod
    def _decode(adapter: TypeAdapter[T] | type[BaseModel], payload: Any, action: str) -> Any:
        """Validate a payload, aborting the whole record on any bad field."""
        try:
            if isinstance(adapter, TypeAdapter):
                return adapter.validate_python(payload)
            return adapter.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Failed to decode {action} response: {e.error_count()} error(s)")
            raise ResponseDecodeError(f"Invalid {action} payload: {e}", cause=e) from e

    async def _action(self, action: str | None, **params: Any) -> Any:
        query = {k: v for k, v in params.items() if v is not None}
        if action:
            query["action"] = action
        return await self._get(self.API_PATH, query)

    # =========================================================================
    # Authentication
    # =========================================================================

    async def authenticate(self) -> AuthenticationResponse:
        """Fetch server and user info; raises if the panel rejects the login."""
        try:
            payload = await self._action(None)
        except ExternalAPIError as e:
            if e.status_code in (401, 403):
                raise AuthenticationError(f"Panel refused login: {e.message}") from e
            raise
        if isinstance(payload, dict) and "server_info" not in payload:
            # Rejected logins come back as {"user_info": {"auth": 0}}
            payload = {"server_info": {}, **payload}
        response = self._decode(AuthenticationResponse, payload, "authenticate")
        if not response.user_info.auth:
            raise AuthenticationError()
        return response

    # =========================================================================
    # Catalog
    # =========================================================================

    async def get_categories(self, kind: CategoryKind) -> list[Category]:
        """Get live, VOD or series categories, tagged with their kind."""
        action = _CATEGORY_ACTIONS[kind]
        payload = await self._action(action)
        categories = self._decode(_CATEGORY_LIST, payload or [], action)
        for category in categories:
            category.type = kind
        return categories

    async def get_streams(
        self, kind: StreamKind, category_id: Optional[int] = None
    ) -> list[Stream]:
        """Get live or VOD streams, optionally within one category."""
        action = _STREAM_ACTIONS[kind]
        payload = await self._action(action, category_id=category_id)
        return self._decode(_STREAM_LIST, payload or [], action)

    async def get_series(self, category_id: Optional[int] = None) -> list[SeriesInfo]:
        """Get series listings, optionally within one category."""
        payload = await self._action("get_series", category_id=category_id)
        return self._decode(_SERIES_LIST, payload or [], "get_series")

    async def get_vod_info(self, vod_id: int) -> VideoOnDemandInfo:
        """Get detailed information about a VOD item."""
        payload = await self._action("get_vod_info", vod_id=vod_id)
        return self._decode(VideoOnDemandInfo, payload, "get_vod_info")

    # =========================================================================
    # EPG
    # =========================================================================

    async def get_short_epg(
        self, stream_id: int, limit: Optional[int] = None
    ) -> list[EPGInfo]:
        """Get the next EPG entries of a live stream."""
        payload = await self._action("get_short_epg", stream_id=stream_id, limit=limit)
        container = self._decode(EPGContainer, payload, "get_short_epg")
        return container.epg_listings

    async def get_epg(self, stream_id: int) -> list[EPGInfo]:
        """Get the full EPG of a live stream."""
        payload = await self._action("get_simple_data_table", stream_id=stream_id)
        container = self._decode(EPGContainer, payload, "get_simple_data_table")
        return container.epg_listings

    # =========================================================================
    # Playback
    # =========================================================================

    def stream_url(self, stream_id: int, kind: CategoryKind, extension: str = "ts") -> str:
        """Build the playback URL of a stream."""
        segment = _STREAM_PATHS[kind]
        return (
            f"{self._base_url}/{segment}/{self.username}/{self.password}"
            f"/{stream_id}.{extension.lstrip('.')}"
        )


_CATEGORY_LIST = TypeAdapter(list[Category])
_STREAM_LIST = TypeAdapter(list[Stream])
_SERIES_LIST = TypeAdapter(list[SeriesInfo])
