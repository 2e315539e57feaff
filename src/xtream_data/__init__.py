"""
Xtream Data

Typed access to the Xtream-Codes IPTV panel API. The panel encodes the
same logical value in different JSON shapes across endpoints; the codecs
in ``xtream_data.codecs`` absorb that and re-emit the original shape.

Usage:
    from xtream_data import XtreamClient

    async with XtreamClient("http://panel:8080", "user", "pass") as client:
        auth = await client.authenticate()
        print(auth.user_info.exp_date)
        streams = await client.get_streams("live")
"""

from .client import XtreamClient
from .config import Settings, get_settings
from .http import (
    AuthenticationError,
    ExternalAPIError,
    RateLimitError,
    ResponseDecodeError,
)
from .logging_config import configure_logging
from .models import (
    AuthenticationResponse,
    Category,
    EPGContainer,
    EPGInfo,
    FFMPEGStreamInfo,
    SeriesInfo,
    ServerInfo,
    Stream,
    UserInfo,
    VideoOnDemandInfo,
    VODInfo,
    VODMovieData,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "XtreamClient",
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "AuthenticationError",
    "ExternalAPIError",
    "RateLimitError",
    "ResponseDecodeError",
    # Models
    "AuthenticationResponse",
    "Category",
    "EPGContainer",
    "EPGInfo",
    "FFMPEGStreamInfo",
    "SeriesInfo",
    "ServerInfo",
    "Stream",
    "UserInfo",
    "VideoOnDemandInfo",
    "VODInfo",
    "VODMovieData",
]
