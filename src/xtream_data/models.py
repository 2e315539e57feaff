"""
Pydantic models for Xtream-Codes API payloads.

These models only declare which codec governs which field. The mapping
follows what the panel actually sends, including its inconsistencies: a
field the API sometimes quotes keeps a codec that accepts both forms.

Payloads round-trip in their wire shape:

    info = AuthenticationResponse.model_validate_json(body)
    info.model_dump_json()  # same quoting as ``body``
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .codecs import (
    Base64Str,
    FlexibleBoolean,
    FlexibleInt,
    FlexibleStringOrList,
    FlexibleTimestamp,
    FlexibleTimezone,
    QuotedInt,
)


# =============================================================================
# Authentication
# =============================================================================


class ServerInfo(BaseModel):
    """State of the Xtream-Codes server."""

    https_port: Optional[QuotedInt] = None
    port: Optional[QuotedInt] = None
    process: Optional[bool] = None
    rtmp_port: Optional[QuotedInt] = None
    server_protocol: Optional[str] = None
    time_now: Optional[str] = None
    timestamp_now: Optional[FlexibleTimestamp] = None
    timezone: Optional[FlexibleTimezone] = None
    url: Optional[str] = None


class UserInfo(BaseModel):
    """Current state of the user account on the server."""

    active_cons: Optional[QuotedInt] = None
    allowed_output_formats: list[str] = Field(default_factory=list)
    auth: FlexibleBoolean
    created_at: Optional[FlexibleTimestamp] = None
    exp_date: Optional[FlexibleTimestamp] = None  # null for accounts that never expire
    is_trial: Optional[FlexibleBoolean] = None
    max_connections: Optional[QuotedInt] = None
    message: Optional[str] = None
    password: Optional[str] = None
    status: Optional[str] = None
    username: Optional[str] = None


class AuthenticationResponse(BaseModel):
    """What the server returns for the initial authentication call."""

    server_info: ServerInfo
    user_info: UserInfo


# =============================================================================
# Catalog
# =============================================================================


class Category(BaseModel):
    """Grouping of streams."""

    category_id: QuotedInt
    category_name: str
    parent_id: int = 0

    # Set by the client, not by Xtream.
    type: Optional[str] = Field(default=None, exclude=True)


class Stream(BaseModel):
    """A streamable live or VOD source."""

    added: Optional[FlexibleTimestamp] = None
    category_id: Optional[QuotedInt] = None
    container_extension: Optional[str] = None
    custom_sid: Optional[str] = None
    direct_source: Optional[str] = None
    epg_channel_id: Optional[str] = None
    stream_icon: Optional[str] = None
    stream_id: int
    name: str
    num: Optional[int] = None
    rating: Optional[str] = None
    rating_5based: Optional[float] = None
    tv_archive: Optional[int] = None
    tv_archive_duration: Optional[FlexibleInt] = None
    stream_type: Optional[str] = None


class SeriesInfo(BaseModel):
    """A TV series listing."""

    backdrop_path: Optional[FlexibleStringOrList] = None
    cast: Optional[str] = None
    category_id: Optional[QuotedInt] = None
    cover: Optional[str] = None
    director: Optional[str] = None
    episode_run_time: Optional[str] = None
    genre: Optional[str] = None
    last_modified: Optional[FlexibleTimestamp] = None
    name: str
    num: Optional[int] = None
    plot: Optional[str] = None
    rating: Optional[QuotedInt] = None
    rating_5based: Optional[float] = None
    releaseDate: Optional[str] = None
    series_id: int
    stream_type: Optional[str] = None
    youtube_trailer: Optional[str] = None


class FFMPEGStreamInfo(BaseModel):
    """ffprobe stream description; the panel passes it through untouched."""

    model_config = ConfigDict(extra="allow")

    index: Optional[int] = None
    codec_name: Optional[str] = None
    codec_long_name: Optional[str] = None
    codec_type: Optional[str] = None


class VODInfo(BaseModel):
    """Descriptive metadata of a video on demand item."""

    audio: Optional[FFMPEGStreamInfo] = None
    backdrop_path: Optional[FlexibleStringOrList] = None
    bitrate: Optional[int] = None
    cast: Optional[str] = None
    director: Optional[str] = None
    duration: Optional[str] = None
    duration_secs: Optional[int] = None
    genre: Optional[str] = None
    movie_image: Optional[str] = None
    plot: Optional[str] = None
    rating: Optional[str] = None
    releasedate: Optional[str] = None
    tmdb_id: Optional[str] = None
    video: Optional[FFMPEGStreamInfo] = None
    youtube_trailer: Optional[str] = None


class VODMovieData(BaseModel):
    """Stream-level data of a video on demand item."""

    added: Optional[FlexibleTimestamp] = None
    category_id: Optional[QuotedInt] = None
    container_extension: Optional[str] = None
    custom_sid: Optional[str] = None
    direct_source: Optional[str] = None
    name: str
    stream_id: int


class VideoOnDemandInfo(BaseModel):
    """Response of ``get_vod_info``."""

    info: VODInfo
    movie_data: VODMovieData


# =============================================================================
# EPG
# =============================================================================


class EPGInfo(BaseModel):
    """Electronic programme guide entry for a stream."""

    channel_id: Optional[str] = None
    description: Base64Str = ""
    end: Optional[str] = None
    epg_id: Optional[QuotedInt] = None
    has_archive: Optional[FlexibleBoolean] = None
    id: QuotedInt
    lang: Optional[str] = None
    now_playing: Optional[FlexibleBoolean] = None
    start: Optional[str] = None
    start_timestamp: FlexibleTimestamp
    stop_timestamp: FlexibleTimestamp
    title: Base64Str


class EPGContainer(BaseModel):
    """Envelope of the EPG endpoints."""

    epg_listings: list[EPGInfo] = Field(default_factory=list)
