"""
Pytest configuration for xtream-data tests.
"""

import copy

import pytest

AUTH_PAYLOAD = {
    "user_info": {
        "username": "demo",
        "password": "secret",
        "message": "",
        "auth": 1,
        "status": "Active",
        "exp_date": None,
        "is_trial": "0",
        "active_cons": "0",
        "created_at": "1600000000",
        "max_connections": "2",
        "allowed_output_formats": ["m3u8", "ts"],
    },
    "server_info": {
        "url": "panel.example",
        "port": "80",
        "https_port": "443",
        "server_protocol": "http",
        "rtmp_port": "8880",
        "timezone": "Europe/London",
        "timestamp_now": 1700000000,
        "time_now": "2023-11-14 22:13:20",
        "process": True,
    },
}


@pytest.fixture
def auth_payload():
    """Authentication response with the panel's usual mix of quoted and bare values."""
    return copy.deepcopy(AUTH_PAYLOAD)
