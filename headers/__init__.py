"""HTTP headers and constants package for nso-auth"""

from .constants import (
    NSO_VERSION,
    NSO_USER_AGENT,
    ONLINE_LOUNGE_USER_AGENT,
    WEB_VIEW_USER_AGENT,
    NSO_AUTH_USER_AGENT,
    accounts_headers,
    app_server_headers,
    game_web_token_cookie,
    splatoon3_headers,
)

__all__ = [
    "NSO_VERSION",
    "NSO_USER_AGENT",
    "ONLINE_LOUNGE_USER_AGENT",
    "WEB_VIEW_USER_AGENT",
    "NSO_AUTH_USER_AGENT",
    "accounts_headers",
    "app_server_headers",
    "game_web_token_cookie",
    "splatoon3_headers",
]
