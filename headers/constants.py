"""HTTP Request Headers and Client Mimicry Constants

These values make requests look like they come from the official Nintendo
Switch Online Android app and its embedded web view. The remote services
reject requests whose headers drift from what the app sends.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Dict

from settings import SPLATOON3_ORIGIN, SPLATOON3_WEB_VIEW_VERSION

# Version of this package, reported to third-party services
try:
    PACKAGE_VERSION = version("nso-auth")
except PackageNotFoundError:
    # running from a checkout that was never installed
    PACKAGE_VERSION = "0+unknown"

# Version of Nintendo Switch Online being mimicked
NSO_VERSION = "2.3.1"

# User-Agent for Nintendo Switch Online app server calls
NSO_USER_AGENT = f"com.nintendo.znca/{NSO_VERSION}, (Android/7.1.2)"

# User-Agent for Nintendo Account calls (Online Lounge SDK)
ONLINE_LOUNGE_USER_AGENT = f"OnlineLounge/{NSO_VERSION} NASDKAPI Android"

# User-Agent for the in-app web view
WEB_VIEW_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 7.1.2; Pixel Build/NJH47D; wv) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Version/4.0 "
    "Chrome/59.0.3071.125 Mobile "
    "Safari/537.36"
)

# User-Agent for non-Nintendo servers such as the f-token oracle
NSO_AUTH_USER_AGENT = f"nso-auth/{PACKAGE_VERSION}"

# Placeholder bearer accepted by Account/Login before a real credential exists
PLACEHOLDER_AUTHORIZATION = "Bearer"


def accounts_headers(host: str) -> Dict[str, str]:
    """Headers for accounts.nintendo.com and api.accounts.nintendo.com

    Args:
        host: Host header value for the endpoint being called

    Returns:
        Fresh header dict
    """
    return {
        "User-Agent": ONLINE_LOUNGE_USER_AGENT,
        "Accept-Language": "en-US",
        "Accept": "application/json",
        "Host": host,
        "Connection": "Keep-Alive",
        "Accept-Encoding": "gzip",
    }


def app_server_headers(host: str, authorization: str) -> Dict[str, str]:
    """Headers for the NSO app server (api-lp1.znc.srv.nintendo.net)

    Args:
        host: Host header value
        authorization: Full Authorization header value

    Returns:
        Fresh header dict
    """
    return {
        "Host": host,
        "User-Agent": NSO_USER_AGENT,
        "Accept": "application/json",
        "X-ProductVersion": NSO_VERSION,
        "Connection": "Keep-Alive",
        "Authorization": authorization,
        "X-Platform": "Android",
        "Accept-Encoding": "gzip",
    }


def game_web_token_cookie(web_token: str) -> str:
    """Cookie header carrying a Splatoon 3 game web token"""
    return f"_dnt=0;_gtoken={web_token}"


def splatoon3_headers(web_token: str, referer: str) -> Dict[str, str]:
    """Common web view headers for the Splatoon 3 API"""
    return {
        "Origin": SPLATOON3_ORIGIN,
        "Referer": referer,
        "X-Web-View-Ver": SPLATOON3_WEB_VIEW_VERSION,
        "User-Agent": WEB_VIEW_USER_AGENT,
        "Cookie": game_web_token_cookie(web_token),
    }
