"""Nintendo Account OAuth package

Covers the browser half of the login: PKCE login URL, redirect parsing,
session token, access tokens and the account profile.
"""

from .models import AuthorizationContext, AccessCredentials, AccountProfile
from .authorization import generate_login_url, code_challenge
from .redirect import parse_session_token_code
from .token_exchange import get_session_token, get_access_token
from .account import get_user_info

__all__ = [
    "AuthorizationContext",
    "AccessCredentials",
    "AccountProfile",
    "generate_login_url",
    "code_challenge",
    "parse_session_token_code",
    "get_session_token",
    "get_access_token",
    "get_user_info",
]
