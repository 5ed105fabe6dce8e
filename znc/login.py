"""NSO app server login (Account/Login)"""

import logging
from typing import Optional

import httpx

from ftoken.models import AttestationToken
from headers.constants import PLACEHOLDER_AUTHORIZATION, app_server_headers
from nso_oauth.models import AccountProfile
from settings import LOGIN_URL, ZNC_HOST
from utils.http import client_session, extract, read_json, send
from utils.redaction import redact

logger = logging.getLogger(__name__)


def build_login_body(f1: AttestationToken, id_token: str, profile: AccountProfile) -> dict:
    """Request body for Account/Login"""
    return {
        "parameter": {
            "f": f1.f,
            "naIdToken": id_token,
            "timestamp": f1.timestamp,
            "requestId": f1.request_id,
            "naCountry": profile.country,
            "naBirthday": profile.birthday,
            "language": profile.language,
        }
    }


async def get_login_token(
    f1: AttestationToken,
    id_token: str,
    profile: AccountProfile,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Log in to the NSO app server with the stage 1 f-token

    Args:
        f1: f-token computed from ``id_token``
        id_token: ID token from get_access_token
        profile: Account profile from get_user_info
        client: Optional shared HTTP client

    Returns:
        The web API server access token ("login token")

    Raises:
        TransportError: If the request could not be sent
        RemoteRejection: If Nintendo rejected the login
    """
    stage = "NSO login"
    headers = app_server_headers(ZNC_HOST, PLACEHOLDER_AUTHORIZATION)
    headers["Accept-Language"] = "en-US"

    async with client_session(client) as http:
        response = await send(
            http,
            "POST",
            LOGIN_URL,
            stage=stage,
            headers=headers,
            json=build_login_body(f1, id_token, profile),
        )

    login_token = extract(
        read_json(response, stage),
        ["result", "webApiServerCredential", "accessToken"],
        stage,
        response.status_code,
    )
    logger.info(f"Logged in to NSO app server, login token {redact(login_token)}")
    return login_token
