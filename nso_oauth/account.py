"""Nintendo Account profile lookup"""

import logging
from typing import Optional

import httpx

from headers.constants import accounts_headers
from settings import ACCOUNTS_API_HOST, USER_INFO_URL
from utils.http import client_session, parse_model, read_json, send
from .models import AccountProfile

logger = logging.getLogger(__name__)


async def get_user_info(
    access_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> AccountProfile:
    """Get a user's country, birthday, and language

    Everything else in the users/me response is discarded.

    Args:
        access_token: Access token from get_access_token
        client: Optional shared HTTP client

    Returns:
        AccountProfile with only the three login fields

    Raises:
        TransportError: If the request could not be sent
        RemoteRejection: If Nintendo rejected the request
    """
    stage = "User info"
    headers = accounts_headers(ACCOUNTS_API_HOST)
    headers["Authorization"] = f"Bearer {access_token}"

    async with client_session(client) as http:
        response = await send(http, "GET", USER_INFO_URL, stage=stage, headers=headers)

    profile = parse_model(AccountProfile, read_json(response, stage), stage, response.status_code)
    logger.info("Fetched account profile")
    return profile
