"""Splatoon 2 (SplatNet 2) session"""

import logging
from typing import Optional

import httpx

from ftoken.models import AttestationToken
from headers.constants import WEB_VIEW_USER_AGENT
from settings import SPLATOON2_HOST
from utils.http import client_session, ensure_success, send
from utils.redaction import redact
from znc.game_token import Game, get_game_web_token

logger = logging.getLogger(__name__)

GAME_ID = Game.SPLATOON2
SESSION_COOKIE = "iksm_session"
LANGUAGE = "en-US"


async def get_web_token(
    f2: AttestationToken,
    login_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Get the Splatoon 2 web token from the stage 2 f-token and login token"""
    return await get_game_web_token(GAME_ID, f2, login_token, client)


async def get_iksm_session(
    web_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[str]:
    """Get the ``iksm_session`` cookie for SplatNet 2

    The front door is always asked for ``en-US``. The cookie is read from
    this response alone; a shared client neither sends an earlier run's
    cookie nor keeps this one.

    Args:
        web_token: Splatoon 2 web token
        client: Optional shared HTTP client

    Returns:
        The cookie value, or None if the response did not set one

    Raises:
        TransportError: If the request could not be sent
        RemoteRejection: If the front door answered with an error status
    """
    stage = "Splatoon 2 session"
    headers = {
        "Host": SPLATOON2_HOST,
        "X-IsAppAnalyticsOptedIn": "false",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Encoding": "gzip,deflate",
        "X-GameWebToken": web_token,
        "Accept-Language": LANGUAGE,
        "X-IsAnalyticsOptedIn": "false",
        "Connection": "keep-alive",
        "DNT": "0",
        "User-Agent": WEB_VIEW_USER_AGENT,
        "X-Requested-With": "com.nintendo.znca",
    }

    async with client_session(client) as http:
        response = await send(
            http,
            "GET",
            f"https://{SPLATOON2_HOST}/",
            stage=stage,
            use_cookie_jar=False,
            headers=headers,
            params={"lang": LANGUAGE},
        )
    ensure_success(response, stage)

    # first match: a response may set the cookie more than once under different paths
    iksm_session = next(
        (cookie.value for cookie in response.cookies.jar if cookie.name == SESSION_COOKIE),
        None,
    )
    if iksm_session is None:
        logger.warning(f"{stage}: response did not set {SESSION_COOKIE}")
        return None

    logger.info(f"Obtained {SESSION_COOKIE} {redact(iksm_session)}")
    return iksm_session
