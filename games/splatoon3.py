"""Splatoon 3 (SplatNet 3) tokens"""

import logging
from typing import Optional

import httpx

from ftoken.models import AttestationToken
from headers.constants import splatoon3_headers
from settings import BULLET_TOKEN_URL, SPLATOON3_ORIGIN
from utils.http import client_session, extract, read_json, send
from utils.redaction import redact
from znc.game_token import Game, get_game_web_token

logger = logging.getLogger(__name__)

GAME_ID = Game.SPLATOON3


async def get_web_token(
    f2: AttestationToken,
    login_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Get the Splatoon 3 web token from the stage 2 f-token and login token"""
    return await get_game_web_token(GAME_ID, f2, login_token, client)


async def get_bullet_token(
    web_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Trade a Splatoon 3 web token for a bullet token

    Args:
        web_token: Splatoon 3 web token, sent as the _gtoken cookie
        client: Optional shared HTTP client

    Returns:
        The bullet token used as bearer for GraphQL queries

    Raises:
        TransportError: If the request could not be sent
        RemoteRejection: If Nintendo rejected the web token
    """
    stage = "Splatoon 3 bullet token"
    async with client_session(client) as http:
        response = await send(
            http,
            "POST",
            BULLET_TOKEN_URL,
            stage=stage,
            headers=splatoon3_headers(web_token, f"{SPLATOON3_ORIGIN}/"),
        )

    bullet_token = extract(read_json(response, stage), ["bulletToken"], stage, response.status_code)
    logger.info(f"Obtained bullet token {redact(bullet_token)}")
    return bullet_token
