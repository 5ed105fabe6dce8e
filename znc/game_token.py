"""Game web service tokens (Game/GetWebServiceToken)

One exchange serves every game; only the numeric game id in the body
changes. Game ids are members of a closed enum so that a token for one game
cannot be requested with an id typed in at runtime.
"""

import logging
from enum import IntEnum
from typing import Optional

import httpx

from ftoken.models import AttestationToken
from headers.constants import app_server_headers
from settings import WEB_SERVICE_TOKEN_URL, ZNC_HOST
from utils.http import client_session, extract, read_json, send
from utils.redaction import redact

logger = logging.getLogger(__name__)


class Game(IntEnum):
    """Internal NSO ids of the supported game web services"""
    SPLATOON2 = 5_741_031_244_955_648
    SPLATOON3 = 4_834_290_508_791_808


def build_web_service_token_body(game: Game, f2: AttestationToken, login_token: str) -> dict:
    """Request body for Game/GetWebServiceToken"""
    return {
        "parameter": {
            "id": int(game),
            "f": f2.f,
            "registrationToken": login_token,
            "timestamp": f2.timestamp,
            "requestId": f2.request_id,
        }
    }


async def get_game_web_token(
    game: Game,
    f2: AttestationToken,
    login_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Get the web service access token for a game

    Args:
        game: Which game the token is scoped to
        f2: f-token computed from ``login_token``
        login_token: Token from get_login_token
        client: Optional shared HTTP client

    Returns:
        The game web token

    Raises:
        TypeError: If ``game`` is not a Game member
        TransportError: If the request could not be sent
        RemoteRejection: If Nintendo rejected the request (e.g. a token is invalid)
    """
    if not isinstance(game, Game):
        raise TypeError(f"game must be a Game member, got {game!r}")

    stage = f"{game.name.title()} web token"
    async with client_session(client) as http:
        response = await send(
            http,
            "POST",
            WEB_SERVICE_TOKEN_URL,
            stage=stage,
            headers=app_server_headers(ZNC_HOST, f"Bearer {login_token}"),
            json=build_web_service_token_body(game, f2, login_token),
        )

    web_token = extract(read_json(response, stage), ["result", "accessToken"], stage, response.status_code)
    logger.info(f"Obtained {game.name.title()} web token {redact(web_token)}")
    return web_token
