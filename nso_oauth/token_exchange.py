"""Nintendo Account token exchange

session_token_code -> session_token -> access/id tokens
"""

import logging
from typing import Optional

import httpx

from headers.constants import accounts_headers
from settings import ACCOUNTS_HOST, CLIENT_ID, GRANT_TYPE, SESSION_TOKEN_URL, TOKEN_URL
from utils.http import client_session, extract, parse_model, read_json, send
from utils.redaction import redact
from .models import AccessCredentials

logger = logging.getLogger(__name__)


async def get_session_token(
    session_token_code: str,
    verifier: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Exchange a session_token_code for a long-lived session_token

    Args:
        session_token_code: Code parsed from the 'Select this person' URL
        verifier: PKCE verifier generated alongside the login URL
        client: Optional shared HTTP client

    Returns:
        The session_token

    Raises:
        TransportError: If the request could not be sent
        RemoteRejection: If Nintendo rejected the exchange
    """
    stage = "Session token exchange"
    async with client_session(client) as http:
        response = await send(
            http,
            "POST",
            SESSION_TOKEN_URL,
            stage=stage,
            headers=accounts_headers(ACCOUNTS_HOST),
            data={
                "client_id": CLIENT_ID,
                "session_token_code": session_token_code,
                "session_token_code_verifier": verifier,
            },
        )

    session_token = extract(read_json(response, stage), ["session_token"], stage, response.status_code)
    logger.info(f"Obtained session_token {redact(session_token)}")
    return session_token


async def get_access_token(
    session_token: str,
    client: Optional[httpx.AsyncClient] = None,
) -> AccessCredentials:
    """Exchange a session_token for short-lived access and ID tokens

    Args:
        session_token: Long-lived session token
        client: Optional shared HTTP client

    Returns:
        AccessCredentials; expiry is the caller's concern

    Raises:
        TransportError: If the request could not be sent
        RemoteRejection: If Nintendo rejected the exchange
    """
    stage = "Access token exchange"
    async with client_session(client) as http:
        response = await send(
            http,
            "POST",
            TOKEN_URL,
            stage=stage,
            headers=accounts_headers(ACCOUNTS_HOST),
            json={
                "client_id": CLIENT_ID,
                "session_token": session_token,
                "grant_type": GRANT_TYPE,
            },
        )

    credentials = parse_model(AccessCredentials, read_json(response, stage), stage, response.status_code)
    logger.info(f"Obtained access tokens (expires in {credentials.expires_in}s)")
    return credentials
