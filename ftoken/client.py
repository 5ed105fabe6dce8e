"""F-token oracle client

The f parameter is produced by native code inside the NSO app. Computing it
is delegated to an external oracle that takes ``{hash_method, token}`` and
answers ``{f, timestamp, request_id}``.
"""

import logging
from typing import Optional, Protocol

import httpx

from headers.constants import NSO_AUTH_USER_AGENT
from settings import FTOKEN_URL
from utils.http import client_session, parse_model, read_json, send
from .models import AttestationToken, HashMethod

logger = logging.getLogger(__name__)


class FTokenProvider(Protocol):
    """Anything able to attest a token for a given hash method"""

    async def attest(self, hash_method: HashMethod, token: str) -> AttestationToken:
        ...


class IminkClient:
    """FTokenProvider backed by the imink f API (or a compatible server)"""

    def __init__(self, url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            url: Oracle endpoint; defaults to settings.FTOKEN_URL
            client: Optional shared HTTP client
        """
        self.url = url or FTOKEN_URL
        self.client = client

    async def attest(self, hash_method: HashMethod, token: str) -> AttestationToken:
        """Request an f-token from the oracle

        Args:
            hash_method: Stage selector (ID_TOKEN or LOGIN_TOKEN)
            token: id_token for stage 1, login token for stage 2

        Returns:
            AttestationToken for ``token``

        Raises:
            TransportError: If the oracle could not be reached
            RemoteRejection: If the oracle returned an error or bad payload
        """
        hash_method = HashMethod(hash_method)
        stage = f"F-token (hash method {hash_method.value})"
        async with client_session(self.client) as http:
            response = await send(
                http,
                "POST",
                self.url,
                stage=stage,
                headers={"User-Agent": NSO_AUTH_USER_AGENT},
                json={"hash_method": hash_method.value, "token": token},
            )

        f_token = parse_model(AttestationToken, read_json(response, stage), stage, response.status_code)
        logger.info(f"Obtained f-token for hash method {hash_method.value} (request {f_token.request_id})")
        return f_token


async def get_f1(id_token: str, provider: Optional[FTokenProvider] = None) -> AttestationToken:
    """Get the NSO f-token for Account/Login from an id_token"""
    return await (provider or IminkClient()).attest(HashMethod.ID_TOKEN, id_token)


async def get_f2(login_token: str, provider: Optional[FTokenProvider] = None) -> AttestationToken:
    """Get the app f-token for Game/GetWebServiceToken from a login token"""
    return await (provider or IminkClient()).attest(HashMethod.LOGIN_TOKEN, login_token)
