"""End-to-end token pipeline

Chains the individual exchanges in the only order they can run:

    redirect URL -> session_token -> access/id tokens + profile
    -> f1 -> login token -> f2 -> game web token -> terminal artifact

Nothing here keeps state between runs. A failed stage ends the run; since
the session_token stays valid, callers usually restart with
``login_with_session_token``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from ftoken import FTokenProvider, IminkClient, get_f1, get_f2
from games import splatoon2, splatoon3
from games.graphql import PersistedQuery, graphql_query
from nso_oauth import (
    AccessCredentials,
    AccountProfile,
    get_access_token,
    get_session_token,
    get_user_info,
    parse_session_token_code,
)
from utils.errors import MissingArtifact
from znc import get_login_token

logger = logging.getLogger(__name__)


@dataclass
class NSOSession:
    """Everything produced up to and including the NSO app server login"""
    session_token: str
    credentials: AccessCredentials
    profile: AccountProfile
    login_token: str


@dataclass
class Splatoon3Session:
    """Splatoon 3 terminal credentials"""
    web_token: str
    bullet_token: str
    language: str

    async def query(
        self,
        query: Union[PersistedQuery, str],
        variables: Optional[Dict[str, Any]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> httpx.Response:
        """Run a persisted query with this session's tokens and language"""
        return await graphql_query(
            self.bullet_token,
            self.language,
            self.web_token,
            query,
            variables,
            client,
        )


async def login_with_session_token(
    session_token: str,
    client: Optional[httpx.AsyncClient] = None,
    f_provider: Optional[FTokenProvider] = None,
) -> NSOSession:
    """Run the pipeline from a session_token up to the NSO login token

    Args:
        session_token: Long-lived Nintendo Account session token
        client: Optional shared HTTP client for Nintendo calls
        f_provider: f-token oracle; defaults to IminkClient on ``client``

    Returns:
        NSOSession for this run
    """
    provider = f_provider or IminkClient(client=client)

    credentials = await get_access_token(session_token, client)
    profile = await get_user_info(credentials.access_token, client)
    f1 = await get_f1(credentials.id_token, provider)
    login_token = await get_login_token(f1, credentials.id_token, profile, client)

    return NSOSession(
        session_token=session_token,
        credentials=credentials,
        profile=profile,
        login_token=login_token,
    )


async def login(
    select_url: str,
    verifier: str,
    client: Optional[httpx.AsyncClient] = None,
    f_provider: Optional[FTokenProvider] = None,
) -> NSOSession:
    """Run the pipeline from the pasted 'Select this person' URL

    Args:
        select_url: URL pasted back by the user
        verifier: Verifier from the AuthorizationContext that produced the login URL
        client: Optional shared HTTP client
        f_provider: f-token oracle; defaults to IminkClient on ``client``

    Returns:
        NSOSession for this run

    Raises:
        InvalidRedirect: If ``select_url`` carries no session_token_code
    """
    session_token_code = parse_session_token_code(select_url)
    session_token = await get_session_token(session_token_code, verifier, client)
    return await login_with_session_token(session_token, client, f_provider)


async def splatoon2_session(
    session: NSOSession,
    client: Optional[httpx.AsyncClient] = None,
    f_provider: Optional[FTokenProvider] = None,
) -> str:
    """Derive the SplatNet 2 iksm_session for a logged-in session

    Raises:
        MissingArtifact: If SplatNet 2 answered without setting the cookie
    """
    provider = f_provider or IminkClient(client=client)

    f2 = await get_f2(session.login_token, provider)
    web_token = await splatoon2.get_web_token(f2, session.login_token, client)
    iksm_session = await splatoon2.get_iksm_session(web_token, client)
    if iksm_session is None:
        raise MissingArtifact(splatoon2.SESSION_COOKIE)
    return iksm_session


async def splatoon3_session(
    session: NSOSession,
    client: Optional[httpx.AsyncClient] = None,
    f_provider: Optional[FTokenProvider] = None,
) -> Splatoon3Session:
    """Derive the SplatNet 3 web token and bullet token for a logged-in session"""
    provider = f_provider or IminkClient(client=client)

    f2 = await get_f2(session.login_token, provider)
    web_token = await splatoon3.get_web_token(f2, session.login_token, client)
    bullet_token = await splatoon3.get_bullet_token(web_token, client)
    logger.info("Splatoon 3 session ready")

    return Splatoon3Session(
        web_token=web_token,
        bullet_token=bullet_token,
        language=session.profile.language,
    )
