"""SplatNet 3 persisted GraphQL queries

Queries are referenced by the SHA-256 hash the web front-end registered for
them. Response bodies are returned untouched.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

import httpx

from headers.constants import splatoon3_headers
from settings import GRAPHQL_URL, SPLATOON3_ORIGIN
from utils.errors import MalformedInput
from utils.http import client_session, send

logger = logging.getLogger(__name__)

GRAPHQL_REFERER = f"{SPLATOON3_ORIGIN}/schedule/regular"


class PersistedQuery(str, Enum):
    """Known persisted query hashes, named after their operation"""
    SCHEDULES = "7d4bb0565342b7385ceb97d109e14897"           # StageScheduleQuery
    SPLATNET = "a43dd44899a09013bcfd29b4b13314ff"            # GesotownQuery
    SALMON = "817618ce39bcf5570f52a97d73301b30"              # CoopHistoryQuery
    ORDER = "b79b7a101a243912754f72437e2ad7e5"               # SaleGearDetailOrderGesotownGearMutation
    SPLATFEST_OVERVIEW = "44c76790b68ca0f3da87f2a3452de986"  # FestRecordQuery
    SPLATFEST = "2d661988c055d843b3be290f04fb0db9"           # DetailFestRecordDetailQuery
    LATEST_BATTLES = "7d8b560e31617e981cf7c8aa1ca13a00"      # LatestBattleHistoriesQuery
    GEAR = "d29cd0c2b5e6bac90dd5b817914832f8"                # MyOutfitCommonDataEquipmentsQuery


def build_query_body(query: PersistedQuery, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Request body for a persisted query"""
    return {
        "extensions": {
            "persistedQuery": {
                "sha256Hash": query.value,
                "version": 1,
            }
        },
        "variables": variables if variables is not None else {},
    }


async def graphql_query(
    bullet_token: str,
    lang: str,
    web_token: str,
    query: Union[PersistedQuery, str],
    variables: Optional[Dict[str, Any]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> httpx.Response:
    """Run a persisted query against the SplatNet 3 API

    Args:
        bullet_token: Bullet token from get_bullet_token
        lang: Accept-Language for localized results (e.g. the profile language)
        web_token: Splatoon 3 web token, re-sent as the _gtoken cookie
        query: PersistedQuery member or one of its hashes
        variables: Query variables; an empty object when omitted
        client: Optional shared HTTP client

    Returns:
        The raw response. Status and body are left to the caller.

    Raises:
        MalformedInput: If ``query`` is not a known persisted query
        TransportError: If the request could not be sent
    """
    try:
        query = PersistedQuery(query)
    except ValueError as e:
        raise MalformedInput(f"Unknown persisted query: {query!r}") from e

    stage = f"GraphQL {query.name}"
    headers = splatoon3_headers(web_token, GRAPHQL_REFERER)
    headers["Authorization"] = f"Bearer {bullet_token}"
    headers["Accept-Language"] = lang
    headers["X-Requested-With"] = "XMLHttpRequest"

    async with client_session(client) as http:
        return await send(
            http,
            "POST",
            GRAPHQL_URL,
            stage=stage,
            headers=headers,
            json=build_query_body(query, variables),
        )
