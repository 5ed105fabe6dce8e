"""Shared HTTP plumbing for the pipeline stages

Every stage accepts an optional caller-owned ``httpx.AsyncClient`` so that
independent runs can share one connection pool. When no client is given the
stage opens a short-lived one for that single call.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Sequence, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import RemoteRejection, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@asynccontextmanager
async def client_session(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or a temporary one closed on exit"""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient() as owned:
        yield owned


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    stage: str,
    use_cookie_jar: bool = True,
    **kwargs: Any,
) -> httpx.Response:
    """Send a request, mapping httpx failures to TransportError

    Args:
        client: HTTP client to send with
        method: HTTP method
        url: Absolute URL
        stage: Pipeline stage name, used in errors and logs
        use_cookie_jar: When False, the request carries no cookies from the
            client jar and cookies set by the response are removed from it
        **kwargs: Passed through to ``httpx.AsyncClient.build_request``

    Returns:
        The response, whatever its status

    Raises:
        TransportError: If no response was received
    """
    logger.debug(f"{stage}: {method} {url}")
    request = client.build_request(method, url, **kwargs)
    if not use_cookie_jar:
        request.headers.pop("Cookie", None)
    try:
        response = await client.send(request)
    except httpx.HTTPError as e:
        logger.error(f"{stage} request failed: {e}")
        raise TransportError(stage, str(e) or type(e).__name__) from e
    if not use_cookie_jar:
        forget_cookies(client, response)
    logger.debug(f"{stage}: response status {response.status_code}")
    return response


def forget_cookies(client: httpx.AsyncClient, response: httpx.Response) -> None:
    """Remove the cookies ``response`` set from the client's jar"""
    for cookie in response.cookies.jar:
        client.cookies.delete(cookie.name, domain=cookie.domain, path=cookie.path)


def ensure_success(response: httpx.Response, stage: str) -> None:
    """Raise RemoteRejection unless the response has a 2xx status"""
    if not response.is_success:
        logger.error(f"{stage} failed with status {response.status_code}: {response.text[:200]}")
        raise RemoteRejection(stage, response.status_code, response.text)


def read_json(response: httpx.Response, stage: str) -> Dict[str, Any]:
    """Decode a successful JSON object response

    Raises:
        RemoteRejection: On non-2xx status or a body that is not a JSON object
    """
    ensure_success(response, stage)
    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Failed to parse {stage} response: {e}")
        raise RemoteRejection(stage, response.status_code, "response body is not valid JSON") from e
    if not isinstance(payload, dict):
        raise RemoteRejection(stage, response.status_code, "response body is not a JSON object")
    return payload


def extract(payload: Dict[str, Any], path: Sequence[str], stage: str, status_code: Optional[int] = None) -> str:
    """Walk ``path`` through nested objects and return the string at its end

    Sibling fields along the way are ignored.

    Raises:
        RemoteRejection: If any key is missing or the leaf is not a string
    """
    node: Any = payload
    for key in path:
        if not isinstance(node, dict) or key not in node:
            raise RemoteRejection(stage, status_code, f"response missing field {'.'.join(path)}")
        node = node[key]
    if not isinstance(node, str):
        raise RemoteRejection(stage, status_code, f"field {'.'.join(path)} is not a string")
    return node


def parse_model(model: Type[ModelT], payload: Dict[str, Any], stage: str, status_code: Optional[int] = None) -> ModelT:
    """Validate a decoded payload into a pydantic model

    Raises:
        RemoteRejection: If the payload does not fit the model
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Unexpected {stage} response shape: {e.error_count()} error(s)")
        raise RemoteRejection(stage, status_code, f"unexpected response shape: {e.errors()[0]['loc']}") from e
