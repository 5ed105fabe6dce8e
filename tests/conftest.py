import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

ORACLE_URL = "https://f.example.test/f"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeNintendo:
    """MockTransport handler that routes by method/host/path and records requests"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str, str], Handler] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        url: str,
        status_code: int = 200,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        handler: Optional[Handler] = None,
    ):
        parts = urlsplit(url)

        def respond(request: httpx.Request) -> httpx.Response:
            if json_body is not None:
                return httpx.Response(status_code, json=json_body, headers=headers)
            return httpx.Response(status_code, text=text or "", headers=headers)

        self.routes[(method, parts.hostname, parts.path)] = handler or respond

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.host, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": "no route"})
        return handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def last(self, path: str) -> httpx.Request:
        return self.requests_to(path)[-1]


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content)


def form_body(request: httpx.Request) -> Dict[str, Union[str, List[str]]]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


@pytest.fixture
def nintendo() -> FakeNintendo:
    return FakeNintendo()
