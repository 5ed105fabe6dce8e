import asyncio

import pytest

from ftoken import AttestationToken
from nso_oauth import AccountProfile
from tests.conftest import json_body
from utils.errors import RemoteRejection
from znc import Game, get_game_web_token, get_login_token

LOGIN_URL = "https://api-lp1.znc.srv.nintendo.net/v3/Account/Login"
WEB_SERVICE_TOKEN_URL = "https://api-lp1.znc.srv.nintendo.net/v2/Game/GetWebServiceToken"

F1 = AttestationToken(f="f1-value", timestamp=1700000000000, request_id="req-1")
F2 = AttestationToken(f="f2-value", timestamp=1700000000500, request_id="req-2")
PROFILE = AccountProfile(country="JP", birthday="1995-05-05", language="ja-JP")


def run(nintendo, coro_factory):
    async def scenario():
        async with nintendo.client() as client:
            return await coro_factory(client)
    return asyncio.run(scenario())


def test_login_body_and_token(nintendo):
    nintendo.add("POST", LOGIN_URL, json_body={
        "status": 0,
        "result": {
            "user": {"id": 1, "name": "Inkling"},
            "webApiServerCredential": {"accessToken": "login-token", "expiresIn": 7200},
            "firebaseCredential": {"accessToken": "", "expiresIn": 3600},
        },
        "correlationId": "abc",
    })

    token = run(nintendo, lambda c: get_login_token(F1, "id-token", PROFILE, c))

    assert token == "login-token"
    assert json_body(nintendo.last("/v3/Account/Login")) == {
        "parameter": {
            "f": "f1-value",
            "naIdToken": "id-token",
            "timestamp": 1700000000000,
            "requestId": "req-1",
            "naCountry": "JP",
            "naBirthday": "1995-05-05",
            "language": "ja-JP",
        }
    }


def test_login_headers_use_placeholder_bearer(nintendo):
    nintendo.add("POST", LOGIN_URL, json_body={"result": {"webApiServerCredential": {"accessToken": "t"}}})

    run(nintendo, lambda c: get_login_token(F1, "id-token", PROFILE, c))

    headers = nintendo.last("/v3/Account/Login").headers
    assert headers["Authorization"] == "Bearer"
    assert headers["Host"] == "api-lp1.znc.srv.nintendo.net"
    assert headers["User-Agent"] == "com.nintendo.znca/2.3.1, (Android/7.1.2)"
    assert headers["X-ProductVersion"] == "2.3.1"
    assert headers["X-Platform"] == "Android"
    assert headers["Accept-Language"] == "en-US"


def test_login_error_status_in_body(nintendo):
    nintendo.add("POST", LOGIN_URL, json_body={"status": 9403, "errorMessage": "Invalid token."})

    with pytest.raises(RemoteRejection, match="webApiServerCredential"):
        run(nintendo, lambda c: get_login_token(F1, "id-token", PROFILE, c))


def test_game_web_token(nintendo):
    nintendo.add("POST", WEB_SERVICE_TOKEN_URL, json_body={
        "status": 0,
        "result": {"accessToken": "web-token", "expiresIn": 7200},
    })

    token = run(nintendo, lambda c: get_game_web_token(Game.SPLATOON3, F2, "login-token", c))

    assert token == "web-token"
    request = nintendo.last("/v2/Game/GetWebServiceToken")
    assert request.headers["Authorization"] == "Bearer login-token"
    assert json_body(request) == {
        "parameter": {
            "id": 4834290508791808,
            "f": "f2-value",
            "registrationToken": "login-token",
            "timestamp": 1700000000500,
            "requestId": "req-2",
        }
    }


def test_games_differ_only_in_id(nintendo):
    nintendo.add("POST", WEB_SERVICE_TOKEN_URL, json_body={"result": {"accessToken": "web-token"}})

    async def both(client):
        await get_game_web_token(Game.SPLATOON2, F2, "login-token", client)
        await get_game_web_token(Game.SPLATOON3, F2, "login-token", client)

    run(nintendo, both)

    first, second = nintendo.requests_to("/v2/Game/GetWebServiceToken")
    assert first.headers == second.headers
    first_body, second_body = json_body(first), json_body(second)
    assert first_body["parameter"].pop("id") == 5741031244955648
    assert second_body["parameter"].pop("id") == 4834290508791808
    assert first_body == second_body


@pytest.mark.parametrize("game", [4834290508791808, "4834290508791808", None])
def test_game_must_be_enum_member(nintendo, game):
    with pytest.raises(TypeError):
        run(nintendo, lambda c: get_game_web_token(game, F2, "login-token", c))
    assert nintendo.requests == []
