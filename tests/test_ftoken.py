import asyncio
from importlib.metadata import version

import pytest

from ftoken import AttestationToken, HashMethod, IminkClient, get_f1, get_f2
from tests.conftest import ORACLE_URL, json_body
from utils.errors import RemoteRejection


def attest(nintendo, hash_method, token):
    async def scenario():
        async with nintendo.client() as client:
            return await IminkClient(url=ORACLE_URL, client=client).attest(hash_method, token)
    return asyncio.run(scenario())


def test_attest_round_trip(nintendo):
    nintendo.add("POST", ORACLE_URL, json_body={"f": "f-value", "timestamp": 1700000000123, "request_id": "req-1"})

    token = attest(nintendo, HashMethod.ID_TOKEN, "abc")

    assert token == AttestationToken(f="f-value", timestamp=1700000000123, request_id="req-1")
    request = nintendo.last("/f")
    assert json_body(request) == {"hash_method": "1", "token": "abc"}
    assert request.headers["User-Agent"] == f"nso-auth/{version('nso-auth')}"


def test_attest_accepts_raw_selector(nintendo):
    nintendo.add("POST", ORACLE_URL, json_body={"f": "f2", "timestamp": 1, "request_id": "req-2"})

    attest(nintendo, "2", "login-token")

    assert json_body(nintendo.last("/f")) == {"hash_method": "2", "token": "login-token"}


def test_attest_rejects_unknown_selector(nintendo):
    with pytest.raises(ValueError):
        attest(nintendo, "3", "abc")


def test_oracle_error_is_surfaced(nintendo):
    nintendo.add("POST", ORACLE_URL, status_code=500, json_body={"error": "upstream"})

    with pytest.raises(RemoteRejection) as excinfo:
        attest(nintendo, HashMethod.ID_TOKEN, "abc")

    assert excinfo.value.status_code == 500


def test_oracle_bad_shape(nintendo):
    nintendo.add("POST", ORACLE_URL, json_body={"f": "f-value"})

    with pytest.raises(RemoteRejection):
        attest(nintendo, HashMethod.ID_TOKEN, "abc")


class RecordingProvider:
    def __init__(self):
        self.calls = []

    async def attest(self, hash_method, token):
        self.calls.append((hash_method, token))
        return AttestationToken(f=f"f-{token}", timestamp=1, request_id="r")


def test_stage_helpers_pick_hash_method():
    provider = RecordingProvider()

    asyncio.run(get_f1("id-token", provider))
    asyncio.run(get_f2("login-token", provider))

    assert provider.calls == [
        (HashMethod.ID_TOKEN, "id-token"),
        (HashMethod.LOGIN_TOKEN, "login-token"),
    ]
