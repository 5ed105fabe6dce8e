"""Data models for f-token attestation"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class HashMethod(str, Enum):
    """Which pipeline stage an f-token is requested for"""
    ID_TOKEN = "1"
    LOGIN_TOKEN = "2"


class AttestationToken(BaseModel):
    """An f-token bound to the token it was computed from

    Single use: stage 1 tokens go to Account/Login, stage 2 tokens go to
    Game/GetWebServiceToken.
    """
    model_config = ConfigDict(extra="ignore")

    f: str
    timestamp: int
    request_id: str
