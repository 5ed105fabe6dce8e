"""Data models for Nintendo Account authentication"""

from typing import List, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationContext(NamedTuple):
    """Login URL and the PKCE verifier that must be kept for the exchange"""
    redirect_url: str
    verifier: str


class AccessCredentials(BaseModel):
    """Tokens returned by the access-token exchange

    ``token_type`` should always be "Bearer" and ``scope`` should always be
    openid, user, user.birthday, user.mii, user.screenName. Neither is checked.
    """
    model_config = ConfigDict(extra="ignore")

    access_token: str
    id_token: str
    expires_in: int
    token_type: str
    scope: List[str] = Field(min_length=5, max_length=5)


class AccountProfile(BaseModel):
    """The account fields needed to log in to the NSO app server

    The users/me response also carries mii data, email preferences, nickname,
    gender and more. Those are dropped at validation time and never stored.
    """
    model_config = ConfigDict(extra="ignore")

    country: str
    birthday: str
    language: str
