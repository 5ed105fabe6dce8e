"""Nintendo Account authorization URL construction with PKCE"""

import base64
import hashlib
import secrets

from settings import AUTHORIZE_URL, CLIENT_ID, REDIRECT_URI, SCOPES
from .models import AuthorizationContext

VERIFIER_BYTES = 32
STATE_BYTES = 36


def _b64url_nopad(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode('ascii').rstrip('=')


def generate_verifier() -> str:
    """Generate a PKCE code verifier (32 random bytes, base64url, unpadded)"""
    return _b64url_nopad(secrets.token_bytes(VERIFIER_BYTES))


def generate_state() -> str:
    """Generate the authorization state (36 random bytes, base64url, unpadded)"""
    return _b64url_nopad(secrets.token_bytes(STATE_BYTES))


def code_challenge(verifier: str) -> str:
    """Derive the S256 challenge for a verifier

    The hash is taken over the verifier's encoded text, not the random bytes
    it was made from.
    """
    return _b64url_nopad(hashlib.sha256(verifier.encode('ascii')).digest())


def build_authorize_url(state: str, challenge: str) -> str:
    """Fill the fixed authorize URL template

    Nintendo expects this exact parameter order and the scope list joined
    with literal '+' characters, so the query string is not built with
    urlencode.
    """
    return (
        f"{AUTHORIZE_URL}"
        f"?state={state}"
        f"&redirect_uri={REDIRECT_URI}"
        f"&client_id={CLIENT_ID}"
        f"&scope={SCOPES}"
        "&response_type=session_token_code"
        f"&session_token_code_challenge={challenge}"
        "&session_token_code_challenge_method=S256"
        "&theme=login_form"
    )


def generate_login_url() -> AuthorizationContext:
    """Generate a login URL and the verifier needed to redeem it

    Returns:
        AuthorizationContext with the URL to open and the verifier to keep
    """
    verifier = generate_verifier()
    url = build_authorize_url(generate_state(), code_challenge(verifier))
    return AuthorizationContext(redirect_url=url, verifier=verifier)
