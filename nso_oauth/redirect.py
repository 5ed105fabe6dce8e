"""Extract the session_token_code from a 'Select this person' URL"""

from settings import REDIRECT_URI
from utils.errors import InvalidRedirect

REDIRECT_PREFIX = f"{REDIRECT_URI}#"
CODE_KEY = "session_token_code="


def parse_session_token_code(select_url: str) -> str:
    """Return the session_token_code carried in the URL fragment

    Args:
        select_url: URL copied from the 'Select this person' button

    Returns:
        The session_token_code value

    Raises:
        InvalidRedirect: If the prefix or the session_token_code key is missing
    """
    if not isinstance(select_url, str):
        raise InvalidRedirect("Redirect URL must be a string")

    url = select_url.strip()
    if not url.startswith(REDIRECT_PREFIX):
        raise InvalidRedirect(f"Redirect URL must start with {REDIRECT_PREFIX}")

    for segment in url[len(REDIRECT_PREFIX):].split("&"):
        if segment.startswith(CODE_KEY):
            return segment[len(CODE_KEY):]

    raise InvalidRedirect("Redirect URL has no session_token_code")
