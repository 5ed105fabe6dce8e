"""Exception hierarchy for the NSO token pipeline"""

from typing import Optional

# Response bodies are truncated to this many characters in error messages
MAX_DETAIL_LENGTH = 200


class NSOError(Exception):
    """Base class for every error raised by the token pipeline"""


class TransportError(NSOError):
    """The request never produced a response (connection, TLS, timeout)"""

    def __init__(self, stage: str, detail: str):
        self.stage = stage
        self.detail = detail
        super().__init__(f"{stage} request failed: {detail}")


class RemoteRejection(NSOError):
    """The remote service answered, but not with what the stage needs

    Raised for non-success statuses, bodies that are not JSON, and bodies
    missing an expected field.
    """

    def __init__(self, stage: str, status_code: Optional[int], detail: str):
        self.stage = stage
        self.status_code = status_code
        self.detail = detail[:MAX_DETAIL_LENGTH]
        super().__init__(f"{stage} failed: {status_code} - {self.detail}")


class MalformedInput(NSOError, ValueError):
    """Caller-supplied input cannot be used"""


class InvalidRedirect(MalformedInput):
    """The pasted redirect URL is not a valid 'Select this person' URL"""


class MissingArtifact(NSOError):
    """A terminal artifact the caller asked for was not issued"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} was not present in the response")
