"""Shared utilities package for nso-auth"""

from .errors import (
    NSOError,
    TransportError,
    RemoteRejection,
    MalformedInput,
    InvalidRedirect,
    MissingArtifact,
)
from .redaction import redact

__all__ = [
    "NSOError",
    "TransportError",
    "RemoteRejection",
    "MalformedInput",
    "InvalidRedirect",
    "MissingArtifact",
    "redact",
]
