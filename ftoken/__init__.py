"""F-token attestation package"""

from .models import AttestationToken, HashMethod
from .client import FTokenProvider, IminkClient, get_f1, get_f2

__all__ = [
    "AttestationToken",
    "HashMethod",
    "FTokenProvider",
    "IminkClient",
    "get_f1",
    "get_f2",
]
