"""Platform credential capability implementations."""

from .base import Assertion, CreatedCredential, PlatformCredentials, UnavailablePlatform
from .bridge import BridgePlatform
from .software import SoftwareAuthenticator

__all__ = [
    "Assertion",
    "CreatedCredential",
    "PlatformCredentials",
    "UnavailablePlatform",
    "BridgePlatform",
    "SoftwareAuthenticator",
]
