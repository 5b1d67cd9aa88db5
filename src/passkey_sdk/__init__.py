from .authenticator import BridgePlatform, PlatformCredentials, SoftwareAuthenticator
from .ceremony import PasskeyOrchestrator
from .config import Settings
from .context import AuthContext
from .registry import CredentialRecord, LocalCredentialRegistry
from .runtime import run
from .session import SessionState
from .types import AuthOutcome, PasskeySummary

__all__ = [
    "AuthContext",
    "AuthOutcome",
    "BridgePlatform",
    "CredentialRecord",
    "LocalCredentialRegistry",
    "PasskeyOrchestrator",
    "PasskeySummary",
    "PlatformCredentials",
    "SessionState",
    "Settings",
    "SoftwareAuthenticator",
    "run",
]
