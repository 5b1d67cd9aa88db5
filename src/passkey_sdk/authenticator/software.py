"""In-process virtual platform authenticator.

Behaves like the virtual authenticators browsers expose for automated testing:
credentials are discoverable, live only in memory, and every ceremony is
user-verified unless configured otherwise.
"""

from __future__ import annotations

import base64
import hashlib
import json
import logging
import secrets
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlparse

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from ..ceremony.options import ES256, RS256, CreationOptions, RequestOptions, websafe_encode
from ..errors import NotAllowedError, NotSupportedError, SecurityError
from .base import Assertion, CreatedCredential, PlatformCredentials

logger = logging.getLogger(__name__)

NOT_ALLOWED_MESSAGE = "The operation either timed out or was not allowed."

FLAG_USER_PRESENT = 0x01
FLAG_USER_VERIFIED = 0x04


@dataclass
class StoredCredential:
    """A credential held by the virtual authenticator."""

    credential_id: str
    rp_id: str
    user_handle: bytes
    algorithm: int
    private_key: ec.EllipticCurvePrivateKey | rsa.RSAPrivateKey
    sign_count: int = 0

    def sign(self, data: bytes) -> bytes:
        if self.algorithm == ES256:
            return self.private_key.sign(data, ec.ECDSA(hashes.SHA256()))
        return self.private_key.sign(data, padding.PKCS1v15(), hashes.SHA256())


def _generate_key(algorithm: int) -> ec.EllipticCurvePrivateKey | rsa.RSAPrivateKey:
    if algorithm == ES256:
        return ec.generate_private_key(ec.SECP256R1())
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


class SoftwareAuthenticator(PlatformCredentials):
    """Platform authenticator backed by ``cryptography`` key pairs.

    Args:
        origin: Origin the simulated page is served from.
        algorithms: COSE algorithms this authenticator can generate keys for.
        supported: Report WebAuthn capability to callers.
        user_verified: Whether the simulated user passes verification.
    """

    def __init__(
        self,
        origin: str,
        algorithms: Iterable[int] = (ES256, RS256),
        supported: bool = True,
        user_verified: bool = True,
    ) -> None:
        self.origin = origin
        self.algorithms = tuple(algorithms)
        self.supported = supported
        self.user_verified = user_verified
        self.cancel_next = False
        self.credentials: dict[str, StoredCredential] = {}

    async def is_supported(self) -> bool:
        return self.supported

    async def create_credential(self, options: CreationOptions) -> CreatedCredential | None:
        self._check_rp_id(options.rp.id)
        self._check_user(options.authenticator_selection.user_verification)

        algorithm = next((alg for alg in options.algorithms if alg in self.algorithms), None)
        if algorithm is None:
            raise NotSupportedError("None of the requested algorithms are supported.")

        # Discoverable credentials replace any earlier one for the same account.
        for cred_id, existing in list(self.credentials.items()):
            if existing.rp_id == options.rp.id and existing.user_handle == options.user.id:
                del self.credentials[cred_id]

        private_key = _generate_key(algorithm)
        credential_id = base64.b64encode(secrets.token_bytes(16)).decode("ascii")
        self.credentials[credential_id] = StoredCredential(
            credential_id=credential_id,
            rp_id=options.rp.id,
            user_handle=options.user.id,
            algorithm=algorithm,
            private_key=private_key,
        )
        public_key = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        logger.debug(f"Virtual authenticator created credential (alg {algorithm}) for {options.rp.id}")
        return CreatedCredential(
            id=credential_id,
            public_key=base64.b64encode(public_key).decode("ascii"),
        )

    async def get_assertion(self, options: RequestOptions) -> Assertion | None:
        self._check_rp_id(options.rp_id)
        self._check_user(options.user_verification)

        allowed = {descriptor.id for descriptor in options.allow_credentials}
        credential = next(
            (
                cred
                for cred in self.credentials.values()
                if cred.rp_id == options.rp_id and (not allowed or cred.credential_id in allowed)
            ),
            None,
        )
        if credential is None:
            raise NotAllowedError(NOT_ALLOWED_MESSAGE)

        client_data = json.dumps(
            {
                "type": "webauthn.get",
                "challenge": websafe_encode(options.challenge),
                "origin": self.origin,
                "crossOrigin": False,
            },
            separators=(",", ":"),
        ).encode()

        credential.sign_count += 1
        flags = FLAG_USER_PRESENT | (FLAG_USER_VERIFIED if self.user_verified else 0)
        authenticator_data = (
            hashlib.sha256(options.rp_id.encode()).digest()
            + bytes([flags])
            + struct.pack(">I", credential.sign_count)
        )
        signature = credential.sign(authenticator_data + hashlib.sha256(client_data).digest())

        return Assertion(
            credential_id=credential.credential_id,
            client_data_json=websafe_encode(client_data),
            authenticator_data=websafe_encode(authenticator_data),
            signature=websafe_encode(signature),
            user_handle=websafe_encode(credential.user_handle),
        )

    def clear_credentials(self) -> None:
        self.credentials.clear()

    def _check_rp_id(self, rp_id: str) -> None:
        host = urlparse(self.origin).hostname or ""
        if rp_id != host and not host.endswith(f".{rp_id}"):
            raise SecurityError(
                "The relying party ID is not a registrable domain suffix of, "
                "nor equal to the current domain."
            )

    def _check_user(self, user_verification: str) -> None:
        if self.cancel_next:
            self.cancel_next = False
            raise NotAllowedError(NOT_ALLOWED_MESSAGE)
        if user_verification == "required" and not self.user_verified:
            raise NotAllowedError(NOT_ALLOWED_MESSAGE)
