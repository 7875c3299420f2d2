# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Proof Key for Code Exchange (RFC 7636)."""

import base64
import hashlib
import re
import secrets
from dataclasses import dataclass

from typing_extensions import Self

_VERIFIER_PATTERN = re.compile(r"^[A-Za-z0-9\-._~]{43,128}$")


def _base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def s256_challenge(code_verifier: str) -> str:
    """Return the unpadded base64url SHA-256 digest of ``code_verifier``."""
    return _base64url(hashlib.sha256(code_verifier.encode("ascii")).digest())


@dataclass(frozen=True)
class PKCE:
    """
    A PKCE verifier and its S256 challenge.

    The challenge is sent with the authorization request; the verifier is
    sent with the token request that redeems the authorization code.

    Attributes:
        code_verifier: High-entropy secret kept by the client
        code_challenge: S256 challenge derived from the verifier
        method: Challenge method (always ``S256``)
    """

    code_verifier: str
    code_challenge: str
    method: str = "S256"

    def __post_init__(self) -> None:
        if not _VERIFIER_PATTERN.match(self.code_verifier):
            raise ValueError(
                "code_verifier must be 43-128 characters of [A-Za-z0-9-._~]"
            )

    @classmethod
    def generate(cls, num_bytes: int = 32) -> Self:
        """Create a PKCE pair from ``num_bytes`` of random data."""
        verifier = _base64url(secrets.token_bytes(num_bytes))
        return cls(code_verifier=verifier, code_challenge=s256_challenge(verifier))

    @classmethod
    def from_verifier(cls, code_verifier: str) -> Self:
        """Build a PKCE pair for an existing verifier."""
        return cls(code_verifier=code_verifier, code_challenge=s256_challenge(code_verifier))

    def authorization_parameters(self) -> dict[str, str]:
        """Parameters to add to the authorization request."""
        return {
            "code_challenge": self.code_challenge,
            "code_challenge_method": self.method,
        }


__all__ = ["PKCE", "s256_challenge"]
