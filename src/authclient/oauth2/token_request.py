# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Token endpoint request."""

from dataclasses import dataclass

from ..request import APIRequest
from ..types.http import ContentType, HTTPMethod
from .grant_type import GrantType
from .pkce import PKCE


@dataclass(frozen=True)
class TokenRequest(APIRequest):
    """
    Request exchanging a grant for tokens at the OAuth2 token endpoint.

    The body always carries ``client_id``, ``redirect_uri``, ``grant_type``
    and the grant value under the grant type's body key. ``client_secret`` is
    added for confidential clients and ``code_verifier`` when a PKCE pair is
    supplied.

    Attributes:
        client_id: OAuth2 client identifier
        redirect_uri: Redirect URI registered for the client
        grant_type: Grant being exchanged
        grant_value: The grant itself (authorization code, refresh token, ...)
        client_secret: Secret of a confidential client
        pkce: PKCE pair used for the authorization request
    """

    client_id: str
    redirect_uri: str
    grant_type: GrantType
    grant_value: str
    client_secret: str | None = None
    pkce: PKCE | None = None

    http_method = HTTPMethod.POST
    path = "token"
    content_type = ContentType.FORM_ENCODED

    @property
    def body_parameters(self) -> dict[str, str]:  # type: ignore[override]
        body = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "grant_type": self.grant_type.value,
            self.grant_type.body_key: self.grant_value,
        }
        if self.client_secret is not None:
            body["client_secret"] = self.client_secret
        if self.pkce is not None:
            body["code_verifier"] = self.pkce.code_verifier
        return body


__all__ = ["TokenRequest"]
