# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
OAuth2 client bound to an authorization server.
"""

import dataclasses
from typing import Any
from urllib.parse import urlsplit

from typing_extensions import Self

from ..client.base import BaseAPIClient
from ..config import ClientConfiguration
from ..exceptions import APIClientError
from ..protocols.client import SendCompletion
from ..protocols.transport import DataTaskProtocol, TransportProtocol
from ..types.errors import OAuth2ErrorBody
from ..types.response import APIResponse
from .token import Token
from .token_request import TokenRequest


def oauth2_base_url(issuer: str) -> str:
    """Base URL of the OAuth2 endpoints for ``issuer``.

    The org authorization server (``https://example.okta.com``) serves them
    under ``/oauth2/v1/``; custom authorization servers, whose issuer already
    contains ``/oauth2/<id>``, serve them under ``/v1/``.
    """
    issuer = issuer.rstrip("/")
    if "/oauth2" in urlsplit(issuer).path:
        return f"{issuer}/v1/"
    return f"{issuer}/oauth2/v1/"


class OAuth2Client(BaseAPIClient):
    """
    API client for an OAuth2 authorization server.

    Token requests go through the same pipeline as any other request; this
    class only adds OAuth2 error parsing and token exchange helpers.

    Example:
        >>> client = OAuth2Client.for_issuer("https://example.okta.com", transport)
        >>> response = await client.exchange(
        ...     TokenRequest(
        ...         client_id="0oa...",
        ...         redirect_uri="com.example:/callback",
        ...         grant_type=GrantType.AUTHORIZATION_CODE,
        ...         grant_value=code,
        ...         pkce=pkce,
        ...     )
        ... )
        >>> response.result.access_token
    """

    def __init__(
        self,
        configuration: ClientConfiguration,
        transport: TransportProtocol,
        issuer: str | None = None,
    ) -> None:
        super().__init__(configuration, transport)
        self.issuer = issuer or configuration.base_url

    @classmethod
    def for_issuer(
        cls, issuer: str, transport: TransportProtocol, **options: Any
    ) -> Self:
        """Create a client whose base URL is the issuer's OAuth2 endpoint root.

        Args:
            issuer: Issuer URL of the authorization server
            transport: Transport used to execute requests
            **options: Further ClientConfiguration fields
        """
        configuration = ClientConfiguration(base_url=oauth2_base_url(issuer), **options)
        return cls(configuration, transport, issuer=issuer)

    def error_from(self, data: bytes) -> Any | None:
        """Prefer the OAuth2 error format, then the management API format."""
        try:
            return self.configuration.decoder.decode(OAuth2ErrorBody, data)
        except ValueError:
            return super().error_from(data)

    async def exchange(self, request: TokenRequest) -> APIResponse[Token]:
        """Exchange a grant for tokens.

        Raises:
            APIClientError: If the exchange fails.
        """
        return self._stamp(await self.send(request, Token))

    def exchange_with_callback(
        self, request: TokenRequest, completion: SendCompletion
    ) -> DataTaskProtocol | None:
        """Callback form of ``exchange``."""

        def on_complete(outcome: APIResponse[Any] | APIClientError) -> None:
            if isinstance(outcome, APIClientError):
                completion(outcome)
            else:
                completion(self._stamp(outcome))

        return self.send_with_callback(request, Token, on_complete)

    @staticmethod
    def _stamp(response: APIResponse[Token]) -> APIResponse[Token]:
        token = response.result.model_copy(update={"issued_at": response.date})
        return dataclasses.replace(response, result=token)


__all__ = ["OAuth2Client", "oauth2_base_url"]
