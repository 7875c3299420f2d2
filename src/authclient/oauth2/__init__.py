# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""OAuth2 token exchange.

This subpackage builds OAuth2 token requests on top of the generic request
pipeline:

- GrantType: grant types and the body key each grant value is sent under
- PKCE: verifier / challenge pairs for public clients
- TokenRequest: the token endpoint request descriptor
- Token: the decoded token response
- OAuth2Client: BaseAPIClient bound to an authorization server
"""

from .client import OAuth2Client, oauth2_base_url
from .grant_type import GrantType
from .pkce import PKCE, s256_challenge
from .token import Token
from .token_request import TokenRequest

__all__ = [
    "PKCE",
    "GrantType",
    "OAuth2Client",
    "Token",
    "TokenRequest",
    "oauth2_base_url",
    "s256_challenge",
]
