# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""OAuth2 grant types."""

from enum import Enum


class GrantType(Enum):
    """
    OAuth2 grant types supported by the token endpoint.

    The value is the ``grant_type`` string sent to the server. Each grant
    type also names the body key its grant value is sent under, see
    ``body_key``.
    """

    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"
    PASSWORD = "password"
    DEVICE_CODE = "urn:ietf:params:oauth:grant-type:device_code"
    JWT_BEARER = "urn:ietf:params:oauth:grant-type:jwt-bearer"
    TOKEN_EXCHANGE = "urn:ietf:params:oauth:grant-type:token-exchange"

    @property
    def body_key(self) -> str:
        """Token request body key that carries this grant's value."""
        return _BODY_KEYS[self]


_BODY_KEYS: dict[GrantType, str] = {
    GrantType.AUTHORIZATION_CODE: "code",
    GrantType.REFRESH_TOKEN: "refresh_token",
    GrantType.PASSWORD: "password",
    GrantType.DEVICE_CODE: "device_code",
    GrantType.JWT_BEARER: "assertion",
    GrantType.TOKEN_EXCHANGE: "subject_token",
}


__all__ = ["GrantType"]
