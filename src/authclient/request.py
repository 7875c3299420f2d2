# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request descriptors.

An APIRequest describes an HTTP call abstractly: method, path, content type,
header overrides, query and body parameters. It is resolved against a client
into a concrete TransportRequest just before it is sent.

Concrete requests subclass APIRequest as frozen dataclasses and override the
class-level attributes (or turn them into properties):

    @dataclass(frozen=True)
    class UserInfoRequest(APIRequest):
        access_token: str
        path = "userinfo"

        @property
        def headers(self) -> dict[str, str]:
            return {"Authorization": f"Bearer {self.access_token}"}

For one-off calls, Request carries the same attributes as dataclass fields.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode, urljoin, urlsplit

from .exceptions import RequestBuildError
from .types.http import ContentType, HTTPMethod, TransportRequest

if TYPE_CHECKING:
    from .protocols.client import APIClientProtocol


class APIRequest:
    """Base class for request descriptors."""

    http_method: HTTPMethod = HTTPMethod.GET
    path: str = ""
    content_type: ContentType | None = None
    accepts_type: ContentType | None = ContentType.JSON
    headers: Mapping[str, str] | None = None
    query: Mapping[str, Any] | None = None
    body_parameters: Mapping[str, Any] | None = None
    timeout: float | None = None

    def url_for(self, client: "APIClientProtocol") -> str:
        """Resolve the request path against the client base URL.

        Absolute paths replace the base URL; relative paths are joined with
        RFC 3986 semantics, so a base URL meant to be extended should end
        with a slash.
        """
        if urlsplit(self.path).scheme:
            url = self.path
        else:
            url = urljoin(client.base_url, self.path)

        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise RequestBuildError(f"Cannot build a request URL from {self.path!r}")

        if self.query:
            separator = "&" if parts.query else "?"
            url = f"{url}{separator}{urlencode(list(self.query.items()), doseq=True)}"
        return url

    def encoded_body(self, client: "APIClientProtocol") -> bytes | None:
        """Encode ``body_parameters`` according to ``content_type``.

        Subclasses sending raw payloads override this method.
        """
        if self.body_parameters is None:
            return None

        content_type = self.content_type or ContentType.JSON
        if content_type is ContentType.FORM_ENCODED:
            pairs = [(k, v) for k, v in self.body_parameters.items() if v is not None]
            return urlencode(pairs, doseq=True).encode("utf-8")
        if content_type is ContentType.JSON:
            return client.encoder.encode(self.body_parameters)
        raise RequestBuildError(
            f"{type(self).__name__} must override encoded_body() for {content_type.value}"
        )

    def request_for(self, client: "APIClientProtocol") -> TransportRequest:
        """Resolve this descriptor into a concrete request.

        Resolution is deterministic: the same descriptor against the same
        client always yields an equal TransportRequest.

        Raises:
            RequestBuildError: If the URL or body cannot be built.
        """
        url = self.url_for(client)
        body = self.encoded_body(client)

        headers: dict[str, str] = {}
        if self.accepts_type is not None:
            headers["Accept"] = self.accepts_type.value
        if body is not None:
            headers["Content-Type"] = (self.content_type or ContentType.JSON).value

        _merge_headers(headers, client.additional_headers or {})
        _merge_headers(headers, self.headers or {})
        _merge_headers(headers, {"User-Agent": client.user_agent})

        return TransportRequest(
            method=self.http_method,
            url=url,
            headers=headers,
            body=body,
            timeout=self.timeout if self.timeout is not None else client.timeout,
        )


@dataclass(frozen=True)
class Request(APIRequest):
    """Ad-hoc request descriptor with every attribute as a field."""

    path: str = ""
    http_method: HTTPMethod = HTTPMethod.GET
    content_type: ContentType | None = None
    accepts_type: ContentType | None = ContentType.JSON
    headers: Mapping[str, str] | None = None
    query: Mapping[str, Any] | None = None
    body_parameters: Mapping[str, Any] | None = None
    timeout: float | None = None


def _merge_headers(target: dict[str, str], overrides: Mapping[str, str]) -> None:
    """Apply ``overrides`` onto ``target``, replacing names case-insensitively."""
    for name, value in overrides.items():
        for existing in [k for k in target if k.lower() == name.lower()]:
            del target[existing]
        target[name] = value


__all__ = [
    "APIRequest",
    "Request",
]
