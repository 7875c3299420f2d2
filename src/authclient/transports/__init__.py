# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Transport implementations.

Available transports:
- HttpxTransport: httpx-based transport (requires httpx extra)

Note: HttpxTransport is lazily imported to avoid requiring the httpx package
when callers bring their own TransportProtocol implementation.
"""

from typing import TYPE_CHECKING, cast

# Lazy imports for optional httpx transport
if TYPE_CHECKING:
    from authclient.transports.httpx_transport import HttpxDataTask, HttpxTransport

__all__ = [
    "HttpxDataTask",
    "HttpxTransport",
]


def __getattr__(name: str) -> type:
    """Lazy import for optional httpx transport components."""
    if name in ("HttpxTransport", "HttpxDataTask"):
        try:
            from authclient.transports import httpx_transport

            return cast(type, getattr(httpx_transport, name))
        except ImportError as e:  # pragma: no cover
            raise ImportError(  # pragma: no cover
                f"'{name}' requires the 'httpx' extra. "
                "Install with: pip install authclient[httpx]"
            ) from e
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
