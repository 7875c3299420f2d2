# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for authclient components.

This module provides Protocol classes that define the interfaces for
pluggable components of the request pipeline.

Available protocols:
- TransportProtocol: Interface for HTTP client libraries executing requests
- DataTaskProtocol: Interface for pending callback-style requests
- APIClientProtocol: Interface for API clients
- SignInFlowProtocol / IdentityObserverProtocol: Interfaces of the external
  interactive sign-in collaborator

Supporting types:
- APIClientDelegate: Base class with no-op request hooks
"""

from .client import APIClientProtocol, SendCompletion
from .delegate import APIClientDelegate
from .sign_in import IdentityObserverProtocol, SignInFlowProtocol
from .transport import DataTaskProtocol, TransportCompletion, TransportProtocol

__all__ = [
    "APIClientDelegate",
    "APIClientProtocol",
    "DataTaskProtocol",
    "IdentityObserverProtocol",
    "SendCompletion",
    "SignInFlowProtocol",
    "TransportCompletion",
    "TransportProtocol",
]
