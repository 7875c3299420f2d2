# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocols for the interactive sign-in collaborator.

The sign-in surface (browser, native UI) lives outside this library. Callers
start it through SignInFlowProtocol and learn about its outcome through
IdentityObserverProtocol. Any UI object a flow presents from is looked up,
never owned, by the flow.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SignInFlowProtocol(Protocol):
    """Entry point for interactive sign-in."""

    def begin_sign_in(self, **options: Any) -> None:
        """Start interactive sign-in; completion is reported to identity observers."""
        ...


@runtime_checkable
class IdentityObserverProtocol(Protocol):
    """Observer notified when the current identity changes."""

    def identity_changed(self, token: Any | None) -> None:
        """Called with the new token, or None when the user signed out or cancelled."""
        ...
