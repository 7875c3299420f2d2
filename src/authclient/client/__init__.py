# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
API client implementation.

Exported:
    BaseAPIClient: Default implementation of APIClientProtocol.
    evaluate: The validation pipeline shared by the async and callback paths.
"""

from .base import BaseAPIClient
from .pipeline import evaluate

__all__ = [
    "BaseAPIClient",
    "evaluate",
]
