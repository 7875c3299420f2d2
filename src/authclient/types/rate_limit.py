# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Rate limit types and header parsing.

This module defines the rate limit counters reported by the server and the
parser that extracts them from response headers.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

RATE_LIMIT_LIMIT_HEADER = "x-rate-limit-limit"
RATE_LIMIT_REMAINING_HEADER = "x-rate-limit-remaining"
RATE_LIMIT_RESET_HEADER = "x-rate-limit-reset"


@dataclass(frozen=True)
class RateLimitInfo:
    """
    Rate limit counters parsed from an API response.

    Every field is optional; a header that is missing or malformed leaves its
    field as None. When none of the headers yield a value the parser returns
    None instead of an instance with empty fields.

    Attributes:
        limit: Maximum number of requests allowed in the current window
        remaining: Requests remaining in the current window
        reset: UTC time at which the current window resets
    """

    limit: int | None = None
    remaining: int | None = None
    reset: datetime | None = None

    @property
    def delay(self) -> float | None:
        """Seconds until the window resets, or None if the reset time is unknown."""
        if self.reset is None:
            return None
        return max(0.0, (self.reset - datetime.now(timezone.utc)).total_seconds())


def parse_rate_limit_headers(headers: Mapping[str, str]) -> RateLimitInfo | None:
    """Parse rate limit information from HTTP response headers.

    Header names are matched case-insensitively. The reset header is an epoch
    timestamp in seconds.

    Args:
        headers: HTTP response headers.

    Returns:
        A RateLimitInfo with whichever counters were present and parseable,
        or None if none were.
    """
    normalized = {str(k).lower(): v for k, v in headers.items()}

    limit = _parse_int(normalized.get(RATE_LIMIT_LIMIT_HEADER))
    remaining = _parse_int(normalized.get(RATE_LIMIT_REMAINING_HEADER))
    reset_epoch = _parse_int(normalized.get(RATE_LIMIT_RESET_HEADER))

    reset = None
    if reset_epoch is not None:
        try:
            reset = datetime.fromtimestamp(reset_epoch, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Ignoring out of range rate limit reset: {reset_epoch}")

    if limit is None and remaining is None and reset is None:
        return None
    return RateLimitInfo(limit=limit, remaining=remaining, reset=reset)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return None


__all__ = [
    "RATE_LIMIT_LIMIT_HEADER",
    "RATE_LIMIT_REMAINING_HEADER",
    "RATE_LIMIT_RESET_HEADER",
    "RateLimitInfo",
    "parse_rate_limit_headers",
]
