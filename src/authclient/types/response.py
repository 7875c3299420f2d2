# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response envelope types and Link header parsing.

This module defines the typed wrapper returned for every successful request
together with the pagination link relations it can carry.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar
from urllib.parse import urlsplit

from .rate_limit import RateLimitInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

LINK_PATTERN = re.compile(r'<([^>]+)>; rel="([^"]+)"')
LINK_SEPARATOR = re.compile(r",\s*(?=<)")


class LinkRelation(Enum):
    """Link relations recognized in the ``Link`` response header."""

    SELF = "self"
    NEXT = "next"
    PREVIOUS = "prev"


@dataclass(frozen=True)
class APIResponse(Generic[T]):
    """
    Typed result of a successful API request.

    Attributes:
        result: The decoded response body
        date: Server date of the response, or the time the response was
            validated when the server sent no usable Date header
        links: Pagination links keyed by relation
        rate_info: Rate limit counters, None when the server sent none
        request_id: Server-assigned request identifier, if any
    """

    result: T
    date: datetime
    links: Mapping[LinkRelation, str] = field(default_factory=dict)
    rate_info: RateLimitInfo | None = None
    request_id: str | None = None

    @property
    def next_link(self) -> str | None:
        return self.links.get(LinkRelation.NEXT)

    @property
    def previous_link(self) -> str | None:
        return self.links.get(LinkRelation.PREVIOUS)


def parse_link_header(value: str | None) -> dict[LinkRelation, str]:
    """Parse an RFC 8288 ``Link`` header into a relation -> URL mapping.

    Each ``<url>; rel="name"`` segment is handled on its own: a segment with
    an unrecognized relation or an unparseable URL is skipped without affecting
    the others. When a relation appears more than once, the last one wins.

    Args:
        value: The raw header value, or None.

    Returns:
        Mapping of recognized relations to URLs (empty when nothing matched).
    """
    if not value:
        return {}

    links: dict[LinkRelation, str] = {}
    for segment in LINK_SEPARATOR.split(value):
        match = LINK_PATTERN.match(segment.strip())
        if match is None:
            logger.debug(f"Skipping malformed link segment {segment!r}")
            continue
        url, rel = match.group(1).strip(), match.group(2).strip()
        try:
            relation = LinkRelation(rel)
        except ValueError:
            logger.debug(f"Skipping link with unknown relation {rel!r}")
            continue
        if not _is_usable_url(url):
            logger.debug(f"Skipping link with unparseable URL {url!r}")
            continue
        links[relation] = url
    return links


def _is_usable_url(url: str) -> bool:
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        urlsplit(url)
    except ValueError:
        return False
    # Relative references are kept; they resolve against the base URL when
    # passed back as a Request path.
    return True


__all__ = [
    "APIResponse",
    "LINK_PATTERN",
    "LinkRelation",
    "parse_link_header",
]
