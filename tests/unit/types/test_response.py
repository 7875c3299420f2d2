"""
Unit tests for response envelope types.

These tests verify:
- LinkRelation enum
- parse_link_header
- APIResponse dataclass
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from authclient.types import APIResponse, LinkRelation, parse_link_header


class TestLinkRelation:
    """Tests for LinkRelation enum."""

    def test_values(self):
        """Relations use their on-the-wire names."""
        assert LinkRelation.SELF.value == "self"
        assert LinkRelation.NEXT.value == "next"
        assert LinkRelation.PREVIOUS.value == "prev"

    def test_member_count(self):
        """LinkRelation has exactly 3 members."""
        assert len(LinkRelation) == 3


class TestParseLinkHeader:
    """Tests for parse_link_header."""

    def test_missing_header(self):
        """A missing or empty header yields no links."""
        assert parse_link_header(None) == {}
        assert parse_link_header("") == {}

    def test_single_link(self):
        """A single segment is parsed."""
        links = parse_link_header('<https://x/api/v1/users?after=a>; rel="next"')
        assert links == {LinkRelation.NEXT: "https://x/api/v1/users?after=a"}

    def test_malformed_segment_is_skipped(self):
        """A malformed middle segment does not invalidate its neighbours."""
        links = parse_link_header(
            '<https://x/2>; rel="next", <garbage>, <https://x/1>; rel="prev"'
        )
        assert links == {
            LinkRelation.NEXT: "https://x/2",
            LinkRelation.PREVIOUS: "https://x/1",
        }

    def test_unterminated_segment_is_skipped(self):
        """A segment missing its closing bracket does not swallow the next one."""
        links = parse_link_header('<https://x/2; rel="next", <https://x/1>; rel="prev"')
        assert links == {LinkRelation.PREVIOUS: "https://x/1"}

    def test_unknown_relation_is_dropped(self):
        """Relations outside the known set are ignored."""
        links = parse_link_header(
            '<https://x/a>; rel="last", <https://x/b>; rel="self"'
        )
        assert links == {LinkRelation.SELF: "https://x/b"}

    def test_relative_url_is_kept(self):
        """Relative references are returned as sent."""
        links = parse_link_header('</api/v1/users?after=x>; rel="next"')
        assert links == {LinkRelation.NEXT: "/api/v1/users?after=x"}

    @pytest.mark.parametrize("url", ["http://[::1", "", "https://x/a b"])
    def test_unparseable_url_is_dropped(self, url):
        """Empty, whitespace-containing and unparseable URLs are ignored."""
        links = parse_link_header(f'<{url}>; rel="next", <https://x/1>; rel="prev"')
        assert links == {LinkRelation.PREVIOUS: "https://x/1"}

    def test_later_duplicate_wins(self):
        """When a relation repeats, the last URL is kept."""
        links = parse_link_header('<https://x/1>; rel="next", <https://x/2>; rel="next"')
        assert links == {LinkRelation.NEXT: "https://x/2"}

    def test_url_containing_comma(self):
        """Commas inside a URL do not split the segment."""
        links = parse_link_header('<https://x/users?filter=a,b>; rel="self"')
        assert links == {LinkRelation.SELF: "https://x/users?filter=a,b"}

    def test_parsing_is_idempotent(self):
        """Parsing the same header twice yields equal results."""
        header = '<https://x/self>; rel="self", <https://x/next>; rel="next"'
        assert parse_link_header(header) == parse_link_header(header)


class TestAPIResponse:
    """Tests for APIResponse dataclass."""

    def test_defaults(self):
        """Optional metadata defaults to empty or None."""
        date = datetime(2024, 1, 1, tzinfo=timezone.utc)
        response = APIResponse(result={"ok": True}, date=date)
        assert response.result == {"ok": True}
        assert response.date == date
        assert response.links == {}
        assert response.rate_info is None
        assert response.request_id is None
        assert response.next_link is None
        assert response.previous_link is None

    def test_link_accessors(self):
        """next_link and previous_link read from links."""
        response = APIResponse(
            result=[],
            date=datetime.now(timezone.utc),
            links={LinkRelation.NEXT: "https://x/2", LinkRelation.PREVIOUS: "https://x/0"},
        )
        assert response.next_link == "https://x/2"
        assert response.previous_link == "https://x/0"

    def test_is_frozen(self):
        """APIResponse cannot be mutated after construction."""
        response = APIResponse(result=1, date=datetime.now(timezone.utc))
        with pytest.raises(FrozenInstanceError):
            response.result = 2  # type: ignore[misc]
