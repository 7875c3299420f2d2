"""Unit tests for ClientConfiguration and the default User-Agent."""

from dataclasses import FrozenInstanceError

import pytest

from authclient import ClientConfiguration, ConfigurationError
from authclient.coding import DEFAULT_DECODER, DEFAULT_ENCODER
from authclient.config import DEFAULT_REQUEST_ID_HEADER
from authclient.user_agent import SDK_NAME, SDK_VERSION, default_user_agent


class TestClientConfiguration:
    """Tests for ClientConfiguration validation and defaults."""

    def test_defaults(self):
        """Optional settings fall back to the library defaults."""
        config = ClientConfiguration(base_url="https://example.okta.com/")
        assert config.additional_headers == {}
        assert config.user_agent == default_user_agent()
        assert config.request_id_header == DEFAULT_REQUEST_ID_HEADER
        assert config.decoder is DEFAULT_DECODER
        assert config.encoder is DEFAULT_ENCODER
        assert config.timeout == 60.0

    def test_is_frozen(self):
        """Configurations cannot be mutated after construction."""
        config = ClientConfiguration(base_url="https://example.okta.com/")
        with pytest.raises(FrozenInstanceError):
            config.base_url = "https://other.example.com/"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "base_url",
        ["", "example.okta.com", "/api/v1/", "ftp://example.okta.com/", "https://"],
    )
    def test_rejects_non_absolute_base_url(self, base_url):
        """base_url must be an absolute http(s) URL."""
        with pytest.raises(ConfigurationError, match="base_url"):
            ClientConfiguration(base_url=base_url)

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout):
        """timeout must be positive when set."""
        with pytest.raises(ConfigurationError, match="timeout"):
            ClientConfiguration(base_url="https://example.okta.com/", timeout=timeout)

    def test_timeout_may_be_disabled(self):
        """A None timeout leaves the decision to the transport."""
        config = ClientConfiguration(base_url="https://example.okta.com/", timeout=None)
        assert config.timeout is None

    def test_rejects_blank_request_id_header(self):
        """An empty request ID header name is rejected; None disables lookup."""
        with pytest.raises(ConfigurationError, match="request_id_header"):
            ClientConfiguration(base_url="https://example.okta.com/", request_id_header=" ")
        config = ClientConfiguration(
            base_url="https://example.okta.com/", request_id_header=None
        )
        assert config.request_id_header is None

    def test_rejects_empty_user_agent(self):
        """An empty User-Agent is rejected."""
        with pytest.raises(ConfigurationError, match="user_agent"):
            ClientConfiguration(base_url="https://example.okta.com/", user_agent="")


class TestDefaultUserAgent:
    """Tests for default_user_agent."""

    def test_format(self):
        """The User-Agent names the SDK, Python and the platform."""
        parts = default_user_agent().split(" ")
        assert parts[0] == f"{SDK_NAME}/{SDK_VERSION}"
        assert parts[1].startswith("python/")
        assert len(parts) >= 3

    def test_is_cached(self):
        """The string is computed once per process."""
        assert default_user_agent() is default_user_agent()
