# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response validation pipeline.

``evaluate`` turns the raw outcome of a transport call into either an
APIResponse or an APIClientError. Both the async and the callback send paths
run through it, so validation, decoding and error mapping are identical for
the two.
"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, TypeVar

from ..coding import parse_http_date
from ..exceptions import (
    APIClientError,
    CannotParseResponseError,
    InvalidResponseError,
    MissingResponseError,
    ServerError,
    ServerReportedError,
    StatusCodeError,
)
from ..types.http import HTTPResponse
from ..types.rate_limit import parse_rate_limit_headers
from ..types.response import APIResponse, parse_link_header

if TYPE_CHECKING:
    from ..protocols.client import APIClientProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


def evaluate(
    client: "APIClientProtocol",
    result_type: type[T],
    body: bytes | None,
    response: Any,
    error: BaseException | None,
) -> APIResponse[T] | APIClientError:
    """Map a transport outcome to a response envelope or a typed error.

    Args:
        client: Client supplying the decoding, error parsing and request ID
            header rules.
        result_type: Type the response body is decoded into.
        body: Response body reported by the transport.
        response: Response metadata reported by the transport.
        error: Error reported by the transport.

    Returns:
        An APIResponse on success, otherwise exactly one APIClientError.
    """
    if error is not None:
        return _chained(ServerError(error), error)
    if body is None or response is None:
        return MissingResponseError()
    if not isinstance(response, HTTPResponse):
        return InvalidResponseError()

    if not response.is_success:
        return _status_error(client, body, response)

    validated_at = datetime.now(timezone.utc)
    try:
        result = client.decode(result_type, body)
    except APIClientError as e:
        return e
    except Exception as e:
        return _chained(CannotParseResponseError(e), e)

    request_id = None
    if client.request_id_header:
        request_id = response.header(client.request_id_header)

    return APIResponse(
        result=result,
        date=parse_http_date(response.header("Date")) or validated_at,
        links=parse_link_header(response.header("Link")),
        rate_info=parse_rate_limit_headers(response.headers),
        request_id=request_id,
    )


def _status_error(
    client: "APIClientProtocol", body: bytes, response: HTTPResponse
) -> APIClientError:
    try:
        domain_error = client.error_from(body)
    except Exception as e:
        logger.debug(f"Error body parsing failed for status {response.status_code}: {e}")
        domain_error = None

    if domain_error is not None:
        return ServerReportedError(domain_error, status_code=response.status_code)
    return StatusCodeError(response.status_code)


def _chained(error: APIClientError, cause: BaseException) -> APIClientError:
    error.__cause__ = cause
    return error


__all__ = ["evaluate"]
