# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
JSON coding policy for request and response bodies.

Responses are decoded with JSONDecoder:

* object keys are converted to snake_case, so both ``access_token`` and
  ``accessToken`` land on an ``access_token`` field;
* the payload is validated into the target type with a pydantic TypeAdapter,
  so BaseModel subclasses, dataclasses, TypedDicts and builtin containers are
  all valid targets;
* dates use the fixed ISO-8601 format ``yyyy-MM-ddTHH:mm:ss.SSSZ`` in UTC.

A type that needs different rules implements JSONDecodable and returns its
own decoder from ``json_decoder()``.

JSONEncoder writes request bodies with the same date format and sorted keys.
"""

import dataclasses
import json
import re
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from functools import lru_cache
from types import UnionType
from typing import (
    Annotated,
    Any,
    Protocol,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    runtime_checkable,
)

from pydantic import BaseModel, TypeAdapter
from typing_extensions import is_typeddict

T = TypeVar("T")

ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
"""strptime format accepted by parse_iso_date (``Z`` is accepted for UTC)."""

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def format_iso_date(value: datetime) -> str:
    """Format a datetime with millisecond precision in UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso_date(value: str) -> datetime:
    """Parse a date written by format_iso_date.

    Raises:
        ValueError: If the string does not follow the fixed format.
    """
    return datetime.strptime(value, ISO_DATE_FORMAT).astimezone(timezone.utc)


def parse_http_date(value: str | None) -> datetime | None:
    """Parse an RFC 7231 HTTP-date (``Sun, 06 Nov 1994 08:49:37 GMT``) as UTC.

    Parsing does not depend on the process locale. Returns None for a missing
    or malformed value.
    """
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_snake_case(key: str) -> str:
    """Convert a camelCase key to snake_case; snake_case keys are unchanged."""
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def convert_keys_to_snake_case(value: Any) -> Any:
    """Recursively convert the object keys of a decoded JSON value."""
    if isinstance(value, dict):
        return {
            to_snake_case(k) if isinstance(k, str) else k: convert_keys_to_snake_case(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [convert_keys_to_snake_case(item) for item in value]
    return value


@lru_cache(maxsize=256)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def apply_date_format(
    target: Any, value: Any, parse: Callable[[str], datetime] = parse_iso_date
) -> Any:
    """Parse the ``datetime`` values of a decoded JSON payload with ``parse``.

    ``target`` is walked alongside ``value``: BaseModel, dataclass and
    TypedDict fields, ``list``/``tuple``/``set`` items, ``dict`` values and
    ``Optional`` members typed as ``datetime`` are replaced by the parsed,
    timezone-aware value, so pydantic never applies its own lenient rules to
    them. Parts of the payload that are not dates are returned unchanged.

    Raises:
        ValueError: If a date is not a string in the expected format.
    """
    if value is None:
        return None

    origin = get_origin(target)
    if origin is Annotated:
        return apply_date_format(get_args(target)[0], value, parse)

    if target is datetime:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a date string, got {value!r}")
        return parse(value)

    if origin is Union or origin is UnionType:
        members = [arg for arg in get_args(target) if arg is not type(None)]
        if len(members) == 1:
            return apply_date_format(members[0], value, parse)
        # Ambiguous unions are left to pydantic.
        return value

    if isinstance(value, list) and origin in (list, set, frozenset, Sequence):
        (item_type,) = get_args(target) or (Any,)
        return [apply_date_format(item_type, item, parse) for item in value]

    if isinstance(value, list) and origin is tuple:
        args = get_args(target)
        if len(args) == 2 and args[1] is Ellipsis:
            return [apply_date_format(args[0], item, parse) for item in value]
        return [apply_date_format(t, item, parse) for t, item in zip(args, value)] + value[
            len(args) :
        ]

    if isinstance(value, dict) and origin in (dict, Mapping):
        args = get_args(target)
        if len(args) == 2:
            return {k: apply_date_format(args[1], v, parse) for k, v in value.items()}
        return value

    if isinstance(value, dict) and isinstance(target, type):
        if issubclass(target, BaseModel):
            field_types = {}
            for name, field in target.model_fields.items():
                field_types[name] = field.annotation
                if field.alias:
                    field_types[field.alias] = field.annotation
        elif dataclasses.is_dataclass(target) or is_typeddict(target):
            field_types = get_type_hints(target, include_extras=True)
        else:
            return value
        return {
            key: apply_date_format(field_types[key], item, parse)
            if key in field_types
            else item
            for key, item in value.items()
        }

    return value


class JSONDecoder:
    """
    Decoding policy applied to response bodies.

    Instances hold no per-request state and can be shared between threads
    and concurrent requests.

    Args:
        convert_keys: Convert object keys to snake_case before validation.
        date_parser: Parser applied to every ``datetime`` in the target type;
            None leaves dates to pydantic's own parsing.
        context: Extra values made available to pydantic validators through
            ``ValidationInfo.context``.
    """

    def __init__(
        self,
        *,
        convert_keys: bool = True,
        date_parser: Callable[[str], datetime] | None = parse_iso_date,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.convert_keys = convert_keys
        self.date_parser = date_parser
        self.context: dict[str, Any] = dict(context or {})

    def decode(
        self,
        target: type[T],
        data: bytes | str,
        context: Mapping[str, Any] | None = None,
    ) -> T:
        """Decode ``data`` into ``target``.

        ``bytes`` and ``str`` targets receive the raw body; a ``None`` target
        ignores it (for 204 responses).

        Raises:
            json.JSONDecodeError: If the body is not valid JSON.
            ValueError: If a date does not follow the fixed format.
            pydantic.ValidationError: If the payload does not fit ``target``.
        """
        if target is None or target is type(None):
            return None  # type: ignore[return-value]
        if target is bytes:
            return data if isinstance(data, bytes) else data.encode("utf-8")  # type: ignore[return-value]
        if target is str:
            return data.decode("utf-8") if isinstance(data, bytes) else data  # type: ignore[return-value]

        payload = json.loads(data)
        if self.convert_keys:
            payload = convert_keys_to_snake_case(payload)
        if self.date_parser is not None:
            payload = apply_date_format(target, payload, self.date_parser)

        merged = {**self.context, **(context or {})}
        result: T = _adapter_for(target).validate_python(payload, context=merged)
        return result


class JSONEncoder:
    """
    Encoding policy applied to JSON request bodies.

    Datetimes are written with format_iso_date, enums by value, pydantic
    models and dataclasses as objects.
    """

    def __init__(self, *, sort_keys: bool = True, indent: int | None = None) -> None:
        self.sort_keys = sort_keys
        self.indent = indent

    def encode(self, value: Any) -> bytes:
        return json.dumps(
            self.prepare(value),
            sort_keys=self.sort_keys,
            indent=self.indent,
        ).encode("utf-8")

    def prepare(self, value: Any) -> Any:
        """Convert ``value`` into plain JSON-compatible Python objects."""
        if isinstance(value, datetime):
            return format_iso_date(value)
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, Enum):
            return self.prepare(value.value)
        if isinstance(value, BaseModel):
            return self.prepare(value.model_dump())
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return self.prepare(dataclasses.asdict(value))
        if isinstance(value, Mapping):
            return {str(k): self.prepare(v) for k, v in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.prepare(item) for item in value]
        return value


@runtime_checkable
class JSONDecodable(Protocol):
    """
    Opt-in for types that provide their own decoding policy.

    Example:
        class LegacyProfile(BaseModel):
            userName: str

            @classmethod
            def json_decoder(cls) -> JSONDecoder:
                return JSONDecoder(convert_keys=False)
    """

    @classmethod
    def json_decoder(cls) -> JSONDecoder: ...


def decoder_for(target: Any, default: JSONDecoder) -> JSONDecoder:
    """Return the custom decoder of ``target`` if it provides one, else ``default``."""
    try:
        opted_in = isinstance(target, type) and issubclass(target, JSONDecodable)
    except TypeError:
        # Parameterized generics such as list[int] are not classes.
        return default
    if opted_in:
        return target.json_decoder()
    return default


DEFAULT_DECODER = JSONDecoder()
DEFAULT_ENCODER = JSONEncoder()


__all__ = [
    "DEFAULT_DECODER",
    "DEFAULT_ENCODER",
    "ISO_DATE_FORMAT",
    "apply_date_format",
    "JSONDecodable",
    "JSONDecoder",
    "JSONEncoder",
    "convert_keys_to_snake_case",
    "decoder_for",
    "format_iso_date",
    "parse_http_date",
    "parse_iso_date",
    "to_snake_case",
]
