"""Shared helpers: header multimaps, name checks, encodings, dates, signing."""

from __future__ import annotations

import base64
import hashlib
import hmac
import ipaddress
import re
from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime, timezone
from email.utils import format_datetime
from urllib.parse import quote

from .errors import InvalidBucketNameError

_STRICT_BUCKET_RE = re.compile(r"^[a-z0-9][a-z0-9.\-]{1,61}[a-z0-9]$")
_RELAXED_BUCKET_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9.\-_:]{1,61}[A-Za-z0-9]$")


class Multimap:
    """An insertion-ordered mapping from a key to one or more string values."""

    def __init__(
        self,
        pairs: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        self._data: dict[str, list[str]] = {}
        if pairs is None:
            return
        if isinstance(pairs, Multimap):
            pairs = list(pairs.items())
        elif isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to the values held under ``key``."""
        self._data.setdefault(key, []).append(value)

    def get(self, key: str) -> str | None:
        """Return the first value for ``key``, or None when it is absent."""
        values = self._data.get(key)
        return values[0] if values else None

    def get_all(self, key: str) -> list[str]:
        """Return every value for ``key`` in insertion order."""
        return list(self._data.get(key, ()))

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield each (key, value) pair."""
        for key, values in self._data.items():
            for value in values:
                yield key, value

    def keys(self) -> list[str]:
        return list(self._data)

    def copy(self) -> Multimap:
        return Multimap(self)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multimap):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Multimap({list(self.items())!r})"


def merge(target: Multimap, source: Multimap) -> None:
    """Add every pair of ``source`` into ``target``."""
    for key, value in source.items():
        target.add(key, value)


def _is_ip_address(name: str) -> bool:
    try:
        ipaddress.ip_address(name)
    except ValueError:
        return False
    return True


def check_bucket_name(bucket_name: str, strict: bool) -> None:
    """Raise InvalidBucketNameError when the name breaks the naming rules."""
    name = bucket_name.strip()
    if not name:
        raise InvalidBucketNameError("bucket name cannot be empty")
    if len(name) < 3:
        raise InvalidBucketNameError(
            "bucket name cannot be less than 3 characters"
        )
    if len(name) > 63:
        raise InvalidBucketNameError(
            "bucket name cannot be greater than 63 characters"
        )
    if _is_ip_address(name):
        raise InvalidBucketNameError("bucket name cannot be an IP address")
    if ".." in name or ".-" in name or "-." in name:
        raise InvalidBucketNameError(
            "bucket name contains invalid successive characters '..', '.-' or '-.'"
        )
    pattern = _STRICT_BUCKET_RE if strict else _RELAXED_BUCKET_RE
    if not pattern.match(name):
        raise InvalidBucketNameError(
            f"bucket name does not follow S3 standards: {bucket_name}"
        )


def urlencode(value: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(value, safe="")


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(time: datetime) -> datetime:
    if time.tzinfo is None:
        return time.replace(tzinfo=timezone.utc)
    return time.astimezone(timezone.utc)


def to_iso8601utc(time: datetime) -> str:
    """Format as ISO 8601 UTC with millisecond precision."""
    t = _as_utc(time)
    return t.strftime("%Y-%m-%dT%H:%M:%S.") + f"{t.microsecond // 1000:03d}Z"


def to_http_header_value(time: datetime) -> str:
    """Format as an HTTP date, e.g. for If-Modified-Since."""
    return format_datetime(_as_utc(time), usegmt=True)


def to_amz_date(time: datetime) -> str:
    """Format as the compact timestamp used by x-amz-date."""
    return _as_utc(time).strftime("%Y%m%dT%H%M%SZ")


def to_signer_date(time: datetime) -> str:
    """Format as the date part of a signing scope."""
    return _as_utc(time).strftime("%Y%m%d")


def b64encode(data: str | bytes) -> str:
    """Base64-encode text or bytes and return the result as text."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return base64.b64encode(raw).decode("ascii")


def _hmac(key: bytes, message: str) -> bytes:
    return hmac.new(key, message.encode("utf-8"), hashlib.sha256).digest()


def post_presign_v4(data: str, secret_key: str, date: datetime, region: str) -> str:
    """Return the hex signature V4 of a base64 post policy."""
    key = _hmac(("AWS4" + secret_key).encode("utf-8"), to_signer_date(date))
    key = _hmac(key, region)
    key = _hmac(key, "s3")
    key = _hmac(key, "aws4_request")
    return hmac.new(key, data.encode("utf-8"), hashlib.sha256).hexdigest()