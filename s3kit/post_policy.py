"""Post policy form data for browser uploads straight to a bucket."""

from __future__ import annotations

import json
from datetime import datetime

from .errors import PostPolicyError
from .utils import (
    b64encode,
    check_bucket_name,
    post_presign_v4,
    to_amz_date,
    to_iso8601utc,
    to_signer_date,
    utc_now,
)

ALGORITHM = "AWS4-HMAC-SHA256"
_EQ = "eq"
_STARTS_WITH = "starts-with"
_RESERVED_ELEMENTS = frozenset(
    {
        "bucket",
        "x-amz-algorithm",
        "x-amz-credential",
        "x-amz-date",
        "policy",
        "x-amz-signature",
    }
)
_EQ_UNSUPPORTED = frozenset(
    {"success_action_redirect", "redirect", "content-length-range"}
)
_STARTS_WITH_UNSUPPORTED = frozenset({"success_action_status", "content-length-range"})


def _trim_dollar(value: str) -> str:
    return value[1:] if value.startswith("$") else value


def _credential(access_key: str, date: datetime, region: str) -> str:
    return f"{access_key}/{to_signer_date(date)}/{region}/s3/aws4_request"


class PostPolicy:
    """Conditions and expiration of a presigned POST upload."""

    def __init__(
        self, bucket: str, expiration: datetime, region: str | None = None
    ) -> None:
        check_bucket_name(bucket, True)
        self.bucket = bucket
        self.expiration = expiration
        self.region = region
        self._eq_conditions: dict[str, str] = {}
        self._starts_with_conditions: dict[str, str] = {}
        self._lower_limit: int | None = None
        self._upper_limit: int | None = None

    @property
    def equals_conditions(self) -> dict[str, str]:
        """A copy of the equals conditions, keyed by element."""
        return dict(self._eq_conditions)

    @property
    def starts_with_conditions(self) -> dict[str, str]:
        """A copy of the starts-with conditions, keyed by element."""
        return dict(self._starts_with_conditions)

    @property
    def content_length_range(self) -> tuple[int, int] | None:
        """The (lower, upper) content-length limits, if set."""
        if self._lower_limit is None or self._upper_limit is None:
            return None
        return self._lower_limit, self._upper_limit

    def add_equals_condition(self, element: str, value: str) -> None:
        """Require the form field ``element`` to equal ``value``."""
        if not element:
            raise PostPolicyError("condition element cannot be empty")
        name = _trim_dollar(element)
        if name in _EQ_UNSUPPORTED:
            raise PostPolicyError(f"{element} is unsupported for equals condition")
        if name in _RESERVED_ELEMENTS:
            raise PostPolicyError(f"{element} cannot set")
        self._eq_conditions[name] = value

    def remove_equals_condition(self, element: str) -> None:
        """Drop the equals condition for ``element``, if any."""
        self._eq_conditions.pop(element, None)

    def add_starts_with_condition(self, element: str, value: str) -> None:
        """Require the form field ``element`` to start with ``value``."""
        if not element:
            raise PostPolicyError("condition element cannot be empty")
        name = _trim_dollar(element)
        if name in _STARTS_WITH_UNSUPPORTED or name.startswith("x-amz-meta-"):
            raise PostPolicyError(
                f"{element} is unsupported for starts-with condition"
            )
        if name in _RESERVED_ELEMENTS:
            raise PostPolicyError(f"{element} cannot set")
        self._starts_with_conditions[name] = value

    def remove_starts_with_condition(self, element: str) -> None:
        """Drop the starts-with condition for ``element``, if any."""
        self._starts_with_conditions.pop(element, None)

    def add_content_length_range_condition(
        self, lower_limit: int, upper_limit: int
    ) -> None:
        """Limit the uploaded content length to the inclusive range."""
        if lower_limit > upper_limit:
            raise PostPolicyError("lower limit cannot be greater than upper limit")
        self._lower_limit = lower_limit
        self._upper_limit = upper_limit

    def remove_content_length_range_condition(self) -> None:
        """Drop the content-length range condition."""
        self._lower_limit = None
        self._upper_limit = None

    def form_data(
        self,
        access_key: str,
        secret_key: str,
        session_token: str | None,
        region: str,
    ) -> dict[str, str]:
        """Return the signed form fields for this policy."""
        if not region:
            raise PostPolicyError("region cannot be empty")
        if "key" not in self._eq_conditions and "key" not in self._starts_with_conditions:
            raise PostPolicyError("key condition must be set")

        conditions: list[list[object]] = [[_EQ, "$bucket", self.bucket]]
        conditions.extend(
            [_EQ, "$" + key, value] for key, value in self._eq_conditions.items()
        )
        conditions.extend(
            [_STARTS_WITH, "$" + key, value]
            for key, value in self._starts_with_conditions.items()
        )
        limits = self.content_length_range
        if limits is not None:
            conditions.append(["content-length-range", *limits])

        date = utc_now()
        credential = _credential(access_key, date, region)
        amz_date = to_amz_date(date)
        conditions.append([_EQ, "$x-amz-algorithm", ALGORITHM])
        conditions.append([_EQ, "$x-amz-credential", credential])
        if session_token is not None:
            conditions.append([_EQ, "$x-amz-security-token", session_token])
        conditions.append([_EQ, "$x-amz-date", amz_date])

        policy = {
            "expiration": to_iso8601utc(self.expiration),
            "conditions": conditions,
        }
        encoded_policy = b64encode(
            json.dumps(
                policy, separators=(",", ":"), sort_keys=True, ensure_ascii=False
            )
        )
        signature = post_presign_v4(encoded_policy, secret_key, date, region)

        data = {
            "x-amz-algorithm": ALGORITHM,
            "x-amz-credential": credential,
            "x-amz-date": amz_date,
            "policy": encoded_policy,
            "x-amz-signature": signature,
        }
        if session_token is not None:
            data["x-amz-security-token"] = session_token
        return data