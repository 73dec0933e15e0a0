"""Value types shared by the request argument classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .utils import Multimap


class RetentionMode(str, Enum):
    """Object lock retention mode."""

    GOVERNANCE = "GOVERNANCE"
    COMPLIANCE = "COMPLIANCE"

    def __str__(self) -> str:
        return self.value


class Directive(str, Enum):
    """Metadata or tagging directive of a copy request."""

    COPY = "COPY"
    REPLACE = "REPLACE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Retention:
    """Retention mode together with the date the object is held until."""

    mode: RetentionMode
    retain_until_date: datetime


@dataclass(frozen=True)
class Part:
    """One uploaded part of a multipart upload."""

    number: int
    etag: str


class Sse(ABC):
    """Server-side encryption settings that contribute request headers."""

    @abstractmethod
    def headers(self) -> Multimap:
        """Return the headers sent with a write request."""

    def copy_headers(self) -> Multimap:
        """Return the headers sent with a copy-source request."""
        return Multimap()