"""Validated request arguments, header builders and POST policy signing for S3-compatible storage."""

__version__ = "0.1.0"