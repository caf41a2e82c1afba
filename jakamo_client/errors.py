"""Exceptions raised by the Jakamo client."""

from __future__ import annotations


class JakamoClientError(Exception):
    """Represents a configuration or usage error in the Jakamo client."""


class JakamoResultError(JakamoClientError):
    """Raised when unwrapping a result that did not succeed."""
