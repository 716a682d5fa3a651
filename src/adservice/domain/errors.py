"""Errors raised by the ad matching core."""

from __future__ import annotations


class AdServiceError(Exception):
    """Base class for ad service errors."""


class InvalidRequestError(AdServiceError, ValueError):
    """The request itself is absent (as opposed to carrying no context keys)."""
