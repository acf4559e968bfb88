"""Exceptions raised by the Cubicler client."""

from __future__ import annotations

import httpx

# Transport failures are surfaced exactly as httpx raises them.
TransportError = httpx.HTTPError


class CubicClientError(Exception):
    """Base class for errors raised by the client itself."""


class ConfigError(CubicClientError):
    """Invalid or missing construction options."""


class ValidationError(CubicClientError):
    """Malformed message input, raised before any request is sent."""

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class EmptyInputError(ValidationError):
    """An empty list of messages was given."""


class MissingArgumentError(CubicClientError):
    """A required call argument was empty or absent."""
