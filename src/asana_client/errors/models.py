"""Asana error payload models."""

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass(frozen=True)
class ErrorDetail:
    """One entry of the ``errors`` array returned on failing responses.

    See: https://developers.asana.com/docs/errors
    """

    message: str = ""
    phrase: str | None = None  # Only present on 500 responses
    help: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorDetail":
        return cls(
            message=data.get("message") or "",
            phrase=data.get("phrase"),
            help=data.get("help"),
        )


@dataclass(frozen=True)
class ErrorPayload:
    """Decoded ``{"errors": [...]}`` body."""

    errors: list[ErrorDetail] = field(default_factory=list)

    @property
    def first(self) -> ErrorDetail | None:
        return self.errors[0] if self.errors else None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorPayload | None":
        """Parse the error payload from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorPayload, or None if the body is not an Asana error envelope
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # Non-JSON body, or a response without a readable body
            return None

        if not isinstance(data, dict):
            return None

        entries = data.get("errors")
        if not isinstance(entries, list):
            return None

        return cls(errors=[ErrorDetail.from_dict(entry) for entry in entries if isinstance(entry, dict)])
