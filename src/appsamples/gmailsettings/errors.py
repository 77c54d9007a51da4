"""Exception classes for Email Settings API interactions.

This module defines a hierarchy of exception classes for the failures
the settings service can report: authentication, transport, malformed
targets, and general service errors.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GmailSettingsError(Exception):
    """Error during an Email Settings request or response parsing.

    Raised when a request fails because of bad credentials, network
    issues, an unknown user, or a malformed response. Includes the
    HTTP status and the raw error details when available.
    """

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0 when no response was received
            message: Human-readable error message
            response: Optional parsed error body for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx)."""
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx)."""
        return self.code >= 500

    @classmethod
    def from_response(
        cls, response: Dict[str, Any], status_code: int = 0
    ) -> GmailSettingsError:
        """Create an error from a parsed error body.

        Args:
            response: Error details, a ``message`` key is used when present
            status_code: HTTP status code

        Returns:
            Appropriate GmailSettingsError subclass
        """
        if 400 <= status_code < 500:
            if status_code in (401, 403):
                return AuthenticationError(
                    status_code, response.get("message", "Authentication failed")
                )
            if status_code == 404:
                return NotFoundError(
                    status_code, response.get("message", "User or setting not found")
                )
            return ClientError(
                status_code, response.get("message", "Bad request"), response
            )
        if status_code >= 500:
            return ServiceError(
                status_code, response.get("message", "Service error"), response
            )

        return cls(status_code, response.get("message", "Unknown error"), response)


class NetworkError(GmailSettingsError):
    """Raised when a transport issue prevents API communication."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(GmailSettingsError):
    """Raised when ClientLogin rejects the credentials or the token."""


class NotFoundError(GmailSettingsError):
    """Raised when the user or setting feed does not exist."""


class ClientError(GmailSettingsError):
    """Raised for general 4xx client errors."""


class ServiceError(GmailSettingsError):
    """Raised for 5xx server errors."""


class InvalidTargetError(GmailSettingsError):
    """Raised when a domain or user name cannot form a valid feed URL."""

    def __init__(self, message: str) -> None:
        super().__init__(0, message)


class ParseError(GmailSettingsError):
    """Raised when an Atom response cannot be parsed."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message)
        self.original_error = original_error
