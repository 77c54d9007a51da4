"""ClientLogin authentication for hosted (Google Apps) accounts."""

from __future__ import annotations

import logging
from typing import Final

import requests

from .errors import AuthenticationError, GmailSettingsError, NetworkError

logger: Final = logging.getLogger(__name__)

CLIENT_LOGIN_URL: Final = "https://www.google.com/accounts/ClientLogin"
SERVICE_NAME: Final = "apps"


def _parse_body(text: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            pairs[key.strip()] = value.strip()
    return pairs


class ClientLoginAuthenticator:
    """Exchange a hosted account's email and password for an auth token."""

    def __init__(
        self,
        source: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the authenticator.

        Args:
            source: Application name reported to Google (company-app-version)
            timeout: Timeout for the login request in seconds
            session: Optional requests session, mainly for testing
        """
        self.source = source
        self.timeout = timeout
        self.session = session or requests.Session()

    def authenticate(self, email: str, password: str) -> str:
        """Return the ``Auth`` token for ``email``.

        Raises:
            AuthenticationError: When the credentials are rejected
            NetworkError: When the login endpoint cannot be reached
            GmailSettingsError: For any other unexpected response
        """
        form = {
            "accountType": "HOSTED",
            "Email": email,
            "Passwd": password,
            "service": SERVICE_NAME,
            "source": self.source,
        }
        logger.debug("ClientLogin for %s (source=%s)", email, self.source)

        try:
            resp = self.session.post(CLIENT_LOGIN_URL, data=form, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("ClientLogin network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        body = _parse_body(resp.text)
        if resp.status_code == 200 and "Auth" in body:
            return body["Auth"]

        reason = body.get("Error", resp.text.strip() or "Unknown error")
        logger.error("ClientLogin failed: %s - %s", resp.status_code, reason)
        if resp.status_code in (200, 401, 403):
            raise AuthenticationError(resp.status_code, reason, body)
        raise GmailSettingsError.from_response({"message": reason}, resp.status_code)
