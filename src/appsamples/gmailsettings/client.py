"""Email Settings API client for Google Apps domains."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Final

import requests

from . import atom
from .atom import PropertyValue
from .auth import ClientLoginAuthenticator
from .errors import GmailSettingsError, InvalidTargetError, NetworkError

logger: Final = logging.getLogger(__name__)

API_URL: Final = "https://apps-apis.google.com/a/feeds/emailsettings/2.0"

# Human-readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the setting values",
    401: "Auth token rejected",
    403: "Not an administrator of this domain",
    404: "User or setting not found",
    500: "Email Settings internal error",
    503: "Service unavailable (maintenance)",
}

_INVALID_NAME = re.compile(r"[/\s?#]")


class GmailSettingsService:
    """Client for the Email Settings feed of one Google Apps domain.

    Authenticates an administrator with ClientLogin on first use, then
    reads one user's settings or applies a change to a list of users.
    """

    def __init__(
        self,
        application_name: str,
        domain: str,
        username: str,
        password: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the settings client.

        Args:
            application_name: Source name reported to ClientLogin
            domain: Hosted domain, e.g. example.com
            username: Administrator name without the domain
            password: Administrator password
            timeout: Timeout for API requests in seconds
            session: Optional requests session, mainly for testing

        Raises:
            InvalidTargetError: If the domain cannot form a feed URL
        """
        if not domain or _INVALID_NAME.search(domain):
            raise InvalidTargetError(f"Invalid domain: {domain!r}")
        self.domain = domain
        self.username = username
        self.timeout = timeout
        self.session = session or requests.Session()
        self._password = password
        self._token: str | None = None
        self._authenticator = ClientLoginAuthenticator(
            application_name, timeout=timeout, session=self.session
        )

    # ── transport ─────────────────────────────────────────────────────────
    def _auth_header(self) -> dict[str, str]:
        if self._token is None:
            self._token = self._authenticator.authenticate(
                f"{self.username}@{self.domain}", self._password
            )
        return {"Authorization": f"GoogleLogin auth={self._token}"}

    def _feed_url(self, user: str, setting: str) -> str:
        if not user or _INVALID_NAME.search(user):
            raise InvalidTargetError(f"Invalid user name: {user!r}")
        return f"{API_URL}/{self.domain}/{user}/{setting}"

    def _request(self, method: str, url: str, body: bytes | None = None) -> str:
        headers = self._auth_header()
        if body is not None:
            headers["Content-Type"] = "application/atom+xml"
        logger.debug("%s %s", method, url)

        try:
            resp = self.session.request(
                method, url, data=body, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Email Settings network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if not 200 <= resp.status_code < 300:
            details = atom.parse_error(resp.text)
            details.setdefault(
                "message", HTTP_ERROR_MAP.get(resp.status_code, resp.text.strip())
            )
            logger.error(
                "Email Settings error: %s - %s", resp.status_code, details["message"]
            )
            raise GmailSettingsError.from_response(details, resp.status_code)

        return resp.text

    def _retrieve(self, user: str, setting: str) -> str:
        return self._request("GET", self._feed_url(user, setting))

    def _apply(
        self,
        method: str,
        users: Sequence[str],
        setting: str,
        properties: Mapping[str, PropertyValue],
    ) -> None:
        if not users:
            raise ValueError("At least one destination user is required")
        body = atom.build_entry(properties)
        logger.debug("Applying %s to %d user(s)", setting, len(users))
        for user in users:
            self._request(method, self._feed_url(user, setting), body)

    # ── create operations (POST) ──────────────────────────────────────────
    def create_filter(
        self,
        users: Sequence[str],
        from_: str,
        to: str,
        subject: str,
        has_the_word: str,
        does_not_have_the_word: str,
        has_attachment: bool,
        should_mark_as_read: bool,
        should_archive: bool,
        label: str,
    ) -> None:
        """Create a filter with the given criteria and action for each user."""
        self._apply(
            "POST",
            users,
            "filter",
            {
                "from": from_,
                "to": to,
                "subject": subject,
                "hasTheWord": has_the_word,
                "doesNotHaveTheWord": does_not_have_the_word,
                "hasAttachment": has_attachment,
                "shouldMarkAsRead": should_mark_as_read,
                "shouldArchive": should_archive,
                "label": label,
            },
        )

    def create_send_as(
        self,
        users: Sequence[str],
        name: str,
        address: str,
        reply_to: str,
        make_default: bool,
    ) -> None:
        """Create a send-as alias for each user."""
        self._apply(
            "POST",
            users,
            "sendas",
            {
                "name": name,
                "address": address,
                "replyTo": reply_to,
                "makeDefault": make_default,
            },
        )

    def create_label(self, users: Sequence[str], label: str) -> None:
        """Create a label for each user."""
        self._apply("POST", users, "label", {"label": label})

    # ── change operations (PUT) ───────────────────────────────────────────
    def change_forwarding(
        self, users: Sequence[str], enable: bool, forward_to: str, action: str
    ) -> None:
        self._apply(
            "PUT",
            users,
            "forwarding",
            {"enable": enable, "forwardTo": forward_to, "action": action},
        )

    def change_pop(
        self, users: Sequence[str], enable: bool, enable_for: str, action: str
    ) -> None:
        self._apply(
            "PUT",
            users,
            "pop",
            {"enable": enable, "enableFor": enable_for, "action": action},
        )

    def change_imap(self, users: Sequence[str], enable: bool) -> None:
        self._apply("PUT", users, "imap", {"enable": enable})

    def change_vacation(
        self,
        users: Sequence[str],
        enable: bool,
        subject: str,
        message: str,
        contacts_only: bool,
    ) -> None:
        self._apply(
            "PUT",
            users,
            "vacation",
            {
                "enable": enable,
                "subject": subject,
                "message": message,
                "contactsOnly": contacts_only,
            },
        )

    def change_signature(self, users: Sequence[str], signature: str) -> None:
        self._apply("PUT", users, "signature", {"signature": signature})

    def change_general(
        self,
        users: Sequence[str],
        page_size: int,
        shortcuts: bool,
        arrows: bool,
        snippets: bool,
        unicode: bool,
    ) -> None:
        """Change page size and the keyboard/UI toggles."""
        self._apply(
            "PUT",
            users,
            "general",
            {
                "pageSize": page_size,
                "shortcuts": shortcuts,
                "arrows": arrows,
                "snippets": snippets,
                "unicode": unicode,
            },
        )

    def change_language(self, users: Sequence[str], language: str) -> None:
        self._apply("PUT", users, "language", {"language": language})

    def change_web_clip(self, users: Sequence[str], enable: bool) -> None:
        self._apply("PUT", users, "webclip", {"enable": enable})

    # ── retrieve operations (GET) ─────────────────────────────────────────
    def retrieve_send_as(self, user: str) -> list[dict[str, str]]:
        """Return one property mapping per send-as alias of ``user``."""
        return atom.parse_feed(self._retrieve(user, "sendas"))

    def retrieve_labels(self, user: str) -> list[dict[str, str]]:
        """Return one property mapping per label of ``user``."""
        return atom.parse_feed(self._retrieve(user, "label"))

    def retrieve_forwarding(self, user: str) -> dict[str, str]:
        return atom.parse_entry(self._retrieve(user, "forwarding"))

    def retrieve_pop(self, user: str) -> dict[str, str]:
        return atom.parse_entry(self._retrieve(user, "pop"))

    def retrieve_imap(self, user: str) -> bool:
        """Return whether IMAP access is enabled for ``user``."""
        props = atom.parse_entry(self._retrieve(user, "imap"))
        return props.get("enable", "false").lower() == "true"

    def retrieve_vacation(self, user: str) -> dict[str, str]:
        return atom.parse_entry(self._retrieve(user, "vacation"))

    def retrieve_signature(self, user: str) -> str:
        props = atom.parse_entry(self._retrieve(user, "signature"))
        return props.get("signature", "")
