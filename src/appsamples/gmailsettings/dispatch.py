"""Setting categories and the get/change handler table used by the CLI."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .client import GmailSettingsService
from .defaults import SettingsDefaults


class SettingCategory(Enum):
    """Gmail setting categories, in prefix-matching order."""

    FILTER = "filter"
    SENDAS = "sendas"
    LABEL = "label"
    FORWARDING = "forwarding"
    POP = "pop"
    IMAP = "imap"
    VACATION = "vacation"
    SIGNATURE = "signature"
    GENERAL = "general"
    LANGUAGE = "language"
    WEBCLIP = "webclip"

    @classmethod
    def match(cls, setting: str) -> SettingCategory | None:
        """Return the first category whose name prefixes ``setting``.

        Matching is case-insensitive and ignores surrounding whitespace,
        so ``"POP3"`` selects POP.
        """
        normalized = setting.strip().lower()
        for category in cls:
            if normalized.startswith(category.value):
                return category
        return None

    @property
    def supports_get(self) -> bool:
        return HANDLERS[self].get is not None


@dataclass(frozen=True)
class SettingsRequest:
    """One CLI invocation's worth of parsed flags."""

    username: str
    password: str
    domain: str
    setting: str
    destination_user: str | None = None
    is_get: bool = False
    is_enabled: bool = True

    @property
    def users(self) -> list[str]:
        """Targets of a change operation; the caller's own account by default."""
        return [self.destination_user or self.username]


# ── output formatting ────────────────────────────────────────────────────────
def format_block(header: str, values: Mapping[str, str]) -> list[str]:
    return [f"{header}:", *(f"\t{key}: {value}" for key, value in values.items())]


def format_numbered(title: str, items: Sequence[Mapping[str, str]]) -> list[str]:
    """One ``"<title> N:"`` block per item, numbered from 1."""
    lines: list[str] = []
    for count, item in enumerate(items, 1):
        lines.extend(format_block(f"{title} {count}", item))
    return lines


# ── handlers ─────────────────────────────────────────────────────────────────
GetHandler = Callable[[GmailSettingsService, str], list[str]]
WriteHandler = Callable[[GmailSettingsService, Sequence[str], SettingsDefaults], None]


@dataclass(frozen=True)
class CategoryHandlers:
    write: WriteHandler
    get: GetHandler | None = None


def _write_filter(svc: GmailSettingsService, users: Sequence[str], d: SettingsDefaults) -> None:
    svc.create_filter(
        users,
        d.filter_from,
        d.filter_to,
        d.filter_subject,
        d.filter_has_the_word,
        d.filter_does_not_have_the_word,
        d.filter_has_attachment,
        d.filter_should_mark_as_read,
        d.filter_should_archive,
        d.filter_label,
    )


def _write_general(svc: GmailSettingsService, users: Sequence[str], d: SettingsDefaults) -> None:
    svc.change_general(
        users,
        d.general_page_size,
        d.general_enable_shortcuts,
        d.general_enable_arrows,
        d.general_enable_snippets,
        d.general_enable_unicode,
    )


HANDLERS: Final[dict[SettingCategory, CategoryHandlers]] = {
    SettingCategory.FILTER: CategoryHandlers(write=_write_filter),
    SettingCategory.SENDAS: CategoryHandlers(
        write=lambda svc, users, d: svc.create_send_as(
            users, d.send_as_name, d.send_as_address, d.send_as_reply_to, d.send_as_make_default
        ),
        get=lambda svc, user: format_numbered("sendAs setting", svc.retrieve_send_as(user)),
    ),
    SettingCategory.LABEL: CategoryHandlers(
        write=lambda svc, users, d: svc.create_label(users, d.label),
        get=lambda svc, user: format_numbered("label", svc.retrieve_labels(user)),
    ),
    SettingCategory.FORWARDING: CategoryHandlers(
        write=lambda svc, users, d: svc.change_forwarding(
            users, d.forwarding_enable, d.forwarding_forward_to, d.forwarding_action
        ),
        get=lambda svc, user: format_block(
            "forwarding settings", svc.retrieve_forwarding(user)
        ),
    ),
    SettingCategory.POP: CategoryHandlers(
        write=lambda svc, users, d: svc.change_pop(
            users, d.pop_enable, d.pop_enable_for, d.pop_action
        ),
        get=lambda svc, user: format_block("pop settings", svc.retrieve_pop(user)),
    ),
    SettingCategory.IMAP: CategoryHandlers(
        write=lambda svc, users, d: svc.change_imap(users, d.imap_enable),
        get=lambda svc, user: format_block(
            "imap settings", {"enabled": str(svc.retrieve_imap(user)).lower()}
        ),
    ),
    SettingCategory.VACATION: CategoryHandlers(
        write=lambda svc, users, d: svc.change_vacation(
            users,
            d.vacation_enable,
            d.vacation_subject,
            d.vacation_message,
            d.vacation_contacts_only,
        ),
        get=lambda svc, user: format_block("vacation settings", svc.retrieve_vacation(user)),
    ),
    SettingCategory.SIGNATURE: CategoryHandlers(
        write=lambda svc, users, d: svc.change_signature(users, d.signature),
        get=lambda svc, user: format_block(
            "signature", {"value": svc.retrieve_signature(user)}
        ),
    ),
    SettingCategory.GENERAL: CategoryHandlers(write=_write_general),
    SettingCategory.LANGUAGE: CategoryHandlers(
        write=lambda svc, users, d: svc.change_language(users, d.language),
    ),
    SettingCategory.WEBCLIP: CategoryHandlers(
        write=lambda svc, users, d: svc.change_web_clip(users, d.webclip_enable),
    ),
}


def run(
    service: GmailSettingsService,
    category: SettingCategory,
    request: SettingsRequest,
    defaults: SettingsDefaults,
) -> list[str]:
    """Perform the get or change for ``category`` and return output lines.

    Raises:
        ValueError: If a get is requested for a write-only category or
            without a destination user
    """
    handlers = HANDLERS[category]
    if request.is_get:
        if handlers.get is None:
            raise ValueError(f"Retrieving {category.value} settings is not supported.")
        if not request.destination_user:
            raise ValueError("A destination user is required to retrieve settings.")
        return handlers.get(service, request.destination_user)

    if not request.is_enabled:
        defaults = defaults.with_enabled(False)
    handlers.write(service, request.users, defaults)
    return []
