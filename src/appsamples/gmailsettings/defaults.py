"""Default values sent by the change operations, optionally loaded from YAML."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


MailAction = Literal["KEEP", "ARCHIVE", "DELETE"]


class SettingsDefaults(BaseModel):
    """Values written by each change operation.

    The CLI exposes no per-setting flags, so every write sends these.
    Override them with a YAML file whose keys match the field names.
    """

    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("gmailsettings.yaml"),
        Path("~/.config/gmailsettings/defaults.yaml").expanduser(),
    ]

    application_name: str = Field(
        "exampleCo-exampleApp-1", description="Source name reported to ClientLogin"
    )

    # Filter
    filter_from: str = "alice@example.com"
    filter_to: str = "bob@example.com"
    filter_subject: str = "Quarterly report"
    filter_has_the_word: str = "report"
    filter_does_not_have_the_word: str = "draft"
    filter_has_attachment: bool = True
    filter_should_mark_as_read: bool = True
    filter_should_archive: bool = True
    filter_label: str = "Reports"

    # Send-as
    send_as_name: str = "Sales"
    send_as_address: str = "sales@example.com"
    send_as_reply_to: str = "replies@example.com"
    send_as_make_default: bool = False

    # Label
    label: str = "Customers"

    # Forwarding
    forwarding_enable: bool = True
    forwarding_forward_to: str = "archive@example.com"
    forwarding_action: MailAction = "KEEP"

    # POP
    pop_enable: bool = True
    pop_enable_for: Literal["ALL_MAIL", "MAIL_FROM_NOW_ON"] = "ALL_MAIL"
    pop_action: MailAction = "KEEP"

    # IMAP
    imap_enable: bool = True

    # Vacation responder
    vacation_enable: bool = True
    vacation_subject: str = "Out of office"
    vacation_message: str = "I am away from the office and will reply when I return."
    vacation_contacts_only: bool = False

    # Signature
    signature: str = "Sent from the Example Co. mail system"

    # General
    general_page_size: Literal[25, 50, 100] = 50
    general_enable_shortcuts: bool = True
    general_enable_arrows: bool = True
    general_enable_snippets: bool = True
    general_enable_unicode: bool = True

    # Language
    language: str = Field("en-US", description="Display language tag")

    # Web clips
    webclip_enable: bool = True

    def with_enabled(self, enabled: bool) -> SettingsDefaults:
        """Return a copy with every on/off switch set to ``enabled``."""
        return self.model_copy(
            update={
                "forwarding_enable": enabled,
                "pop_enable": enabled,
                "imap_enable": enabled,
                "vacation_enable": enabled,
                "webclip_enable": enabled,
            }
        )

    @classmethod
    def load(cls, path: Path | None = None) -> SettingsDefaults:
        """Load defaults from a YAML file.

        Args:
            path: Path to a defaults file. When None, GMAILSETTINGS_DEFAULTS
                and the default search paths are tried, and the built-in
                values are used if none of them exists.

        Returns:
            Validated SettingsDefaults object

        Raises:
            FileNotFoundError: If GMAILSETTINGS_DEFAULTS points at a missing file
            RuntimeError: If the file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("GMAILSETTINGS_DEFAULTS")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Defaults file from GMAILSETTINGS_DEFAULTS not found: {path}"
                    )
            else:
                path = next((p for p in cls.DEFAULT_CONFIG_PATHS if p.exists()), None)
                if path is None:
                    return cls()

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:
            raise RuntimeError(f"Unable to read defaults YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid defaults:\n{err}") from err
