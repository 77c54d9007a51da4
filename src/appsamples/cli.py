"""Gmail settings command-line client.

Authenticates against the Google Apps Email Settings API with an
administrator account, then retrieves or changes one setting for one
user per invocation.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, NoReturn

import typer

from appsamples.gmailsettings import (
    GmailSettingsError,
    GmailSettingsService,
    SettingCategory,
    SettingsDefaults,
    SettingsRequest,
    dispatch,
)

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Gmail settings CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "appsamples.cli"

USAGE: Final = """\
Usage: gmailsettings --username <username> --password <password> --domain <domain>
 --setting <setting> [--disable] [--get true --destination_user <destination_user>]

A simple application that demonstrates how to get or change Gmail settings in a
Google Apps email account. Authenticates using the provided login credentials,
then retrieves or modifies the settings of the specified account.

Specify username and destination_user as just the name, not the email address.
For example, to change settings for joe@example.com use these options:
 --username joe --password your_password --domain example.com

**For changing settings...
Select which setting to change with the setting flag. For example, to change
the POP3 settings, use --setting pop (allowed values are filter, sendas, label,
forwarding, pop, imap, vacation, signature, general, language, and webclip.)

By default the selected setting will be enabled, but with the --disable flag it
will be disabled.

**For retrieving settings...
To retrieve settings, use the --get true option and mandatorily specify a single
--destination_user. For example, to get the signature settings, use
 --get true --setting signature --destination_user joe
(allowed values are label, sendas, forwarding, pop, imap, vacation, and signature).
"""

# Options for the main command
USERNAME_OPTION = typer.Option(None, "--username", help="Administrator name (no domain)")
PASSWORD_OPTION = typer.Option(None, "--password", help="Administrator password")
DOMAIN_OPTION = typer.Option(None, "--domain", help="Google Apps domain")
SETTING_OPTION = typer.Option(None, "--setting", help="Setting name, prefix match")
DESTINATION_OPTION = typer.Option(
    None, "--destination_user", help="User whose settings are read or changed"
)
GET_OPTION = typer.Option(None, "--get", help="Pass 'true' to retrieve instead of change")
DISABLE_OPTION = typer.Option(False, "--disable", help="Disable instead of enable")
HELP_OPTION = typer.Option(False, "--help", help="Show usage and exit")
DEFAULTS_OPTION = typer.Option(
    None, "--defaults", dir_okay=False, help="YAML file overriding write defaults"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def usage_and_exit() -> NoReturn:
    """Print usage to stdout and exit with status 1."""
    typer.echo(USAGE)
    raise typer.Exit(code=1)


@app.command(add_help_option=False)
def main(
    username: str | None = USERNAME_OPTION,
    password: str | None = PASSWORD_OPTION,
    domain: str | None = DOMAIN_OPTION,
    setting: str | None = SETTING_OPTION,
    destination_user: str | None = DESTINATION_OPTION,
    get: str | None = GET_OPTION,
    disable: bool = DISABLE_OPTION,
    help_: bool = HELP_OPTION,
    defaults: Path | None = DEFAULTS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Retrieve or change one Gmail setting."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    do_get = get is not None and get.lower() == "true"
    if help_ or not (username and password and domain and setting):
        usage_and_exit()

    category = SettingCategory.match(setting)
    if category is None:
        usage_and_exit()

    if do_get and not category.supports_get:
        typer.echo(f"Retrieving {category.value} settings is not supported.\n")
        usage_and_exit()

    if do_get and not destination_user:
        usage_and_exit()

    request = SettingsRequest(
        username=username,
        password=password,
        domain=domain,
        setting=setting,
        destination_user=destination_user,
        is_get=do_get,
        is_enabled=not disable,
    )

    try:
        write_defaults = SettingsDefaults.load(defaults)
        service = GmailSettingsService(
            write_defaults.application_name, domain, username, password
        )
        lines = dispatch.run(service, category, request, write_defaults)
    except (GmailSettingsError, ValueError, RuntimeError, FileNotFoundError) as exc:
        logger.debug("%s failed: %s", category.value, type(exc).__name__)
        typer.echo(str(exc), err=True)
        return

    for line in lines:
        typer.echo(line)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
