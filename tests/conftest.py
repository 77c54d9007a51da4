from unittest.mock import Mock

import pytest

from appsamples.gmailsettings import GmailSettingsService
from helpers import atom_entry, make_response


@pytest.fixture(autouse=True)
def _no_defaults_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's GMAILSETTINGS_DEFAULTS out of the tests."""
    monkeypatch.delenv("GMAILSETTINGS_DEFAULTS", raising=False)


@pytest.fixture
def session() -> Mock:
    """A requests.Session stand-in whose login always succeeds."""
    sess = Mock()
    sess.post.return_value = make_response(200, "SID=s\nLSID=l\nAuth=TOKEN123\n")
    sess.request.return_value = make_response(201, atom_entry())
    return sess


@pytest.fixture
def service(session: Mock) -> GmailSettingsService:
    return GmailSettingsService(
        "exampleCo-exampleApp-1", "example.com", "admin", "secret", session=session
    )
