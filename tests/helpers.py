"""Shared Atom bodies and response builders for the settings tests."""

from unittest.mock import Mock


LABEL_FEED = """\
<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:apps="http://schemas.google.com/apps/2006">
  <id>https://apps-apis.google.com/a/feeds/emailsettings/2.0/example.com/joe/label</id>
  <entry>
    <apps:property name="label" value="Customers"/>
    <apps:property name="unreadCount" value="3"/>
  </entry>
  <entry>
    <apps:property name="label" value="Reports"/>
    <apps:property name="unreadCount" value="0"/>
  </entry>
</feed>
"""

EMPTY_FEED = """\
<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:apps="http://schemas.google.com/apps/2006"/>
"""


def atom_entry(**props: str) -> str:
    """Build an Email Settings entry body from keyword properties."""
    inner = "".join(
        f'<apps:property name="{name}" value="{value}"/>' for name, value in props.items()
    )
    return (
        '<entry xmlns="http://www.w3.org/2005/Atom" '
        'xmlns:apps="http://schemas.google.com/apps/2006">'
        f"{inner}</entry>"
    )


def make_response(status_code: int = 200, text: str = "") -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    return resp


