"""Atom entry codec for the Email Settings feed.

Every setting travels as a flat list of ``<apps:property name=... value=.../>``
elements inside an Atom entry; multi-valued settings (labels, send-as
aliases) come back as a feed of such entries.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Final

from .errors import ParseError

ATOM_NS: Final = "http://www.w3.org/2005/Atom"
APPS_NS: Final = "http://schemas.google.com/apps/2006"

ET.register_namespace("atom", ATOM_NS)
ET.register_namespace("apps", APPS_NS)

PropertyValue = str | bool | int


def _to_wire(value: PropertyValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_entry(properties: Mapping[str, PropertyValue]) -> bytes:
    """Render ``properties`` as an Atom entry body.

    Booleans become ``true``/``false``; insertion order is kept.
    """
    entry = ET.Element(f"{{{ATOM_NS}}}entry")
    for name, value in properties.items():
        ET.SubElement(
            entry,
            f"{{{APPS_NS}}}property",
            {"name": name, "value": _to_wire(value)},
        )
    return ET.tostring(entry, encoding="utf-8", xml_declaration=True)


def _parse(xml: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(xml)
    except ET.ParseError as exc:
        raise ParseError(f"Malformed Atom response: {exc}", exc) from exc


def _properties(element: ET.Element) -> dict[str, str]:
    return {
        prop.get("name", ""): prop.get("value", "")
        for prop in element.iter(f"{{{APPS_NS}}}property")
    }


def parse_entry(xml: str | bytes) -> dict[str, str]:
    """Return the ``apps:property`` pairs of a single entry."""
    return _properties(_parse(xml))


def parse_feed(xml: str | bytes) -> list[dict[str, str]]:
    """Return one property mapping per ``atom:entry`` in a feed."""
    root = _parse(xml)
    if root.tag == f"{{{ATOM_NS}}}entry":
        return [_properties(root)]
    return [_properties(entry) for entry in root.findall(f"{{{ATOM_NS}}}entry")]


def parse_error(xml: str | bytes) -> dict[str, str]:
    """Extract ``errorCode``/``reason`` from an AppsForYourDomainErrors body.

    Returns an empty mapping when the body is not a recognizable error
    document, so callers can fall back to a status-based message.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError:
        return {}
    error = root if root.tag == "error" else root.find("error")
    if error is None:
        return {}
    details = dict(error.attrib)
    if "reason" in details:
        details["message"] = details["reason"]
    return details
