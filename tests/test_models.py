"""Tests for the Graph resource mirror.

These tests verify that:
1. Known fields decode by wire name, including the aliased ``from``
2. Unknown fields are ignored and missing ones stay unset
3. Encoding emits wire names and omits unset fields
"""

from appsamples.graph import Link

LINK_JSON = {
    "id": "10150263434814999",
    "from": "Example Page",
    "link": "https://example.com/post",
    "name": "A post",
    "caption": "example.com",
    "description": "Something worth sharing",
    "message": "Look at this",
    "updated_time": "2010-08-02T21:27:44+0000",
    "icon": "https://example.com/icon.gif",
}


def test_decode_full_link() -> None:
    link = Link.from_wire(LINK_JSON)

    assert link.id == "10150263434814999"
    assert link.from_ == "Example Page"
    assert link.updated_time == "2010-08-02T21:27:44+0000"
    assert not hasattr(link, "icon")


def test_decode_only_aliased_field() -> None:
    link = Link.from_wire({"from": "Someone"})

    assert link.from_ == "Someone"
    others = set(Link.model_fields) - {"from_"}
    assert all(getattr(link, name) is None for name in others)


def test_decode_empty_object() -> None:
    link = Link.from_wire({})
    assert link.model_dump(exclude_none=True) == {}


def test_encode_uses_wire_names() -> None:
    link = Link(from_="Someone", message="hi")

    assert link.to_wire() == {"from": "Someone", "message": "hi"}


def test_encode_round_trip_drops_unknown() -> None:
    wire = Link.from_wire(LINK_JSON).to_wire()

    assert "icon" not in wire
    assert wire["from"] == "Example Page"
