"""Typed mirrors of Graph API resources.

Only plain field mapping lives here: unknown wire fields are dropped,
missing ones stay None, and nothing is validated beyond the types.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound="GraphModel")


class GraphModel(BaseModel):
    """Base model for flat Graph API objects.

    Fields are matched by their wire name, which is the field name unless
    an ``alias`` says otherwise.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_wire(cls: type[T], data: dict[str, Any]) -> T:
        """Decode a wire object into a model instance."""
        return cls.model_validate(data)

    def to_wire(self) -> dict[str, Any]:
        """Encode set fields back to wire names, omitting absent ones."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Link(GraphModel):
    """A link shared on a profile or page."""

    id: str | None = None
    from_: str | None = Field(None, alias="from")
    link: str | None = None
    name: str | None = None
    caption: str | None = None
    description: str | None = None
    message: str | None = None
    updated_time: str | None = None
