"""Graph API resource mirrors used as deserialization targets."""

from .models import GraphModel, Link

__all__ = ["GraphModel", "Link"]
