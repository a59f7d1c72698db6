"""Shared schemas for opentodos."""

from opentodos.schemas.content import ContentGroup
from opentodos.schemas.outline import OutlineNode

__all__ = ["ContentGroup", "OutlineNode"]
