"""Outline tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineNode(BaseModel):
    """A heading node in an outline document.

    The root node has level 0 and no heading. ``content`` holds the raw
    non-blank, non-heading lines that sit directly under the heading.
    """

    level: int = Field(0, ge=0, le=6)
    heading: str | None = None
    children: list["OutlineNode"] = Field(default_factory=list)
    content: list[str] = Field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.heading is None

    @property
    def is_empty(self) -> bool:
        """True when the node holds no content lines and no children."""
        return not self.content and not self.children
