"""Content grouping model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContentGroup(BaseModel):
    """A maximal run of content lines that are all checkboxes or all not."""

    is_checkbox_group: bool
    lines: list[str] = Field(default_factory=list)
