"""Local configuration for opentodos."""

from __future__ import annotations

import os


DEFAULT_DONE_STATUS_MARKERS = "xX-"
BULLET_SYMBOLS = "-*+"
SEGMENTATION_MODES = ("grapheme", "codepoint")
DEFAULT_SEGMENTATION = "grapheme"

# Marker string used by the command line when --done-markers is not given.
OPENTODOS_DONE_STATUS_MARKERS = os.getenv("OPENTODOS_DONE_STATUS_MARKERS") or None
OPENTODOS_SEGMENTATION = os.getenv("OPENTODOS_SEGMENTATION", DEFAULT_SEGMENTATION).strip().lower()
