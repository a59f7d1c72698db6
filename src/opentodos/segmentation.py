"""Split text into user-perceived characters."""

from __future__ import annotations

import logging

import regex

from opentodos.config import OPENTODOS_SEGMENTATION, SEGMENTATION_MODES
from opentodos.exceptions import ConfigError

logger = logging.getLogger(__name__)

_GRAPHEME_RE = regex.compile(r"\X")

_fallback_warned = False


def resolve_segmentation(mode: str | None) -> str:
    """Return a validated segmentation mode, falling back to the configured default.

    Raises:
        ConfigError: If the mode is not one of ``SEGMENTATION_MODES``.
    """
    resolved = (mode or OPENTODOS_SEGMENTATION).strip().lower()
    if resolved not in SEGMENTATION_MODES:
        raise ConfigError(
            f"Unknown segmentation mode {resolved!r}; "
            f"expected one of: {', '.join(SEGMENTATION_MODES)}"
        )
    return resolved


def split_characters(text: str, *, mode: str = "grapheme", context: str = "content") -> list[str]:
    """Split text into grapheme clusters, or code points in ``codepoint`` mode.

    Code point splitting breaks multi-codepoint symbols (emoji with modifiers,
    flags, combining marks) into several items. It is logged once per process
    so the reduced fidelity is visible without interrupting extraction.

    Args:
        text: The text to split.
        mode: ``"grapheme"`` or ``"codepoint"``.
        context: Short label for what is being split, used in the warning.

    Returns:
        The list of characters in order.
    """
    if mode == "codepoint":
        _warn_fallback(context)
        return list(text)
    return _GRAPHEME_RE.findall(text)


def _warn_fallback(context: str) -> None:
    global _fallback_warned
    if _fallback_warned:
        return
    _fallback_warned = True
    logger.warning(
        "Grapheme segmentation disabled, falling back to code point splitting for %s",
        context,
    )
