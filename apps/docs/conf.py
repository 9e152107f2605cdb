"""Runtime helpers for the docs tab settings."""

from __future__ import annotations

from typing import Literal

from django.conf import settings

StrayContentMode = Literal["drop", "warn", "error"]

_VALID_MODES: set[str] = {"drop", "warn", "error"}


def stray_content_mode() -> StrayContentMode:
    """Policy for content placed before the first ``{% tab %}``; unknown values mean "drop"."""
    raw = getattr(settings, "DOCS_TABS_STRAY_CONTENT", None)
    mode = str(raw or "").strip().lower()
    if mode not in _VALID_MODES:
        return "drop"
    return mode  # type: ignore[return-value]
