"""Docs / tabs configuration knobs.

Imported from base settings so every environment shares one source of truth
for how the ``{% tabs %}`` tag treats content placed before its first tab.
"""

from __future__ import annotations

import os
from typing import Final

# drop | warn | error ------------------------------------------------------------------
DOCS_TABS_STRAY_CONTENT: Final[str] = os.getenv("DOCS_TABS_STRAY_CONTENT", "drop").strip().lower() or "drop"
