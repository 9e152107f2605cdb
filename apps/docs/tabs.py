"""Tab groups: labeled sections collected by the ``{% tabs %}`` block tag.

A group is built once while the template compiles (``TabGroupBuilder``) and is
read-only afterwards (``TabGroup``). Rendering pushes a scope on the context
for the whole group and another one per section, so bindings made inside a
section never leak to the next section or to the surrounding template.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

TITLE_MARK = "**"
SECTION_SEPARATOR = "\n\n"

NodeRenderer = Callable[[Any, Any], str]


def render_nodelist(nodelist: Any, context: Any) -> str:
    return nodelist.render(context)


@dataclass(frozen=True)
class TabEntry:
    title: str
    content: Any

    @property
    def label(self) -> str:
        return self.title.strip()


@dataclass(frozen=True)
class TabGroup:
    entries: Tuple[TabEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def render(self, context: Any, render_nodes: NodeRenderer = render_nodelist) -> str:
        """Render every section in document order, separated by one blank line.

        Errors raised while rendering a section propagate unchanged; the
        context scopes are popped on the way out.
        """
        if not self.entries:
            return ""
        parts: List[str] = []
        with context.push():
            for entry in self.entries:
                with context.push():
                    body = render_nodes(entry.content, context)
                parts.append(f"{TITLE_MARK}{entry.label}{TITLE_MARK}{SECTION_SEPARATOR}{body}")
        return SECTION_SEPARATOR.join(parts)


class TabGroupBuilder:
    """Append-only collector used while the enclosing block is parsed."""

    def __init__(self) -> None:
        self._entries: List[TabEntry] = []
        self._built = False

    def register_section(self, title: str, content: Any) -> TabEntry:
        if self._built:
            raise RuntimeError("TabGroupBuilder already built; sections are read-only.")
        entry = TabEntry(title=title, content=content)
        self._entries.append(entry)
        return entry

    def build(self) -> TabGroup:
        self._built = True
        return TabGroup(entries=tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
