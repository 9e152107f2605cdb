# apps/docs/templatetags/tabs.py
"""
{% tabs %} block tag.

Usage:
    {% load tabs %}
    {% tabs %}
    {% tab Setup %}Install the package.
    {% tab Usage %}Import it.
    {% endtabs %}

Each tab becomes its bold title, a blank line, then its content; tabs are
separated by one blank line. Content before the first {% tab %} is dropped
(see DOCS_TABS_STRAY_CONTENT).
"""
from __future__ import annotations

import logging

from django import template
from django.template.base import Node, NodeList, TextNode
from django.template.defaulttags import CommentNode
from django.utils.safestring import mark_safe

from apps.docs import conf
from apps.docs.tabs import TabGroup, TabGroupBuilder

register = template.Library()

log = logging.getLogger("docs.tabs")

TAB_TAG = "tab"
END_TAG = "endtabs"


class TabsNode(Node):
    def __init__(self, group: TabGroup) -> None:
        self.group = group

    def __repr__(self) -> str:
        return f"<{self.__class__.__qualname__}: {len(self.group)} tabs>"

    def get_nodes_by_type(self, nodetype):
        nodes = []
        if isinstance(self, nodetype):
            nodes.append(self)
        for entry in self.group.entries:
            nodes.extend(entry.content.get_nodes_by_type(nodetype))
        return nodes

    def render(self, context):
        return mark_safe(self.group.render(context))


def _has_visible_content(nodelist: NodeList) -> bool:
    for node in nodelist:
        if isinstance(node, CommentNode):
            continue
        if isinstance(node, TextNode) and not node.s.strip():
            continue
        return True
    return False


def _discard_stray_content(nodelist: NodeList, tag_name: str, lineno) -> None:
    if not _has_visible_content(nodelist):
        return
    mode = conf.stray_content_mode()
    if mode == "error":
        raise template.TemplateSyntaxError(
            f"'{tag_name}' tag on line {lineno} has content before its first "
            f"'{TAB_TAG}' tag."
        )
    level = logging.WARNING if mode == "warn" else logging.DEBUG
    log.log(
        level,
        "tabs_stray_content_dropped",
        extra={"tag": tag_name, "tag_line": lineno, "nodes": len(nodelist)},
    )


def _title_from(token) -> str:
    command = token.contents.split(None, 1)[0]
    return token.contents[len(command):]


@register.tag("tabs")
def do_tabs(parser, token):
    tag_name = token.split_contents()[0]
    lineno = getattr(token, "lineno", None)
    builder = TabGroupBuilder()

    # Unknown tags and a missing end tag are reported by parser.parse itself.
    nodelist = parser.parse((TAB_TAG, END_TAG))
    _discard_stray_content(nodelist, tag_name, lineno)
    token = parser.next_token()
    while token.contents.split(None, 1)[0] == TAB_TAG:
        title = _title_from(token)
        nodelist = parser.parse((TAB_TAG, END_TAG))
        builder.register_section(title, nodelist)
        token = parser.next_token()

    log.debug("tabs_compiled", extra={"tag_line": lineno, "tabs": len(builder)})
    group = builder.build()
    return TabsNode(group)
