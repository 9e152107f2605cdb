from __future__ import annotations

import logging
from typing import Dict, List

from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

log = logging.getLogger("docs.commands")


def _parse_vars(pairs: List[str]) -> Dict[str, str]:
    context: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise CommandError(f"Invalid --var {pair!r}; expected key=value.")
        context[key] = value
    return context


class Command(BaseCommand):
    help = "Render a docs template page (tabs included) to stdout."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("template_name", help="Template to render, e.g. docs/getting_started.md")
        parser.add_argument(
            "--var",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Context variable passed to the template (repeatable).",
        )

    def handle(self, *args, **options):
        template_name: str = options["template_name"]
        context = _parse_vars(options.get("var") or [])
        try:
            output = render_to_string(template_name, context)
        except TemplateDoesNotExist as exc:
            raise CommandError(f"Template not found: {exc}") from exc
        except TemplateSyntaxError as exc:
            raise CommandError(f"Template error in {template_name}: {exc}") from exc

        self.stdout.write(output)
        log.info(
            "render_docs_page_completed",
            extra={"template": template_name, "vars": sorted(context), "chars": len(output)},
        )
