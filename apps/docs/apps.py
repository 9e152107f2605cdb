from __future__ import annotations

import logging

from django.apps import AppConfig

log = logging.getLogger("apps.docs.apps")


class DocsConfig(AppConfig):
    name = "apps.docs"
    verbose_name = "Docs"

    def ready(self) -> None:
        from apps.docs import conf

        log.info("DocsConfig ready: stray tab content policy=%s", conf.stray_content_mode())
