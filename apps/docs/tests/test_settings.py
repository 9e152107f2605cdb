from __future__ import annotations

from django.conf import settings
from django.test import SimpleTestCase

from handbook.settings import base, dev


class HandbookSettingsTests(SimpleTestCase):
    def test_only_the_docs_app_is_installed(self) -> None:
        self.assertEqual(settings.INSTALLED_APPS, ["apps.docs.apps.DocsConfig"])

    def test_no_request_serving_settings(self) -> None:
        for name in ("ROOT_URLCONF", "WSGI_APPLICATION", "MIDDLEWARE", "SITE_DOMAIN", "X_FRAME_OPTIONS"):
            self.assertFalse(hasattr(base, name), name)

    def test_dev_warns_on_stray_content_by_default(self) -> None:
        self.assertEqual(base.DOCS_TABS_STRAY_CONTENT, "drop")
        self.assertEqual(dev.DOCS_TABS_STRAY_CONTENT, "warn")
