# handbook/settings/dev.py
# export DJANGO_SETTINGS_MODULE=handbook.settings.dev

from .base import *

DEBUG = True

# Dev: surface content dropped before the first {% tab %} (opt out with DOCS_TABS_WARN_IN_DEV=0)
if env_flag("DOCS_TABS_WARN_IN_DEV", default=True) and DOCS_TABS_STRAY_CONTENT == "drop":
    DOCS_TABS_STRAY_CONTENT = "warn"

LOGGING['loggers']['docs.tabs']['level'] = os.getenv('DOCS_TABS_LOG_LEVEL', 'DEBUG')
