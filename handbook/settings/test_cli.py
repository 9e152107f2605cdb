# handbook/settings/test_cli.py
from .dev import *  # noqa: F401,F403

# Tests pick the stray-content policy explicitly with override_settings.
DOCS_TABS_STRAY_CONTENT = "drop"

LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['docs.tabs']['level'] = 'DEBUG'
LOGGING['loggers']['docs.commands']['level'] = 'INFO'
