# handbook/settings/prod.py
from .base import *

DEBUG = False

if SECRET_KEY == 'CHANGE_ME_DEV_ONLY':
    raise RuntimeError("SECRET_KEY must be set in production.")

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOGGING['root']['level'] = LOG_LEVEL
LOGGING['loggers']['docs.tabs']['level'] = LOG_LEVEL
