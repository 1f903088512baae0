"""
Development settings for catalogadmin project.

Logs go to the console and to logs/catalog.log; the products and
accounts loggers default to DEBUG (override with CATALOG_LOG_LEVEL).
"""

import os

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '*']

# Any local frontend may call the API during development
CORS_ALLOW_ALL_ORIGINS = True

LOG_DIR = BASE_DIR / 'logs'
LOG_DIR.mkdir(exist_ok=True)
CATALOG_LOG_LEVEL = os.getenv('CATALOG_LOG_LEVEL', 'DEBUG')

# Development logging configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'file': {
            'class': 'logging.FileHandler',
            'filename': LOG_DIR / "catalog.log",
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
        'products': {
            'handlers': ['console', 'file'],
            'level': CATALOG_LOG_LEVEL,
            'propagate': False,
        },
        'accounts': {
            'handlers': ['console', 'file'],
            'level': CATALOG_LOG_LEVEL,
            'propagate': False,
        },
    },
}
