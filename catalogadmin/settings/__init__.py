"""
Settings package for the catalogadmin project.

``DJANGO_SETTINGS_MODULE=catalogadmin.settings`` picks a module by the
``DJANGO_ENV`` variable: ``test`` loads test.py (in-memory SQLite, fast
hashing, silent logs), anything else loads dev.py. The modules can also
be named directly, e.g. ``catalogadmin.settings.test``.
"""

import os

if os.getenv('DJANGO_ENV', 'dev') == 'test':
    from .test import *
else:
    from .dev import *
