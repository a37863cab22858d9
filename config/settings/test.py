"""Test settings for the Hotel Paradise project.

Used by pytest-django. SQLite keeps the suite self-contained; the
concurrency tests still exercise the real locking path because the
in-process key lock is taken before any database access.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test_db.sqlite3',  # noqa: F405
        'TEST': {'NAME': BASE_DIR / 'test_db.sqlite3'},  # noqa: F405
        'OPTIONS': {'timeout': 20},
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

SAME_DAY_TURNOVER = False
TRANSIENT_RETRY_BACKOFF = 0

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'WARNING'  # noqa: F405
