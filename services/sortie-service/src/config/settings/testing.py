# services/sortie-service/src/config/settings/testing.py
"""
Testing Settings

Settings for running tests.
"""

from .base import *

DEBUG = False
TESTING = True

# Set TEST_DATABASE=postgres to run the row-locking tests against PostgreSQL
if os.environ.get('TEST_DATABASE') == 'postgres':
    DATABASES['default']['OPTIONS'] = {'connect_timeout': DB_CONNECT_TIMEOUT}
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]


# Disable migrations for faster tests
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'root': {
        'handlers': ['null'],
    },
}
