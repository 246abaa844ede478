"""Settings used to run the themevel test suite."""

from os.path import abspath, dirname

# Absolute filesystem path to the themevel package
DJANGO_ROOT = dirname(dirname(abspath(__file__)))

SECRET_KEY = 'insecure-secret-key'
DEBUG = False
SITE_ID = 1
ALLOWED_HOSTS = ['*']
USE_I18N = True

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'waffle',
    'themevel',
]

MIDDLEWARE = [
    'django.contrib.sessions.middleware.SessionMiddleware',
    'threadlocals.middleware.ThreadLocalMiddleware',
    'waffle.middleware.WaffleMiddleware',
    'themevel.middleware.CurrentThemeMiddleware',
]

ROOT_URLCONF = 'themevel.tests.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    },
}

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [
            DJANGO_ROOT + '/tests/templates',
        ],
        'OPTIONS': {
            'loaders': [
                'themevel.template_loaders.ThemeTemplateLoader',
                'django.template.loaders.app_directories.Loader',
            ],
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

STATIC_URL = '/static/'
STATIC_ROOT = None
LOCALE_PATHS = ()

# Theme settings for testing environment
THEMEVEL = {
    'theme_path': DJANGO_ROOT + '/tests/themes',
    'active': 'default',
    # the test suite links themes explicitly, see themevel.tests.test_core
    'symlink': False,
    'types': {
        'enable': True,
        'middleware': {
            'backend': 'admin',
        },
    },
}

# Disable console logging to cut down on log size. pytest will capture the logs for us.
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.NullHandler'},
    },
    'loggers': {
        '': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}

PASSWORD_HASHERS = (
    'django.contrib.auth.hashers.MD5PasswordHasher',
)
