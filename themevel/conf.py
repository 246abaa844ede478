"""
Settings for themevel.

All configuration comes from the ``THEMEVEL`` Django setting, a dict that is merged over ``DEFAULTS``.
Dict valued defaults (e.g. ``folders``) are merged one level deep so a project only has to list the keys it changes.

Example:
    THEMEVEL = {
        'theme_path': '/srv/app/themes',
        'active': 'default',
        'types': {
            'enable': True,
            'middleware': {'admin': 'admin-theme'},
        },
    }
"""


import os
from collections import namedtuple

from django.conf import settings

STUBS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'stubs')

DEFAULTS = {
    # enable or disable theming
    'enabled': True,

    # name of the waffle switch used to disable theming on runtime.
    # Note: management commands ignore this switch
    'runtime_switch': 'disable_theming_on_runtime',

    # absolute path of the directory that contains all themes
    'theme_path': None,

    # theme to use when no theme has been set for the request
    'active': None,

    # publish 'theme_path' as '{public_path}/{public_dir}' symlink on startup
    'symlink': True,
    # defaults to STATIC_ROOT
    'public_path': None,
    'public_dir': 'Themes',

    'types': {
        'enable': False,
        'middleware': {},
    },

    'config': {
        'name': 'theme.json',
    },

    'folders': {
        'assets': 'assets',
        'views': 'views',
        'lang': 'lang',
        'css': 'assets/css',
        'js': 'assets/js',
        'img': 'assets/img',
        'layouts': 'views/layouts',
        'partials': 'views/partials',
    },

    'stubs': {
        'path': STUBS_PATH,
        'files': {
            'css': 'assets/css/app.css',
            'js': 'assets/js/app.js',
            'layout': 'views/layouts/master.html',
            'page': 'views/welcome.html',
        },
    },

    # theme relative base path of the css and js template tags, None disables the tag
    'directives': {
        'css': 'css',
        'js': 'js',
    },
}


AssetConfig = namedtuple('AssetConfig', ['css', 'js'])


def get_setting(name):
    """
    Return the value of a themevel setting, falling back to its default.

    Args:
        name (str): key inside the THEMEVEL setting, e.g. 'theme_path'

    Returns:
        value of the setting.
    """
    user_settings = getattr(settings, 'THEMEVEL', None) or {}
    default = DEFAULTS[name]
    value = user_settings.get(name, default)

    if isinstance(default, dict) and isinstance(value, dict) and value is not default:
        merged = dict(default)
        merged.update(value)
        return merged
    return value


def get_asset_config():
    """
    Return the immutable configuration the asset resolver is built with.
    """
    directives = get_setting('directives')
    return AssetConfig(css=directives.get('css'), js=directives.get('js'))


def get_folder(name):
    return get_setting('folders')[name]
