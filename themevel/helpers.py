"""
    Helpers for accessing themes and theming related variables.
"""


import json
import logging
import os

import waffle
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from path import Path
from threadlocals.threadlocals import get_current_request

from themevel.conf import get_folder, get_setting
from themevel.exceptions import ThemeNotFound

logger = logging.getLogger(__name__)


def is_theming_enabled():
    """
    Returns boolean indicating whether theming is enabled or disabled.

    Example:
        >> is_theming_enabled()
        True

    Returns:
         (bool): True if theming is enabled else False
    """

    # Return False if theming is disabled via Django settings
    if not get_setting('enabled'):
        return False

    # Return False if we're currently processing a request and theming is disabled via runtime switch
    if bool(get_current_request()) and waffle.switch_is_active(get_setting('runtime_switch')):
        return False

    # Return True indicating theming is enabled
    return True


def get_theme_base_dir():
    """
    Return the directory that contains all themes.

    Raises:
        ImproperlyConfigured - exception is raised if
            1 - THEMEVEL['theme_path'] is not a string
            2 - THEMEVEL['theme_path'] is not an absolute path
            3 - path specified by THEMEVEL['theme_path'] does not exist

    Example:
        >> get_theme_base_dir()
        '/srv/app/themes'

    Returns:
         (path.Path): theme base directory
    """
    theme_path = get_setting('theme_path')

    if not isinstance(theme_path, str):
        raise ImproperlyConfigured("THEMEVEL['theme_path'] must be a string.")
    if not theme_path.startswith('/'):
        raise ImproperlyConfigured("THEMEVEL['theme_path'] must be an absolute path to the themes dir.")
    if not os.path.isdir(theme_path):
        raise ImproperlyConfigured("THEMEVEL['theme_path'] must be a valid path.")

    return Path(theme_path)


def is_theme_dir(_dir):
    """
    Returns true if given dir is a theme directory, returns False otherwise.
    A theme dir must contain the theme config file (e.g. 'theme.json').

    Args:
        _dir: directory path to check for a theme

    Returns:
        Returns true if given dir is a theme directory.
    """
    return os.path.isdir(_dir) and os.path.isfile(os.path.join(_dir, get_setting('config')['name']))


def load_theme_info(theme_dir):
    """
    Read the theme config file of a theme directory.

    Returns:
        (dict): theme info, or None if the config file can not be parsed.
    """
    config_file = Path(theme_dir) / get_setting('config')['name']
    try:
        with open(config_file) as f:
            info = json.load(f)
    except (OSError, ValueError):
        logger.exception('Unable to read theme config [%s].', config_file)
        return None

    if not isinstance(info, dict):
        logger.error('Theme config [%s] must contain a JSON object.', config_file)
        return None
    return info


def get_themes():
    """
    Return a list of all themes known to the system, sorted by directory name.

    Returns:
        list of themes known to the system.
    """
    if not is_theming_enabled():
        return []

    themes_dir = get_theme_base_dir()
    themes = []
    for theme_dir_name in sorted(os.listdir(themes_dir)):
        if not is_theme_dir(themes_dir / theme_dir_name):
            continue
        info = load_theme_info(themes_dir / theme_dir_name)
        if info is None:
            continue
        themes.append(Theme(info.get('name') or theme_dir_name, theme_dir_name, themes_dir, info))

    return themes


def get_theme(name):
    """
    Return the theme with the given name.

    Raises:
        ThemeNotFound: if no theme with the given name exists.
    """
    for theme in get_themes():
        if theme.name == name:
            return theme
    raise ThemeNotFound(name, get_setting('theme_path'))


def has_theme(name):
    try:
        get_theme(name)
    except ThemeNotFound:
        return False
    return True


def get_default_theme():
    """
    Return the theme set by THEMEVEL['active'], or None if it is not set or does not exist.
    """
    name = get_setting('active')
    if not name or not is_theming_enabled():
        return None

    try:
        return get_theme(name)
    except ThemeNotFound as e:
        # Log exception message and return None, so that the project templates and assets are used instead
        logger.exception('Active theme not found. [%s]', e)
        return None


def get_current_request_theme():
    """
    Return the theme set on the current request, or None outside of a request or if no theme was set.
    """
    request = get_current_request()
    return getattr(request, 'theme', None) if request else None


def get_current_theme():
    """
    Return current theme object. Returns None if theming is disabled.

    The theme set on the current request (see themevel.middleware) wins, outside of a request the
    default theme is used.

    Returns:
         (themevel.helpers.Theme): theme object for the current theme.
    """
    # Return None if theming is disabled
    if not is_theming_enabled():
        return None

    return get_current_request_theme() or get_default_theme()


def set_theme(name, request=None):
    """
    Make the given theme the current theme for a request.

    Args:
        name (str): name of the theme
        request (HttpRequest): request to set the theme on, defaults to the current request

    Raises:
        ThemeNotFound: if no theme with the given name exists.

    Returns:
        (Theme): the theme that was set
    """
    theme = get_theme(name)
    request = request or get_current_request()
    if request is None:
        logger.warning('No request to set theme [%s] on.', name)
    else:
        request.theme = theme
    return theme


def get_theme_chain(theme):
    """
    Return the given theme followed by its parent themes, nearest parent first.
    """
    chain = [theme]
    seen = {theme.name}
    while theme.parent and theme.parent not in seen:
        try:
            theme = get_theme(theme.parent)
        except ThemeNotFound:
            logger.warning('Parent theme [%s] of [%s] not found.', theme.parent, chain[-1].name)
            break
        chain.append(theme)
        seen.add(theme.name)
    return chain


def get_static_url(path):
    return '{}{}'.format(settings.STATIC_URL or '/', path.lstrip('/'))


def theme_asset_url(asset):
    """
    Return the published URL of a theme asset.

    The asset is looked up in the current theme, 'theme-name:path' selects a theme explicitly. If the theme does
    not contain the file, its parent theme's URL is returned.

    Example:
        >> theme_asset_url('css/app.css')
        '/static/Themes/default/assets/css/app.css'
        >> theme_asset_url('admin:css/app.css')
        '/static/Themes/admin/assets/css/app.css'

    Args:
        asset (str): path relative to the theme's assets folder, may carry a query string

    Returns:
        (str): URL of the asset
    """
    theme_name, sep, path = asset.partition(':')
    if not sep:
        theme_name, path = None, asset
    path = path.lstrip('/')

    if theme_name:
        try:
            theme = get_theme(theme_name)
        except ThemeNotFound as e:
            logger.warning('Unable to resolve asset [%s]. [%s]', asset, e)
            theme = None
    else:
        theme = get_current_theme()

    if theme is None:
        return get_static_url(path)

    if not theme.has_asset(path) and theme.parent:
        for parent in get_theme_chain(theme)[1:]:
            if parent.has_asset(path):
                theme = parent
                break

    return get_static_url('/'.join([theme.public_prefix, path]))


class Theme:
    """
    class to encapsulate theme related information.
    """
    name = ''
    theme_dir_name = ''

    def __init__(self, name='', theme_dir_name='', themes_base_dir=None, info=None):
        """
        init method for Theme
        Args:
            name: name of the theme
            theme_dir_name: directory name of the theme
            themes_base_dir: directory path of the folder that contains the theme
            info: contents of the theme config file
        """
        self.name = name
        self.theme_dir_name = theme_dir_name
        self.themes_base_dir = themes_base_dir
        self.info = info or {}

    def __eq__(self, other):
        """
        Returns True if given theme is same as the self
        Args:
            other: Theme object to compare with self

        Returns:
            (bool) True if two themes are the same else False
        """
        return (self.theme_dir_name, self.path) == (other.theme_dir_name, other.path)

    def __hash__(self):
        return hash((self.theme_dir_name, self.path))

    def __str__(self):
        return u"<Theme: {name} at '{path}'>".format(name=self.name, path=self.path)

    def __repr__(self):
        return self.__str__()

    def get(self, key, default=None):
        return self.info.get(key, default)

    @property
    def parent(self):
        return self.info.get('parent') or None

    @property
    def path(self):
        return Path(self.themes_base_dir) / self.theme_dir_name

    @property
    def assets_dir(self):
        return self.path / get_folder('assets')

    @property
    def locale_dir(self):
        return self.path / get_folder('lang')

    @property
    def template_dirs(self):
        return [theme.path / get_folder('views') for theme in get_theme_chain(self)]

    @property
    def public_prefix(self):
        """
        Path of the theme's assets folder relative to STATIC_URL, e.g. 'Themes/default/assets'.
        """
        return '/'.join([get_setting('public_dir'), self.theme_dir_name, get_folder('assets')])

    def has_asset(self, path):
        """
        Returns True if the theme's assets folder contains the given file, any query string is ignored.
        """
        path = path.split('?', 1)[0].lstrip('/')
        return bool(path) and os.path.isfile(self.assets_dir / path)
