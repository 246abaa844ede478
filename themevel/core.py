"""
Core logic for theming that runs once on startup.
"""


import logging
import os

from django.conf import settings
from path import Path

from themevel.conf import get_setting
from themevel.helpers import get_themes

logger = logging.getLogger(__name__)


def enable_theming():
    """
        Add theme locale directories to settings.
    """
    for theme in get_themes():
        locale_dir = theme.locale_dir
        if locale_dir.is_dir():
            settings.LOCALE_PATHS = (locale_dir, ) + tuple(settings.LOCALE_PATHS)


def get_public_path():
    public_path = get_setting('public_path') or settings.STATIC_ROOT
    return Path(public_path) if public_path else None


def publish_themes():
    """
    Link the themes directory into the public (static) directory, so theme assets are served under
    '{STATIC_URL}{public_dir}/'.

    Nothing is done if symlinks are disabled, the link already exists or the themes directory is missing.

    Returns:
        (path.Path): path of the created link, or None
    """
    if not get_setting('symlink'):
        return None

    theme_path = get_setting('theme_path')
    public_path = get_public_path()
    if public_path is None:
        logger.warning('Themes were not published, neither THEMEVEL[\'public_path\'] nor STATIC_ROOT is set.')
        return None

    link = public_path / get_setting('public_dir')
    if os.path.lexists(link) or not theme_path or not os.path.isdir(theme_path):
        return None

    public_path.makedirs_p()
    os.symlink(theme_path, link)
    logger.info('Published themes from [%s] to [%s].', theme_path, link)
    return link
