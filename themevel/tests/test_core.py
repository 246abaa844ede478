"""
Tests for the startup logic of theming.
"""
import os
import tempfile

from django.conf import settings
from django.test import TestCase, override_settings
from path import Path
from testfixtures import LogCapture

from themevel.core import enable_theming, get_public_path, publish_themes

LOGGER_NAME = 'themevel.core'


def theme_settings(**kwargs):
    return override_settings(THEMEVEL=dict(settings.THEMEVEL, **kwargs))


class TestEnableTheming(TestCase):

    def test_enable_theming(self):
        """
        Tests theme locale directories are added to LOCALE_PATHS.
        """
        themes_dir = Path(settings.THEMEVEL['theme_path'])

        with self.settings(LOCALE_PATHS=()):
            enable_theming()
            self.assertEqual(settings.LOCALE_PATHS, (themes_dir / 'default' / 'lang',))

    def test_enable_theming_disabled(self):
        with self.settings(LOCALE_PATHS=()):
            with theme_settings(enabled=False):
                enable_theming()
            self.assertEqual(settings.LOCALE_PATHS, ())


class TestPublishThemes(TestCase):
    """
    Test the themes directory is linked into the public directory.
    """

    def setUp(self):
        super(TestPublishThemes, self).setUp()
        self.public_path = Path(tempfile.mkdtemp())
        self.addCleanup(self.public_path.rmtree_p)
        self.theme_path = settings.THEMEVEL['theme_path']

    def test_publish_themes(self):
        with self.settings(STATIC_ROOT=str(self.public_path)):
            with theme_settings(symlink=True):
                with LogCapture(LOGGER_NAME) as logger:
                    link = publish_themes()
                    logger.check(
                        (LOGGER_NAME, 'INFO', 'Published themes from [{}] to [{}].'.format(self.theme_path, link)),
                    )

        self.assertEqual(link, self.public_path / 'Themes')
        self.assertTrue(os.path.islink(link))
        self.assertEqual(os.readlink(link), self.theme_path)
        self.assertTrue(os.path.isfile(link / 'default' / 'theme.json'))

    def test_publish_themes_creates_public_path(self):
        public_path = self.public_path / 'public'

        with theme_settings(symlink=True, public_path=str(public_path), public_dir='themes'):
            link = publish_themes()

        self.assertEqual(link, public_path / 'themes')
        self.assertTrue(os.path.islink(link))

    def test_publish_themes_link_exists(self):
        with self.settings(STATIC_ROOT=str(self.public_path)):
            with theme_settings(symlink=True):
                self.assertIsNotNone(publish_themes())
                self.assertIsNone(publish_themes())

    def test_publish_themes_symlink_disabled(self):
        with self.settings(STATIC_ROOT=str(self.public_path)):
            self.assertIsNone(publish_themes())
        self.assertFalse(os.path.lexists(self.public_path / 'Themes'))

    def test_publish_themes_without_public_path(self):
        with self.settings(STATIC_ROOT=None):
            with theme_settings(symlink=True):
                with LogCapture(LOGGER_NAME) as logger:
                    self.assertIsNone(publish_themes())
                    self.assertEqual(logger.records[0].levelname, 'WARNING')

    def test_publish_themes_missing_theme_path(self):
        with self.settings(STATIC_ROOT=str(self.public_path)):
            with theme_settings(symlink=True, theme_path='/path/to/non/existent/dir'):
                self.assertIsNone(publish_themes())
        self.assertFalse(os.path.lexists(self.public_path / 'Themes'))

    def test_get_public_path(self):
        with self.settings(STATIC_ROOT='/srv/static'):
            self.assertEqual(get_public_path(), Path('/srv/static'))
            with theme_settings(public_path='/srv/public'):
                self.assertEqual(get_public_path(), Path('/srv/public'))

        with self.settings(STATIC_ROOT=None):
            self.assertIsNone(get_public_path())
