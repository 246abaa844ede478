"""
Theming tests for Themevel App Config.
"""


import mock
from django.conf import settings
from django.test import TestCase, override_settings

import themevel
from themevel.apps import ThemevelAppConfig


class TestThemevelAppConfig(TestCase):
    """
    Test themevel app config.
    """

    def test_theme_config_ready(self):
        """
        Tests theme locale directories were added to LOCALE_PATHS on startup.
        """
        themes_dir = settings.THEMEVEL['theme_path']
        self.assertIn(themes_dir + '/default/lang', settings.LOCALE_PATHS)

    def test_ready(self):
        """
        Tests that method `ready` invokes `enable_theming` and `publish_themes`
        """
        config = ThemevelAppConfig('themevel', themevel)

        with mock.patch('themevel.apps.enable_theming') as mock_enable_theming:
            with mock.patch('themevel.apps.publish_themes') as mock_publish_themes:
                config.ready()

                self.assertTrue(mock_enable_theming.called)
                self.assertTrue(mock_publish_themes.called)

    @override_settings(THEMEVEL=dict(settings.THEMEVEL, enabled=False))
    def test_ready_with_theming_disabled(self):
        """
        Tests that method `ready` does nothing when theming is disabled
        """
        config = ThemevelAppConfig('themevel', themevel)

        with mock.patch('themevel.apps.enable_theming') as mock_enable_theming:
            with mock.patch('themevel.apps.publish_themes') as mock_publish_themes:
                config.ready()

                self.assertFalse(mock_enable_theming.called)
                self.assertFalse(mock_publish_themes.called)
