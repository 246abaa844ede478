"""
Module for code that should run during application startup
"""


from django.apps import AppConfig

from themevel.core import enable_theming, publish_themes
from themevel.helpers import is_theming_enabled


class ThemevelAppConfig(AppConfig):
    """
    App Configurations for Theming.
    """
    name = 'themevel'
    verbose_name = 'Themevel'

    def ready(self):
        """
        startup run method, this method is called after the application has successfully initialized.
        Anything that needs to executed once (and only once) the theming app starts can be placed here.
        """
        if is_theming_enabled():
            # proceed only if theming in enabled

            enable_theming()
            publish_themes()
