"""
Theming aware template loaders.
"""


from django.template.loaders.filesystem import Loader

from themevel.helpers import get_current_theme


class ThemeTemplateLoader(Loader):
    """
    Filesystem Template loader to pickup templates from the current theme's views directory, then from the views
    directories of its parent themes and finally from the regular template dirs.

    Note:
        Do not wrap this loader in django.template.loaders.cached.Loader, cached templates are not keyed by theme.
    """
    def get_dirs(self):
        dirs = list(super(ThemeTemplateLoader, self).get_dirs())
        theme = get_current_theme()

        if not theme:
            return dirs
        return theme.template_dirs + dirs
