"""Exceptions raised by the theme manager."""


THEME_NOT_FOUND_MESSAGE = "Theme [{name}] not found in themes dir [{themes_dir}]"


class ThemeNotFound(Exception):
    """Raised when a requested theme does not exist inside the themes directory."""

    def __init__(self, name, themes_dir=None):
        self.name = name
        super(ThemeNotFound, self).__init__(THEME_NOT_FOUND_MESSAGE.format(name=name, themes_dir=themes_dir))
