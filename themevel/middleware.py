"""
Middleware for themevel.

CurrentThemeMiddleware sets the active theme on every request. Single views or url patterns can switch to another
theme with the `use_theme` decorator, or with a theme type configured in THEMEVEL['types']:

    THEMEVEL = {
        'types': {
            'enable': True,
            'middleware': {'admin': 'admin-theme'},
        },
    }

    path('dashboard/', theme_type('admin')(DashboardView.as_view())),
"""
import logging

from django.core.exceptions import ImproperlyConfigured
from django.utils.decorators import decorator_from_middleware_with_args
from django.utils.deprecation import MiddlewareMixin

from themevel.conf import get_setting
from themevel.helpers import get_default_theme, set_theme

logger = logging.getLogger(__name__)


class CurrentThemeMiddleware(MiddlewareMixin):
    """
    Middleware that sets `theme` attribute to request object.
    """

    def process_request(self, request):
        request.theme = get_default_theme()


class RouteThemeMiddleware(MiddlewareMixin):
    """
    Middleware that sets the given theme on the request, meant to be applied per view through `use_theme`.
    """

    def __init__(self, get_response, theme_name):
        super(RouteThemeMiddleware, self).__init__(get_response)
        self.theme_name = theme_name

    def process_request(self, request):
        set_theme(self.theme_name, request)


use_theme = decorator_from_middleware_with_args(RouteThemeMiddleware)


def get_theme_types():
    """
    Return a view decorator for every theme type configured in THEMEVEL['types'], keyed by alias.
    Returns an empty dict if theme types are disabled.
    """
    types = get_setting('types')
    if not types.get('enable'):
        return {}
    return {alias: use_theme(theme_name) for alias, theme_name in types.get('middleware', {}).items()}


def theme_type(alias):
    """
    Return the view decorator of a configured theme type.

    Raises:
        ImproperlyConfigured: if theme types are disabled or the alias is not configured.
    """
    theme_types = get_theme_types()
    if alias not in theme_types:
        logger.error('Theme type [%s] is not configured. Configured types: %s', alias, list(theme_types))
        raise ImproperlyConfigured("Theme type '{}' is not configured in THEMEVEL['types'].".format(alias))
    return theme_types[alias]
