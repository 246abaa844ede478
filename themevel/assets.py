"""
Asset path resolution for the css, js and asset template tags.

Everything in this module is plain string manipulation: it does not touch the filesystem and never raises for
well formed input. Mapping a theme relative path to its published URL is delegated to the ``theme_path`` callable
given to the resolver (``themevel.helpers.theme_asset_url`` in a running site).
"""


import time

from themevel.conf import get_asset_config
from themevel.helpers import theme_asset_url

CSS_TAG = '<link media="all" type="text/css" rel="stylesheet" href="{}">'
JS_TAG = '<script type="text/javascript" src="{}"></script>'

QUOTES = ("'", '"')


def is_literal(arg_text):
    """
    Returns True if the tag argument is a quoted string literal, False if it is a template expression.
    """
    return arg_text[:1] in QUOTES


def deferred(expression):
    """
    Wrap a template expression so the template engine evaluates it when the tag output is rendered.
    """
    return '{{ %s }}' % expression


def file_extension(name):
    """
    Return the text after the last '.' in name, or an empty string if there is none.
    """
    if '.' not in name:
        return ''
    return name.rsplit('.', 1)[1]


class AssetResolver:
    """
    Turns the raw argument of an asset tag into a URL and renders the matching HTML tag.

    Args:
        config (themevel.conf.AssetConfig): theme relative base paths of the css and js tags
        theme_path (callable): maps a theme relative path to its published URL
        clock (callable): returns the current time in seconds, used for the cache busting token.
    """

    def __init__(self, config, theme_path, clock=time.time):
        self.config = config
        self.theme_path = theme_path
        self.clock = clock

    def resolve(self, arg_text, kind, base_path):
        """
        Convert a simple asset name into a full asset path.

        Example:
            >> resolver.resolve("'app'", 'css', 'css')
            '/static/Themes/default/assets/css/app.css'

        Args:
            arg_text (str): the argument exactly as written in the template, quotes included
            kind (str): type of the asset, 'css' or 'js'
            base_path (str): theme relative directory the asset is stored in

        Returns:
            (str): full path to the asset, or a deferred expression if arg_text is not a literal
        """
        if not is_literal(arg_text):
            return deferred(arg_text)

        name = arg_text.strip("'\"")

        if name.startswith('https://') or name.startswith('http://'):
            return name

        if not name.startswith('/'):
            base_path = base_path.strip('/')
            base_path = '{}/'.format(base_path) if base_path else '/'
            name = self.theme_path(base_path + name)

        suffix = '.{}'.format(kind)
        if not name.endswith(suffix):
            name += suffix

        return name

    def css(self, arg_text):
        return CSS_TAG.format(self.resolve(arg_text, 'css', self.config.css))

    def js(self, arg_text):
        return JS_TAG.format(self.resolve(arg_text, 'js', self.config.js))

    def asset(self, arg_text):
        """
        Render a script or stylesheet tag for any theme asset, chosen by the file extension.

        Internal files get a '?v=<timestamp>' cache busting token. Anything that is not '.js' is treated as a
        stylesheet.
        """
        name = arg_text
        for char in ('(', ')', "'"):
            name = name.replace(char, '')

        url = name
        # internal file
        if not name.startswith('//') and not name.startswith('http'):
            url = '{}?v={}'.format(name, int(self.clock()))
            if not url.startswith('/'):
                url = self.theme_path(url)

        if file_extension(name) == 'js':
            return JS_TAG.format(url)
        return CSS_TAG.format(url)

    def directives(self):
        """
        Return the handlers of all enabled directives, keyed by tag name.
        """
        handlers = {}
        if self.config.css is not None:
            handlers['css'] = self.css
        if self.config.js is not None:
            handlers['js'] = self.js
        handlers['asset'] = self.asset
        return handlers


def get_asset_resolver(clock=time.time):
    """
    Build a resolver from the current settings, bound to the theme manager's asset URLs.
    """
    return AssetResolver(get_asset_config(), theme_asset_url, clock=clock)
