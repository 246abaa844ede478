"""
Template tags for theme assets.

Example:
    {% load themevel %}
    {% css 'app' %}                 <link ... href="/static/Themes/default/assets/css/app.css">
    {% js "vendor/jquery.min" %}    <script ... src="/static/Themes/default/assets/js/vendor/jquery.min.js"></script>
    {% css stylesheet_url %}        <link ... href="{{ stylesheet_url }}">
    {% asset 'main.js' %}           <script ... src="/static/Themes/default/assets/main.js?v=1700000000"></script>
    {% theme_asset 'img/logo.png' %}
"""


from django import template
from django.utils.safestring import mark_safe

from themevel.assets import get_asset_resolver, is_literal
from themevel.helpers import theme_asset_url

register = template.Library()


def parse_directive(parser, token):
    """
    Compile an asset tag into a DirectiveNode.

    The resolver is built here, so settings are read once, when the template is compiled.
    """
    bits = token.split_contents()
    tag_name = bits[0]
    if len(bits) != 2:
        raise template.TemplateSyntaxError("'{}' tag requires exactly one argument.".format(tag_name))

    handlers = get_asset_resolver().directives()
    if tag_name not in handlers:
        raise template.TemplateSyntaxError("'{}' tag is disabled in THEMEVEL['directives'].".format(tag_name))

    return DirectiveNode(handlers[tag_name], bits[1], deferred=(tag_name != 'asset' and not is_literal(bits[1])))


register.tag('css', parse_directive)
register.tag('js', parse_directive)
register.tag('asset', parse_directive)


@register.simple_tag
def theme_asset(path):
    """
    Return the URL of an asset of the current theme.

    Arguments:
        path (str): path relative to the theme's assets folder, 'theme-name:path' selects another theme.

    Returns:
        str: URL of the asset.
    """
    return theme_asset_url(path)


class DirectiveNode(template.Node):
    def __init__(self, handler, arg_text, deferred=False):
        self.handler = handler
        self.arg_text = arg_text
        self.deferred = deferred

    def render(self, context):
        output = self.handler(self.arg_text)
        if self.deferred:
            # the tag references a template variable, let the engine evaluate it
            return context.template.engine.from_string(output).render(context)
        return mark_safe(output)
