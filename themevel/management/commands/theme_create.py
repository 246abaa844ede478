"""
Creates a new theme from the bundled stubs.
"""
import json
import logging

from django.core.exceptions import ImproperlyConfigured
from django.core.management import BaseCommand, CommandError
from path import Path

from themevel.conf import get_setting
from themevel.helpers import get_theme_base_dir, has_theme

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Create a new theme'

    def add_arguments(self, parser):
        parser.add_argument('name',
                            type=str,
                            help='Name of the theme, also used as its directory name.')
        parser.add_argument('--title',
                            action='store',
                            dest='title',
                            type=str,
                            default='',
                            help='Human readable title of the theme.')
        parser.add_argument('--description',
                            action='store',
                            dest='description',
                            type=str,
                            default='',
                            help='Description of the theme.')
        parser.add_argument('--author',
                            action='store',
                            dest='author',
                            type=str,
                            default='',
                            help='Author of the theme.')
        parser.add_argument('--theme-version',
                            action='store',
                            dest='theme_version',
                            type=str,
                            default='1.0.0',
                            help='Version of the theme (default="1.0.0").')
        parser.add_argument('--parent',
                            action='store',
                            dest='parent',
                            type=str,
                            default='',
                            help='Name of the theme to inherit views and assets from.')

    def handle(self, *args, **options):
        name = options['name']
        parent = options.get('parent')

        try:
            themes_dir = get_theme_base_dir()
        except ImproperlyConfigured as e:
            raise CommandError(str(e))

        theme_dir = themes_dir / name
        if theme_dir.exists():
            raise CommandError('Theme "{}" already exists.'.format(name))

        if parent and not has_theme(parent):
            raise CommandError('Parent theme "{}" does not exist.'.format(parent))

        info = {
            'name': name,
            'title': options.get('title') or name,
            'description': options.get('description', ''),
            'author': options.get('author', ''),
            'version': options.get('theme_version', '1.0.0'),
            'parent': parent,
        }

        self.make_folders(theme_dir)
        self.copy_stubs(theme_dir, info)

        config_file = theme_dir / get_setting('config')['name']
        with open(config_file, 'w') as f:
            json.dump(info, f, indent=4)

        logger.info('Theme "%s" created at %s', name, theme_dir)
        self.stdout.write(self.style.SUCCESS('Theme "{}" created at {}'.format(name, theme_dir)))

    def make_folders(self, theme_dir):
        for folder in get_setting('folders').values():
            (theme_dir / folder).makedirs_p()

    def copy_stubs(self, theme_dir, info):
        """
        Copy stub files into the new theme, replacing the [NAME] and [TITLE] placeholders.
        """
        stubs = get_setting('stubs')
        stubs_dir = Path(stubs['path'])

        for stub in stubs['files'].values():
            source = stubs_dir / stub
            if not source.is_file():
                logger.warning("Stub file '%s' does not exist.", source)
                continue

            destination = theme_dir / stub
            destination.parent.makedirs_p()
            content = source.read_text().replace('[NAME]', info['name']).replace('[TITLE]', info['title'])
            destination.write_text(content)
