"""
Lists all installed themes.
"""
from django.core.management import BaseCommand

from themevel.helpers import get_themes

HEADERS = ('Name', 'Author', 'Version', 'Parent')


class Command(BaseCommand):
    help = 'List all available themes'

    def handle(self, *args, **options):
        themes = get_themes()
        if not themes:
            self.stdout.write('No themes found.')
            return

        rows = [
            (theme.name, theme.get('author') or '', theme.get('version') or '', theme.parent or '')
            for theme in themes
        ]
        widths = [max(len(str(row[i])) for row in rows + [HEADERS]) for i in range(len(HEADERS))]

        separator = '+' + '+'.join('-' * (width + 2) for width in widths) + '+'
        self.stdout.write(separator)
        self.stdout.write(self.format_row(HEADERS, widths))
        self.stdout.write(separator)
        for row in rows:
            self.stdout.write(self.format_row(row, widths))
        self.stdout.write(separator)

    @staticmethod
    def format_row(row, widths):
        return '| ' + ' | '.join(str(value).ljust(width) for value, width in zip(row, widths)) + ' |'
