"""
Theme support for Django projects. It contains the components needed to serve views and assets from a swappable
theme directory.

Components:
    Template Loader (themevel.template_loaders.ThemeTemplateLoader):
        Theming aware template loader, this loader will first look in the views directory of the current theme,
        then in the views directories of its parent themes and finally in the system template dirs.

    Template Tags (themevel.templatetags.themevel):
        `css`, `js` and `asset` tags rewrite asset references into URLs under the current theme, see
        themevel.assets.AssetResolver. `theme_asset` returns the URL of any theme asset.

    Middleware (themevel.middleware):
        CurrentThemeMiddleware sets the active theme on each request, `use_theme` and `theme_type` switch
        the theme for a single view.

    Management Commands:
        theme_create scaffolds a new theme from the bundled stubs, theme_list lists all installed themes.

Themes:
    A theme is a directory inside THEMEVEL['theme_path'] containing a 'theme.json' file, e.g.

        themes/default/theme.json
        themes/default/views/layouts/master.html
        themes/default/assets/css/app.css

    'theme.json' holds name, title, description, author, version and parent of the theme. A theme with a parent
    falls back to the parent's views and assets.
"""
