import os

import click

from pagenav.config import Config
from pagenav.i18n import get_default_lang
from pagenav.i18n import is_valid_language
from pagenav.i18n import KNOWN_LANGUAGES
from pagenav.pagination import count_pages
from pagenav.utils import echo_json


class Context:
    def __init__(self):
        self._config_path = os.environ.get("PAGENAV_CONFIG") or None
        self._config = None
        self._env = None
        self._language = None

    def _get_language(self):
        rv = self._language
        if rv is None:
            rv = self._language = self.get_config().language or get_default_lang()
        return rv

    def _set_language(self, value):
        self._language = value
        self._env = None

    language = property(_get_language, _set_language)
    del _get_language, _set_language

    def set_config_path(self, value):
        self._config_path = value
        self._config = None
        self._env = None

    def get_config(self):
        if self._config is not None:
            return self._config
        if self._config_path is not None and not os.path.isfile(self._config_path):
            raise click.UsageError(
                'Could not find config file "%s"' % self._config_path
            )
        self._config = Config(self._config_path)
        return self._config

    def get_env(self):
        if self._env is not None:
            return self._env
        from pagenav.environment import Environment

        self._env = Environment(self.get_config(), language=self.language)
        return self._env


pass_context = click.make_pass_decorator(Context, ensure=True)


def validate_language(ctx, param, value):
    if value is not None and not is_valid_language(value):
        raise click.BadParameter('Unsupported language "%s".' % value)
    return value


def pagination_options(cli):
    """Adds the options shared by the commands that build a pagination.
    Flags left unset fall back to the configuration.
    """
    options = [
        click.option("--page", type=int, default=None,
                     help="The current page (defaults to 1)."),
        click.option("--total", type=int, default=None,
                     help="The total number of pages."),
        click.option("--items", type=int, default=None,
                     help="Number of items to paginate.  Used to compute "
                     "the number of pages if --total is not given."),
        click.option("--per-page", type=int, default=20, show_default=True,
                     help="Items per page, used together with --items."),
        click.option("--range", "page_range", type=int, default=None,
                     help="Pages to show before and after the current page."),
        click.option("--class-prefix", default=None,
                     help="String prepended to the generated classes."),
        click.option("--count/--no-count", "show_count", default=None,
                     help='Show the "Page X of Y" entry.'),
        click.option("--directional/--no-directional", "show_directional",
                     default=None, help="Show previous and next links."),
        click.option("--edges/--no-edges", "show_edges", default=None,
                     help="Show first and last page links."),
        click.option("--base-path", default=None,
                     help="Base path the page links are resolved against."),
        click.option("-v", "--verbose", "verbosity", count=True,
                     help="Increases the verbosity of the output."),
    ]
    for option in reversed(options):
        cli = option(cli)
    return cli


def get_pagination(ctx, page, total, items, per_page, base_path, verbosity,
                   **options):
    env = ctx.get_env()
    overrides = dict((k, v) for k, v in options.items() if v is not None)
    if base_path is not None:
        overrides["link_for"] = ctx.get_config().make_link_resolver(base_path)
    if items is not None:
        overrides["count_total_pages"] = lambda: count_pages(items, per_page)

    pagination = env.get_pagination(page, total, **overrides)

    if verbosity:
        if not pagination:
            click.secho("Nothing to paginate", fg="yellow", err=True)
        else:
            click.secho(
                "%d entries, pages %s" % (
                    len(pagination),
                    ", ".join(str(x) for x in pagination.page_numbers),
                ),
                fg="cyan",
                err=True,
            )
    return pagination


@click.group()
@click.option("--config", type=click.Path(dir_okay=False),
              help="The ini file holding the pagination settings.")
@click.option("--language", default=None, callback=validate_language,
              help="The label language to use (overrides autodetection).")
@click.version_option(prog_name="pagenav", package_name="pagenav")
@pass_context
def cli(ctx, config=None, language=None):
    """Computes and renders pagination menus.

    Given the current page and the total number of pages this works out
    which page links, previous/next and first/last links to show.
    """
    if config is not None:
        ctx.set_config_path(config)
    if language is not None:
        ctx.language = language


@cli.command("render")
@pagination_options
@pass_context
def render_cmd(ctx, **options):
    """Renders the pagination as an HTML navigation.  Nothing is printed
    if there are fewer than two pages.
    """
    pagination = get_pagination(ctx, **options)
    if pagination:
        click.echo(ctx.get_env().render_pagination(pagination))


@cli.command("model")
@pagination_options
@pass_context
def model_cmd(ctx, **options):
    """Prints the entries of the pagination as JSON."""
    echo_json(get_pagination(ctx, **options).to_json())


@cli.command("languages", short_help="Lists the label languages.")
def languages_cmd():
    """Lists the languages labels can be translated to."""
    for lang in KNOWN_LANGUAGES:
        click.echo(lang)


main = cli
