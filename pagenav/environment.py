import jinja2

from pagenav.config import Config
from pagenav.i18n import get_default_lang
from pagenav.i18n import Translator
from pagenav.pagination import build_pagination
from pagenav.pagination import PaginationModel
from pagenav.render import render_pagination


class Environment:
    """Binds the configuration, the label translator and the link resolver
    together and exposes the pagination to Jinja templates::

        {{ pagination(current_page=page, total_pages=pages) }}

    or, with a model built in advance::

        {{ get_pagination(page, pages, page_range=2)|render_pagination }}
    """

    def __init__(self, config=None, language=None, template_paths=None):
        if config is None:
            config = Config()
        self.config = config
        if language is None:
            language = config.language or get_default_lang()
        self.translator = Translator(language, locale=config.locale)
        self.link_resolver = config.make_link_resolver()

        self.jinja_env = jinja2.Environment(
            autoescape=self.select_jinja_autoescape,
            loader=jinja2.FileSystemLoader(template_paths or []),
        )
        self.jinja_env.globals.update(
            pagination=self.render_pagination,
            get_pagination=self.get_pagination,
        )
        self.jinja_env.filters.update(
            render_pagination=self.render_pagination,
        )

    @staticmethod
    def select_jinja_autoescape(filename):
        if filename is None:
            return True
        return filename.endswith((".html", ".htm", ".xml", ".xhtml"))

    def get_pagination(self, current_page=None, total_pages=None, **options):
        """Builds a pagination model from the configured options.  Keyword
        arguments override single options.
        """
        kwargs = self.config.pagination_options
        kwargs.setdefault("link_for", self.link_resolver)
        kwargs.setdefault("translate", self.translator)
        kwargs.update(options)
        return build_pagination(current_page, total_pages, **kwargs)

    def render_pagination(self, pagination=None, total_pages=None, **options):
        """Renders a pagination.  The first argument is either a model that
        was built before or the current page number.
        """
        if not isinstance(pagination, PaginationModel):
            current_page = options.pop("current_page", pagination)
            pagination = self.get_pagination(current_page, total_pages, **options)
        return render_pagination(pagination, self.translator)

    def render_template(self, name, **context):
        return self.jinja_env.get_template(name).render(**context)
