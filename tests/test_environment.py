import pytest
from markupsafe import Markup

from pagenav.config import Config
from pagenav.environment import Environment
from pagenav.pagination import NavKind
from pagenav.render import render_pagination


def test_get_pagination_uses_config(env):
    pagination = env.get_pagination(50, 100)
    assert pagination.page_numbers == [47, 48, 49, 50, 51, 52, 53]
    assert pagination.first.label == "First"


def test_get_pagination_overrides(env):
    pagination = env.get_pagination(50, 100, page_range=1, show_count=False)
    assert pagination.page_numbers == [49, 50, 51]
    assert pagination.count is None


def test_render_pagination_accepts_model(env, translator):
    pagination = env.get_pagination(2, 3)
    html = env.render_pagination(pagination)
    assert isinstance(html, Markup)
    assert html == render_pagination(pagination, translator)
    assert env.render_pagination(2, 3) == html


@pytest.mark.parametrize(
    "config_text",
    [
        """
        [pagination]
        range = 1
        class_prefix = pg-

        [links]
        base_path = /blog/

        [project]
        language = de
        """
    ],
)
def test_environment_from_config(config):
    env = Environment(config)
    assert env.translator.language == "de"
    pagination = env.get_pagination(5, 10)
    assert pagination.prev.label == "Zurück"
    assert pagination.prev.target == "/blog/page/4/"
    assert pagination.get(NavKind.CURRENT).css_class == "pg-current is-active"


def test_language_argument_wins():
    env = Environment(Config(), language="fr")
    assert env.get_pagination(5, 10).next.label == "Suivante"


def test_template_global(env):
    tmpl = env.jinja_env.from_string(
        "{{ pagination(current_page=2, total_pages=3) }}"
    )
    rv = tmpl.render()
    assert rv == env.render_pagination(2, 3)
    assert "&lt;" not in rv


def test_template_nothing_to_paginate(env):
    tmpl = env.jinja_env.from_string("[{{ pagination(1, 1) }}]")
    assert tmpl.render() == "[]"


def test_template_filter(env):
    tmpl = env.jinja_env.from_string(
        "{{ get_pagination(page, pages, show_count=False)|render_pagination }}"
    )
    rv = tmpl.render(page=2, pages=3)
    assert '<li class="current is-active"><span>2</span></li>' in rv
    assert "current_page" not in rv


def test_template_files(tmp_path):
    (tmp_path / "list.html").write_text(
        "<main>{{ pagination(page, pages) }}</main>", encoding="utf-8"
    )
    env = Environment(Config(), language="en", template_paths=[str(tmp_path)])
    rv = env.render_template("list.html", page=1, pages=2)
    assert rv.startswith('<main><nav class="pagination" role="navigation">')
    assert '<li><a href="/page/2/">2</a></li>' in rv


@pytest.mark.parametrize(
    "filename, expected",
    [(None, True), ("a.html", True), ("a.xml", True), ("a.txt", False)],
)
def test_select_jinja_autoescape(filename, expected):
    assert Environment.select_jinja_autoescape(filename) is expected
