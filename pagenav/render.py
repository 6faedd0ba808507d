from markupsafe import Markup

from pagenav.i18n import Translator
from pagenav.pagination import NavKind


def render_count(item, translate):
    """Renders the "Page X of Y" entry.  Every part sits in its own span
    so it can be styled or picked out separately.
    """
    label = item.label
    return Markup(
        '\t\t<li class="{cls}"><span>'
        "<span>{page}</span> "
        '<span class="current_page">{current}</span> '
        "<span>{of}</span> "
        '<span class="total_pages">{total}</span>'
        "</span></li>"
    ).format(
        cls=item.css_class,
        page=translate("Page"),
        current=translate.format_number(label.current_page),
        of=translate("of"),
        total=translate.format_number(label.total_pages),
    )


def render_item(item):
    if item.css_class:
        rv = Markup('\t\t<li class="%s">') % item.css_class
    else:
        rv = Markup("\t\t<li>")
    if item.target is None:
        rv += Markup("<span>%s</span>") % item.label
    else:
        rv += Markup('<a href="%s">%s</a>') % (item.target, item.label)
    return rv + Markup("</li>")


def render_pagination(pagination, translate=None):
    """Renders a pagination model to HTML.  An empty model renders to an
    empty string.
    """
    if not pagination:
        return Markup("")
    if translate is None:
        translate = Translator()

    lines = [
        Markup('<nav class="pagination" role="navigation">'),
        Markup("\t<ul>"),
    ]

    count = pagination.get(NavKind.COUNT)
    if count is not None:
        lines.append(render_count(count, translate))

    for item in pagination:
        if item.kind is NavKind.COUNT:
            continue
        lines.append(render_item(item))

    lines.append(Markup("\t</ul>"))
    lines.append(Markup("</nav>"))
    return Markup("\n").join(lines)
