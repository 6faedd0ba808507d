from enum import Enum

from pagenav.i18n import Translator
from pagenav.links import PageLinkResolver


class NavKind(Enum):
    COUNT = "count"
    FIRST = "first"
    PREV = "prev"
    PAGE = "page"
    CURRENT = "current"
    NEXT = "next"
    LAST = "last"


#: kinds that occur at most once in a pagination
SINGLE_KINDS = frozenset(
    [
        NavKind.COUNT,
        NavKind.FIRST,
        NavKind.PREV,
        NavKind.CURRENT,
        NavKind.NEXT,
        NavKind.LAST,
    ]
)


class CountLabel:
    """The label of the "Page X of Y" entry."""

    __slots__ = ("current_page", "total_pages")

    def __init__(self, current_page, total_pages):
        self.current_page = current_page
        self.total_pages = total_pages

    def __eq__(self, other):
        if not isinstance(other, CountLabel):
            return NotImplemented
        return (self.current_page, self.total_pages) == (
            other.current_page,
            other.total_pages,
        )

    def __hash__(self):
        return hash((self.current_page, self.total_pages))

    def to_json(self):
        return {
            "current_page": self.current_page,
            "total_pages": self.total_pages,
        }

    def __repr__(self):
        return "CountLabel(%r, %r)" % (self.current_page, self.total_pages)


class NavItem:
    """One entry of a pagination.  Items without a target are inert and
    are rendered as plain text.
    """

    __slots__ = ("kind", "label", "css_class", "target")

    def __init__(self, kind, label, css_class="", target=None):
        self.kind = kind
        self.label = label
        self.css_class = css_class or ""
        self.target = target or None

    @property
    def classes(self):
        return tuple(self.css_class.split())

    @property
    def is_link(self):
        return self.target is not None

    def __eq__(self, other):
        if not isinstance(other, NavItem):
            return NotImplemented
        return (self.kind, self.label, self.css_class, self.target) == (
            other.kind,
            other.label,
            other.css_class,
            other.target,
        )

    def __hash__(self):
        return hash((self.kind, self.label, self.css_class, self.target))

    def to_json(self):
        label = self.label
        if isinstance(label, CountLabel):
            label = label.to_json()
        return {
            "kind": self.kind.value,
            "label": label,
            "class": self.css_class,
            "target": self.target,
        }

    def __repr__(self):
        return "NavItem(%s, %r, class=%r, target=%r)" % (
            self.kind.name,
            self.label,
            self.css_class,
            self.target,
        )


class PaginationModel:
    """The ordered entries of a pagination.  The order of the items is the
    order in which they are displayed.
    """

    def __init__(self, items=()):
        self._items = tuple(items)

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __getitem__(self, idx):
        return self._items[idx]

    def __eq__(self, other):
        if not isinstance(other, PaginationModel):
            return NotImplemented
        return self._items == other._items

    def __hash__(self):
        return hash(self._items)

    def get(self, kind):
        """Returns the single item of the given kind or `None`."""
        for item in self._items:
            if item.kind is kind:
                return item
        return None

    count = property(lambda x: x.get(NavKind.COUNT))
    first = property(lambda x: x.get(NavKind.FIRST))
    prev = property(lambda x: x.get(NavKind.PREV))
    current = property(lambda x: x.get(NavKind.CURRENT))
    next = property(lambda x: x.get(NavKind.NEXT))
    last = property(lambda x: x.get(NavKind.LAST))

    @property
    def pages(self):
        """The numbered entries (including the current page) in order."""
        return [x for x in self._items if x.kind in (NavKind.PAGE, NavKind.CURRENT)]

    @property
    def page_numbers(self):
        return [x.label for x in self.pages]

    def to_json(self):
        return [x.to_json() for x in self._items]

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, list(self._items))


def count_pages(total_items, per_page):
    """Returns the number of pages needed to show `total_items` items."""
    if not total_items or not per_page or per_page < 1:
        return 0
    return (total_items + per_page - 1) // per_page


def build_pagination(
    current_page=None,
    total_pages=None,
    page_range=3,
    class_prefix="",
    show_count=True,
    show_directional=True,
    show_edges=True,
    link_for=None,
    translate=None,
    count_total_pages=None,
):
    """Computes the entries of a pagination.

    ``page_range`` is the number of page links shown before and after the
    current page.  ``link_for`` resolves a page number to its URL and
    ``translate`` localizes the labels of the edge and directional links.
    If ``total_pages`` is not given it is taken from ``count_total_pages``.

    With fewer than two pages there is nothing to paginate and the
    returned model is empty.  Out of range page numbers are not rejected;
    they produce whatever entries the conditions below allow.
    """
    if not current_page:
        current_page = 1
    if not total_pages and count_total_pages is not None:
        total_pages = count_total_pages()
    total_pages = total_pages or 0
    if page_range is None:
        page_range = 3

    if total_pages < 2:
        return PaginationModel()

    if link_for is None:
        link_for = PageLinkResolver()
    if translate is None:
        translate = Translator()
    prefix = class_prefix or ""

    # number of page links that fit without hiding any pages
    show_items = page_range * 2 + 1
    windowed = show_items < total_pages
    items = []

    if show_count:
        items.append(
            NavItem(
                NavKind.COUNT,
                CountLabel(current_page, total_pages),
                prefix + "count",
            )
        )

    if (
        show_edges
        and current_page > 2
        and current_page > page_range + 1
        and windowed
    ):
        items.append(
            NavItem(NavKind.FIRST, translate("First"), prefix + "first", link_for(1))
        )

    if show_directional and current_page > 1 and windowed:
        prev_num = current_page - 1
        items.append(
            NavItem(
                NavKind.PREV,
                translate("Previous"),
                prefix + "prev",
                link_for(prev_num) if prev_num else None,
            )
        )

    for num in range(1, total_pages + 1):
        if num == current_page:
            items.append(
                NavItem(NavKind.CURRENT, num, prefix + "current is-active")
            )
        elif not windowed or (
            current_page - page_range <= num <= current_page + page_range
        ):
            items.append(NavItem(NavKind.PAGE, num, "", link_for(num)))

    if show_directional and current_page < total_pages and windowed:
        items.append(
            NavItem(
                NavKind.NEXT,
                translate("Next"),
                prefix + "next",
                link_for(current_page + 1),
            )
        )

    if (
        show_edges
        and current_page < total_pages - 1
        and current_page + page_range - 1 < total_pages
        and windowed
    ):
        items.append(
            NavItem(
                NavKind.LAST,
                translate("Last"),
                prefix + "last",
                link_for(total_pages),
            )
        )

    return PaginationModel(items)
