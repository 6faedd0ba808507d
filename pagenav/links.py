import posixpath
from urllib.parse import parse_qsl
from urllib.parse import urlencode
from urllib.parse import urlsplit
from urllib.parse import urlunsplit


class PageLinkResolver:
    """Resolves page numbers to URL paths the way paginated records are
    laid out: the first page lives at the base path itself and every
    following page below ``<base>/<url_suffix>/<num>/``.
    """

    def __init__(self, base_path="/", url_suffix="page"):
        base_path = "/" + (base_path or "").strip("/")
        if not base_path.endswith("/"):
            base_path += "/"
        self.base_path = base_path
        self.url_suffix = (url_suffix or "page").strip("/")

    def __call__(self, page_num):
        if not page_num or page_num < 1:
            return ""
        if page_num == 1:
            return self.base_path
        return posixpath.join(self.base_path, self.url_suffix, str(page_num)) + "/"

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self.base_path)


class QueryLinkResolver:
    """Resolves page numbers by setting a query parameter on a base URL.
    Page one drops the parameter so it shares its URL with the unpaginated
    view.
    """

    def __init__(self, base_url="", param="page"):
        self.base_url = base_url or ""
        self.param = param or "page"

    def __call__(self, page_num):
        if not page_num or page_num < 1:
            return ""
        scheme, netloc, path, query, fragment = urlsplit(self.base_url)
        if not (netloc or path):
            path = "/"
        args = [(k, v) for k, v in parse_qsl(query, keep_blank_values=True)
                if k != self.param]
        if page_num != 1:
            args.append((self.param, str(page_num)))
        return urlunsplit((scheme, netloc, path, urlencode(args), fragment))

    def __repr__(self):
        return "<%s %r param=%r>" % (
            self.__class__.__name__,
            self.base_url,
            self.param,
        )
