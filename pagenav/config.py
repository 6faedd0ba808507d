import copy
import os

from inifile import IniFile

from pagenav.links import PageLinkResolver
from pagenav.links import QueryLinkResolver
from pagenav.utils import bool_from_string
from pagenav.utils import int_from_string


DEFAULT_CONFIG = {
    "PAGINATION": {
        "range": 3,
        "class_prefix": "",
        "count": True,
        "directional": True,
        "edges": True,
    },
    "LINKS": {
        # "path" gives /base/page/2/, "query" gives /base?page=2
        "style": "path",
        "base_path": "/",
        "url_suffix": "page",
        "param": "page",
    },
    "PROJECT": {
        "language": None,
        "locale": None,
    },
}


def update_config_from_ini(config, inifile):
    pagination = config["PAGINATION"]
    section = inifile.section_as_dict("pagination")
    pagination["range"] = int_from_string(
        section.get("range"), pagination["range"]
    )
    if "class_prefix" in section:
        pagination["class_prefix"] = section["class_prefix"] or ""
    for key in "count", "directional", "edges":
        pagination[key] = bool_from_string(section.get(key), pagination[key])

    for section_name in "LINKS", "PROJECT":
        section = inifile.section_as_dict(section_name.lower())
        config[section_name].update(
            (k, v) for k, v in section.items() if k in config[section_name]
        )


class Config:
    def __init__(self, filename=None):
        self.filename = filename
        self.values = copy.deepcopy(DEFAULT_CONFIG)

        if filename is not None and os.path.isfile(filename):
            inifile = IniFile(filename)
            update_config_from_ini(self.values, inifile)

    def __getitem__(self, name):
        return self.values[name]

    @property
    def language(self):
        """The configured label language, `None` for autodetection."""
        return self.values["PROJECT"]["language"] or None

    @property
    def locale(self):
        """The locale used to format numbers."""
        return self.values["PROJECT"]["locale"] or None

    @property
    def pagination_options(self):
        """The configured options as keyword arguments for
        :func:`pagenav.pagination.build_pagination`.
        """
        cfg = self.values["PAGINATION"]
        return {
            "page_range": cfg["range"],
            "class_prefix": cfg["class_prefix"],
            "show_count": cfg["count"],
            "show_directional": cfg["directional"],
            "show_edges": cfg["edges"],
        }

    def make_link_resolver(self, base_path=None):
        """Creates the configured page link resolver.  ``base_path``
        overrides the configured base.
        """
        cfg = self.values["LINKS"]
        if base_path is None:
            base_path = cfg["base_path"]
        if cfg["style"] == "query":
            return QueryLinkResolver(base_path, param=cfg["param"])
        return PageLinkResolver(base_path, url_suffix=cfg["url_suffix"])
