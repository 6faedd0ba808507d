import inspect

import pytest

from pagenav.config import Config
from pagenav.environment import Environment
from pagenav.i18n import Translator


@pytest.fixture(autouse=True)
def default_language(monkeypatch):
    """Keep the label language independent of the user's locale."""
    monkeypatch.setenv("PAGENAV_LANG", "en")


@pytest.fixture
def translator():
    return Translator("en")


@pytest.fixture
def config_text():
    return ""


@pytest.fixture
def config_file(tmp_path, config_text):
    filename = tmp_path / "pagenav.ini"
    filename.write_text(inspect.cleandoc(config_text), encoding="utf-8")
    return filename


@pytest.fixture
def config(config_file):
    return Config(str(config_file))


@pytest.fixture
def env(config):
    return Environment(config, language="en")
