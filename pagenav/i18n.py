import json
import os

from babel import Locale
from babel import UnknownLocaleError
from babel.numbers import format_decimal


translations_path = os.path.join(
    os.path.abspath(os.path.dirname(__file__)), "translations"
)
KNOWN_LANGUAGES = sorted(
    x[:-5] for x in os.listdir(translations_path) if x.endswith(".json")
)


translations = {}
for _lang in KNOWN_LANGUAGES:
    with open(os.path.join(translations_path, _lang + ".json"), encoding="utf-8") as f:
        translations[_lang] = json.load(f)


def get_translations(language):
    """Looks up the translations for a given language."""
    return translations.get(language)


def is_valid_language(lang):
    """Verifies a language is known and valid."""
    return lang in KNOWN_LANGUAGES


def get_default_lang():
    """Returns the default language the system should use."""
    for key in "PAGENAV_LANG", "LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG":
        value = os.environ.get(key)
        if not value:
            continue
        lang = value.split("_")[0].lower()
        if is_valid_language(lang):
            return lang
    return "en"


def _parse_locale(value, fallback="en"):
    try:
        return Locale.parse(value)
    except (UnknownLocaleError, ValueError, TypeError):
        return Locale.parse(fallback)


class Translator:
    """Maps the English labels used in a pagination to a language.

    Calling the translator with a msgid returns the localized text, or the
    msgid unchanged if the catalog has no entry for it.  Unknown languages
    fall back to English.
    """

    def __init__(self, language="en", locale=None):
        if not is_valid_language(language):
            language = "en"
        self.language = language
        self.catalog = get_translations(language) or {}
        self.locale = _parse_locale(locale or language)

    def __call__(self, msgid):
        return self.catalog.get(msgid, msgid)

    gettext = __call__

    def format_number(self, number):
        """Formats a page number for the translator's locale."""
        return format_decimal(number, locale=self.locale)

    def __repr__(self):
        return "<%s %r locale=%s>" % (
            self.__class__.__name__,
            self.language,
            self.locale,
        )
