"""
Supported languages for greet

Defines the closed set of languages, the code parser used by the CLI and
the helpers behind the ``languages`` command.
"""

from enum import Enum
from typing import Iterator, Union


class Language(Enum):
    """Languages a message can be generated in, in listing order."""
    EN = "en"
    FR = "fr"
    ES = "es"
    DE = "de"
    IT = "it"

    @property
    def code(self) -> str:
        """Two-letter lowercase language code."""
        return self.value

    @property
    def display_name(self) -> str:
        """English name of the language."""
        return LANGUAGE_NAMES[self]

    def __str__(self) -> str:
        return self.value


LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.FR: "French",
    Language.ES: "Spanish",
    Language.DE: "German",
    Language.IT: "Italian",
}

DEFAULT_LANGUAGE = Language.EN


class UnknownLanguageError(ValueError):
    """Raised when a language code is not one of the supported codes."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown language: {value}")


def parse_language(value: Union[str, Language]) -> Language:
    """
    Parse a language code, ignoring case.

    Args:
        value: Language code such as "fr" or "FR"

    Returns:
        Matching Language member

    Raises:
        UnknownLanguageError: If the code is not supported
    """
    if isinstance(value, Language):
        return value

    try:
        return Language(value.lower())
    except ValueError:
        raise UnknownLanguageError(value) from None


def iter_languages() -> Iterator[Language]:
    """Yield every language in declaration order (en, fr, es, de, it)."""
    yield from Language


def describe_language(language: Language) -> str:
    """
    Format one line of the language listing.

    Only English carries the default marker; this does not follow the
    ``--language`` default.
    """
    line = f"{language.code} - {language.display_name}"
    if language is Language.EN:
        line += " (default)"
    return line
