"""
Dynamic completion data providers for greet

Provides completion values for ``--language`` while the shell is
completing a command line.
"""

from typing import List, Tuple

from greet.core.languages import iter_languages


def get_language_codes() -> List[str]:
    """
    Get list of supported language codes in listing order.

    Returns:
        List of language codes
    """
    return [language.code for language in iter_languages()]


def complete_language(incomplete: str) -> List[Tuple[str, str]]:
    """
    Complete a partially typed language code.

    Args:
        incomplete: Text typed so far

    Returns:
        (code, English name) pairs for codes starting with ``incomplete``
    """
    prefix = incomplete.lower()
    return [
        (language.code, language.display_name)
        for language in iter_languages()
        if language.code.startswith(prefix)
    ]
