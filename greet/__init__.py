"""
greet - Localized greeting CLI

A small command-line tool that says hello (or goodbye) in five languages.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from greet.core.languages import Language, DEFAULT_LANGUAGE
from greet.core.messages import generate_message

__all__ = ["Language", "DEFAULT_LANGUAGE", "generate_message"]
