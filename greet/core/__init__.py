"""Core greeting modules."""

from greet.core.languages import (
    Language,
    DEFAULT_LANGUAGE,
    UnknownLanguageError,
    parse_language,
    iter_languages,
    describe_language,
)
from greet.core.messages import (
    MessageKind,
    get_phrase,
    generate_message,
)
from greet.core.config import (
    ConfigManager,
    GreetConfig,
    OutputConfig,
    AdvancedConfig,
    ConfigError,
)

__all__ = [
    # Languages
    "Language",
    "DEFAULT_LANGUAGE",
    "UnknownLanguageError",
    "parse_language",
    "iter_languages",
    "describe_language",
    # Messages
    "MessageKind",
    "get_phrase",
    "generate_message",
    # Config
    "ConfigManager",
    "GreetConfig",
    "OutputConfig",
    "AdvancedConfig",
    "ConfigError",
]
