"""
Shell completion scripts for greet

Provides shell completion support for Bash, Fish and Zsh.
"""

from greet.cli.completions.generator import (
    ShellType,
    get_complete_var,
    get_completion_script,
    SUPPORTED_SHELLS,
    PROG_NAME,
)

from greet.cli.completions.dynamic import (
    get_language_codes,
    complete_language,
)

__all__ = [
    # Generator
    "ShellType",
    "get_complete_var",
    "get_completion_script",
    "SUPPORTED_SHELLS",
    "PROG_NAME",
    # Dynamic completions
    "get_language_codes",
    "complete_language",
]
