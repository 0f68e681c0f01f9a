"""
Shell completion script generator for greet

Scripts come from typer's shell completion support. They call back into
``greet`` with ``_GREET_COMPLETE`` set (``complete_bash``, ``complete_zsh``,
``complete_fish``), so every subcommand and option is completed from the
live command tree.
"""

from enum import Enum

from typer.completion import completion_init
from typer.completion import get_completion_script as render_completion_script


PROG_NAME = "greet"


class ShellType(Enum):
    """Supported shell types."""
    BASH = "bash"
    FISH = "fish"
    ZSH = "zsh"


SUPPORTED_SHELLS = [shell.value for shell in ShellType]

# The app is built with add_completion=False, so typer never registers its
# completion classes on its own. Without them the callback from an installed
# script is rejected.
completion_init()


def get_complete_var(prog_name: str = PROG_NAME) -> str:
    """Name of the environment variable checked for completion requests."""
    return f"_{prog_name}_COMPLETE".replace("-", "_").upper()


def get_completion_script(shell: str, prog_name: str = PROG_NAME) -> str:
    """
    Get completion script for specified shell.

    Args:
        shell: Shell type (bash, fish, zsh)
        prog_name: Program name embedded in the script

    Returns:
        Completion script as string

    Raises:
        ValueError: If the shell is not supported
    """
    shell = shell.lower()
    if shell not in SUPPORTED_SHELLS:
        raise ValueError(f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}")

    return render_completion_script(
        prog_name=prog_name,
        complete_var=get_complete_var(prog_name),
        shell=shell,
    )
