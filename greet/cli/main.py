"""
greet CLI - Command Line Interface
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from greet.core.languages import (
    Language, DEFAULT_LANGUAGE, UnknownLanguageError,
    parse_language, iter_languages, describe_language
)
from greet.core.messages import generate_message
from greet.core.config import ConfigManager, ConfigError, GreetConfig, AdvancedConfig
from greet.cli.completions.generator import (
    ShellType, get_completion_script, PROG_NAME
)
from greet.cli.completions.dynamic import complete_language


logger = logging.getLogger(__name__)

app = typer.Typer(
    name=PROG_NAME,
    help="A simple greeting CLI application",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Send logs of the greet package to stderr at the given level."""
    package_logger = logging.getLogger("greet")
    package_logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


def _parse_language_option(value: str) -> Language:
    """Convert a --language value, reporting unknown codes as usage errors."""
    try:
        return parse_language(value)
    except UnknownLanguageError as e:
        raise typer.BadParameter(str(e))


def _say(name: str, language: Language, scream: bool, is_greeting: bool) -> None:
    logger.debug(
        "Generating %s for %r in %s (scream=%s)",
        "greeting" if is_greeting else "farewell", name, language.code, scream,
    )
    message = generate_message(name, language, scream, is_greeting)
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def load_settings() -> GreetConfig:
    """
    Load ambient settings (log level, colors).

    Problems are logged as warnings and the defaults are used instead.
    """
    manager = ConfigManager()
    try:
        config = manager.load()
    except ConfigError as e:
        logger.warning("%s; using default settings", e)
        return GreetConfig()

    for error in manager.validate():
        logger.warning("Ignoring invalid setting: %s", error)
        config.advanced = AdvancedConfig()

    logger.debug("Configuration sources: %s", ", ".join(manager.get_loaded_sources()))
    return config


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
):
    """A simple greeting CLI application."""
    configure_logging("DEBUG" if verbose else "WARNING")
    config = load_settings()
    if not verbose:
        configure_logging(config.advanced.log_level)
    console.no_color = not config.output.color_enabled


@app.command(name="hie")
def hie(
    name: str = typer.Argument(..., help="The name to greet"),
    language: Language = typer.Option(
        DEFAULT_LANGUAGE.code, "--language", "-l",
        parser=_parse_language_option,
        autocompletion=complete_language,
        help="Language to use for greeting",
    ),
    scream: bool = typer.Option(False, "--scream", "-s", help="Greet in uppercase (scream)"),
):
    """Say hie to someone."""
    _say(name, language, scream, is_greeting=True)


@app.command(name="bye")
def bye(
    name: str = typer.Argument(..., help="The name to say goodbye to"),
    language: Language = typer.Option(
        DEFAULT_LANGUAGE.code, "--language", "-l",
        parser=_parse_language_option,
        autocompletion=complete_language,
        help="Language to use for goodbye",
    ),
    scream: bool = typer.Option(False, "--scream", "-s", help="Say goodbye in uppercase (scream)"),
):
    """Say goodbye to someone."""
    _say(name, language, scream, is_greeting=False)


@app.command(name="languages")
def list_languages():
    """List all available languages."""
    console.print("[bold]Available languages:[/bold]")
    for language in iter_languages():
        console.print(f"  {describe_language(language)}", markup=False, highlight=False)


@app.command(name="generate-completions")
def generate_completions(
    shell: ShellType = typer.Option(
        ..., "--shell",
        help="Specify which shell you target - accepted values: bash, fish, zsh",
    ),
):
    """Generate completions for your own shell."""
    logger.debug("Generating %s completion script", shell.value)
    typer.echo(get_completion_script(shell.value, prog_name=PROG_NAME))


def main():
    """Main entry point."""
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
