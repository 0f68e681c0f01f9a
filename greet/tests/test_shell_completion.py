"""
Unit tests for shell completion scripts
"""

import re

import pytest
from typer.testing import CliRunner

from greet.cli.main import app
from greet.cli.completions.generator import (
    ShellType,
    SUPPORTED_SHELLS,
    PROG_NAME,
    get_complete_var,
    get_completion_script,
)
from greet.cli.completions.dynamic import (
    get_language_codes,
    complete_language,
)


@pytest.fixture()
def runner() -> CliRunner:
    """Typer test runner."""

    return CliRunner()


def _script_instruction(shell: str) -> str:
    """Value an installed script assigns to _GREET_COMPLETE."""

    script = get_completion_script(shell)
    match = re.search(r"_GREET_COMPLETE=(\w+)", script)
    assert match is not None
    return match.group(1)


class TestSupportedShells:
    """Test supported shell constants."""

    def test_supported_shells_list(self):
        assert SUPPORTED_SHELLS == ["bash", "fish", "zsh"]

    def test_shell_type_enum(self):
        assert ShellType.BASH.value == "bash"
        assert ShellType.FISH.value == "fish"
        assert ShellType.ZSH.value == "zsh"

    def test_prog_name(self):
        assert PROG_NAME == "greet"

    def test_complete_var(self):
        assert get_complete_var() == "_GREET_COMPLETE"
        assert get_complete_var("my-tool") == "_MY_TOOL_COMPLETE"


class TestCompletionScripts:
    """Test script generation."""

    @pytest.mark.parametrize("shell", SUPPORTED_SHELLS)
    def test_script_names_program(self, shell):
        script = get_completion_script(shell)
        assert "greet" in script
        assert "_GREET_COMPLETE" in script

    @pytest.mark.parametrize("shell", SUPPORTED_SHELLS)
    def test_script_requests_its_own_shell(self, shell):
        assert _script_instruction(shell) == f"complete_{shell}"

    def test_shell_is_case_insensitive(self):
        assert get_completion_script("ZSH") == get_completion_script("zsh")

    def test_custom_prog_name(self):
        script = get_completion_script("fish", prog_name="hello")
        assert "hello" in script
        assert "_HELLO_COMPLETE" in script

    def test_unsupported_shell(self):
        with pytest.raises(ValueError, match="Unsupported shell: powershell"):
            get_completion_script("powershell")


class TestCompletionCallback:
    """Run the app the way an installed script calls it back."""

    def _complete_bash(self, runner: CliRunner, words: str, cword: int):
        return runner.invoke(
            app,
            [],
            env={
                "_GREET_COMPLETE": _script_instruction("bash"),
                "COMP_WORDS": words,
                "COMP_CWORD": str(cword),
            },
            prog_name=PROG_NAME,
        )

    def test_bash_offers_subcommands(self, runner: CliRunner):
        result = self._complete_bash(runner, "greet h", 1)
        assert result.exit_code == 0
        assert result.stdout.split() == ["hie"]

    def test_bash_offers_all_subcommands(self, runner: CliRunner):
        result = self._complete_bash(runner, "greet ", 1)
        assert result.exit_code == 0
        offered = result.stdout.split()
        for command in ["hie", "bye", "languages", "generate-completions"]:
            assert command in offered

    def test_bash_offers_language_codes(self, runner: CliRunner):
        result = self._complete_bash(runner, "greet hie World -l f", 4)
        assert result.exit_code == 0
        assert result.stdout.split() == ["fr"]

    def test_bash_offers_options(self, runner: CliRunner):
        result = self._complete_bash(runner, "greet bye Ana --s", 3)
        assert result.exit_code == 0
        assert "--scream" in result.stdout.split()

    def test_zsh_offers_subcommands(self, runner: CliRunner):
        result = runner.invoke(
            app,
            [],
            env={
                "_GREET_COMPLETE": _script_instruction("zsh"),
                "_TYPER_COMPLETE_ARGS": "greet b",
            },
            prog_name=PROG_NAME,
        )
        assert result.exit_code == 0
        assert "bye" in result.stdout


class TestDynamicCompletions:
    """Test --language completion values."""

    def test_language_codes(self):
        assert get_language_codes() == ["en", "fr", "es", "de", "it"]

    def test_complete_everything(self):
        assert complete_language("") == [
            ("en", "English"),
            ("fr", "French"),
            ("es", "Spanish"),
            ("de", "German"),
            ("it", "Italian"),
        ]

    def test_complete_prefix(self):
        assert complete_language("f") == [("fr", "French")]

    def test_complete_prefix_any_case(self):
        assert complete_language("E") == [("en", "English"), ("es", "Spanish")]

    def test_complete_no_match(self):
        assert complete_language("x") == []
