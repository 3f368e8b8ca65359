"""Tests for git_commit_ai.generator package."""

from unittest.mock import MagicMock

import pytest

from git_commit_ai.generator import (
    EmptyGeneratedMessageError,
    GenerationFailedError,
    GeneratorUnavailableError,
    clean_generated_message,
    get_generator,
)
from git_commit_ai.generator.claude_cli import ClaudeCLIGenerator


class TestCleanGeneratedMessage:
    """Tests for clean_generated_message function."""

    def test_plain_message(self):
        """Test a plain message is returned without the trailing newline."""
        assert clean_generated_message("fix(x): repair y\n") == "fix(x): repair y"

    def test_strips_markdown_fences(self):
        """Test code fences are removed."""
        raw = "```text\n✨ feat(auth): add login\n```\n"

        assert clean_generated_message(raw) == "✨ feat(auth): add login"

    def test_drops_blank_and_comment_lines(self):
        """Test blank lines and comment lines are removed."""
        raw = "feat: add x\n\n# note from the model\nBody line.\n"

        assert clean_generated_message(raw) == "feat: add x\nBody line."

    def test_drops_indented_comment_lines(self):
        """Test an indented comment is dropped, as the review file stripping does."""
        raw = "feat: add x\n  # indented note\nBody line.\n"

        assert clean_generated_message(raw) == "feat: add x\nBody line."

    def test_empty_output_raises(self):
        """Test that nothing usable raises EmptyGeneratedMessageError."""
        with pytest.raises(EmptyGeneratedMessageError):
            clean_generated_message("```\n\n```\n")


class TestClaudeCLIGenerator:
    """Tests for ClaudeCLIGenerator."""

    def test_unparsable_command_is_unavailable(self):
        """Test a misquoted command line is reported as unavailable."""
        with pytest.raises(GeneratorUnavailableError) as exc_info:
            ClaudeCLIGenerator('claude --model "opus')

        assert "Invalid generator command" in str(exc_info.value)

    def test_missing_binary(self, mocker):
        """Test that a generator not on PATH is unavailable."""
        mocker.patch("shutil.which", return_value=None)

        with pytest.raises(GeneratorUnavailableError) as exc_info:
            ClaudeCLIGenerator().ensure_available()

        assert "claude not found" in str(exc_info.value)

    def test_prompt_sent_on_stdin(self, mocker):
        """Test the prompt is the only stdin payload and output is combined."""
        mocker.patch("shutil.which", return_value="/usr/local/bin/claude")
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=MagicMock(returncode=0, stdout="fix(x): repair y\n"),
        )

        result = ClaudeCLIGenerator("claude --model sonnet").generate("PROMPT")

        args, kwargs = mock_run.call_args
        assert args[0] == ["claude", "--model", "sonnet"]
        assert kwargs["input"] == "PROMPT"
        assert kwargs["stderr"] is not None
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"
        assert result.message == "fix(x): repair y"
        assert result.raw_output == "fix(x): repair y\n"
        assert result.command == "claude --model sonnet"

    def test_nonzero_exit_carries_output(self, mocker):
        """Test a failing generator surfaces its diagnostics."""
        mocker.patch("shutil.which", return_value="/usr/local/bin/claude")
        mocker.patch(
            "subprocess.run",
            return_value=MagicMock(returncode=2, stdout="Error: not logged in\n"),
        )

        with pytest.raises(GenerationFailedError) as exc_info:
            ClaudeCLIGenerator().generate("PROMPT")

        assert exc_info.value.output == "Error: not logged in\n"
        assert exc_info.value.returncode == 2

    def test_file_not_found_is_unavailable(self, mocker):
        """Test that a race between which and run is still reported."""
        mocker.patch("shutil.which", return_value="/usr/local/bin/claude")
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GeneratorUnavailableError):
            ClaudeCLIGenerator().generate("PROMPT")

    def test_not_retried(self, mocker):
        """Test the generator is invoked exactly once on failure."""
        mocker.patch("shutil.which", return_value="/usr/local/bin/claude")
        mock_run = mocker.patch("subprocess.run", return_value=MagicMock(returncode=1, stdout=""))

        with pytest.raises(GenerationFailedError):
            ClaudeCLIGenerator().generate("PROMPT")

        assert mock_run.call_count == 1


class TestGetGenerator:
    """Tests for get_generator factory."""

    def test_uses_active_settings(self, mocker):
        """Test the configured command is used by default."""
        from git_commit_ai.config import Settings

        mocker.patch("git_commit_ai.config.ACTIVE_SETTINGS", Settings(generator="my-ai --quiet"))

        generator = get_generator()

        assert isinstance(generator, ClaudeCLIGenerator)
        assert generator.argv == ["my-ai", "--quiet"]

    def test_explicit_command(self):
        """Test an explicit command overrides settings."""
        assert get_generator("other").command == "other"
