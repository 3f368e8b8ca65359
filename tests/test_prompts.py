"""Tests for git_commit_ai.generator.prompts package."""

from git_commit_ai.generator.prompts import (
    COMMIT_PROMPT_TEMPLATE,
    build_context_section,
    build_prompt,
)


class TestBuildPrompt:
    """Tests for build_prompt function."""

    def test_diff_is_embedded_verbatim(self, sample_diff):
        """Test the diff appears unmodified as a contiguous substring."""
        prompt = build_prompt(sample_diff)

        assert sample_diff in prompt
        assert prompt.endswith(sample_diff)

    def test_braces_in_diff_are_literal(self):
        """Test format placeholders in the diff are not interpreted."""
        diff = "+x = '{context_section}' + f'{y}'"

        assert build_prompt(diff).endswith(diff)

    def test_no_context_block_without_context(self, sample_diff):
        """Test the context block is absent when no context is given."""
        prompt = build_prompt(sample_diff)

        assert "User's description" not in prompt

    def test_blank_context_is_ignored(self, sample_diff):
        """Test whitespace-only context counts as empty."""
        assert "User's description" not in build_prompt(sample_diff, "   ")

    def test_context_block_with_context(self, sample_diff):
        """Test the context block is spliced in before the diff."""
        prompt = build_prompt(sample_diff, "Fixed the debug configuration")

        assert "**User's description of what they worked on:**" in prompt
        assert "Fixed the debug configuration" in prompt
        assert prompt.index("Fixed the debug configuration") < prompt.index(sample_diff)

    def test_contains_guidelines(self):
        """Test the fixed instructions are present."""
        prompt = build_prompt("diff")

        assert "conventional commit format" in prompt
        assert "Output ONLY the commit message itself" in prompt
        assert "Here is the diff:" in prompt


class TestBuildContextSection:
    """Tests for build_context_section function."""

    def test_empty(self):
        """Test None and empty give no section."""
        assert build_context_section(None) == ""
        assert build_context_section("") == ""

    def test_trimmed(self):
        """Test surrounding whitespace is trimmed."""
        assert "\nhello\n" in build_context_section("  hello  ")

    def test_template_has_single_placeholder(self):
        """Test the template only expects the context section."""
        assert COMMIT_PROMPT_TEMPLATE.format(context_section="").startswith("You are helping")
