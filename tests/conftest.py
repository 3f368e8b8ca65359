"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from typing import Callable, Optional

import pytest

from git_commit_ai.editing.editor import InteractiveEditor
from git_commit_ai.generator.base import BaseGenerator, GenerationResult, clean_generated_message
from git_commit_ai.generator.exceptions import GeneratorUnavailableError
from git_commit_ai.git.exceptions import NotARepositoryError
from git_commit_ai.git.repository import VersionControl


SAMPLE_DIFF = """diff --git a/app/service.py b/app/service.py
index 1234567..abcdefg 100644
--- a/app/service.py
+++ b/app/service.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new {placeholder}")
+
+# not a comment for the prompt
+def helper():
+    return True
"""


class FakeVersionControl(VersionControl):
    """In-memory workspace with the three change dimensions."""

    def __init__(
        self,
        staged: bool = False,
        unstaged: bool = False,
        untracked: Optional[list[str]] = None,
        diff: str = SAMPLE_DIFF,
        in_repo: bool = True,
        commit_error: Optional[Exception] = None,
        core_editor: Optional[str] = None,
    ):
        self.staged = staged
        self.unstaged = unstaged
        self.untracked = list(untracked or [])
        self.diff = diff
        self.in_repo = in_repo
        self.commit_error = commit_error
        self.core_editor = core_editor
        self.stage_all_calls = 0
        self.diff_reads = 0
        self.commits: list[str] = []

    def repo_root(self) -> Path:
        if not self.in_repo:
            raise NotARepositoryError("not a repo")
        return Path("/fake/repo")

    def has_staged_changes(self) -> bool:
        return self.staged

    def has_unstaged_changes(self) -> bool:
        return self.unstaged

    def list_untracked_files(self) -> list[str]:
        return list(self.untracked)

    def stage_all(self) -> None:
        self.stage_all_calls += 1
        if self.unstaged or self.untracked:
            self.staged = True
        self.unstaged = False
        self.untracked = []

    def staged_diff(self) -> str:
        self.diff_reads += 1
        return self.diff

    def staged_name_status(self) -> list[str]:
        return ["M\tapp/service.py"] if self.staged else []

    def unstaged_name_status(self) -> list[str]:
        return ["M\tapp/other.py"] if self.unstaged else []

    def configured_editor(self) -> Optional[str]:
        return self.core_editor

    def commit_from_file(self, message_file: Path) -> str:
        self.commits.append(message_file.read_text(encoding="utf-8"))
        if self.commit_error is not None:
            raise self.commit_error
        return "[main abc1234] commit"


class FakeEditor(InteractiveEditor):
    """Editor that applies `action` to the file instead of launching a program."""

    def __init__(self, action: Optional[Callable[[Path], None]] = None):
        self.action = action
        self.seen: list[str] = []

    def edit(self, file_path: Path) -> None:
        self.seen.append(file_path.read_text(encoding="utf-8"))
        if self.action is not None:
            self.action(file_path)


class FakeGenerator(BaseGenerator):
    """Generator returning canned output."""

    def __init__(self, output: str = "fix(x): repair y\n", available: bool = True):
        self.output = output
        self.available = available
        self.prompts: list[str] = []

    def ensure_available(self) -> None:
        if not self.available:
            raise GeneratorUnavailableError("claude not found")

    def generate(self, prompt: str) -> GenerationResult:
        self.ensure_available()
        self.prompts.append(prompt)
        return GenerationResult(
            message=clean_generated_message(self.output),
            raw_output=self.output,
            command="fake",
        )


def _append_line(text: str) -> Callable[[Path], None]:
    """Editor action appending one line to the file."""

    def action(path: Path) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write(text + "\n")

    return action


def _replace_content(text: str) -> Callable[[Path], None]:
    """Editor action overwriting the whole file."""

    def action(path: Path) -> None:
        path.write_text(text, encoding="utf-8")

    return action


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return SAMPLE_DIFF


@pytest.fixture
def make_vcs():
    """Factory for in-memory FakeVersionControl workspaces."""
    return FakeVersionControl


@pytest.fixture
def make_editor():
    """Factory for FakeEditor instances."""
    return FakeEditor


@pytest.fixture
def make_generator():
    """Factory for FakeGenerator instances."""
    return FakeGenerator


@pytest.fixture
def append_line():
    """Build an editor action that appends a line."""
    return _append_line


@pytest.fixture
def replace_content():
    """Build an editor action that overwrites the file."""
    return _replace_content


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def isolated_config(mocker, temp_dir, monkeypatch):
    """Point the global config at a temporary directory and clear env overrides."""
    config_dir = temp_dir / ".git-commit-ai"
    mocker.patch("git_commit_ai.global_config._CONFIG_DIR", config_dir)
    mocker.patch("git_commit_ai.config.load_dotenv")
    for var in ("GIT_COMMIT_AI_GENERATOR", "GIT_COMMIT_AI_EDITOR", "GIT_COMMIT_AI_MAX_DIFF_CHARS"):
        monkeypatch.delenv(var, raising=False)
    return config_dir
