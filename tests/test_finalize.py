"""Tests for git_commit_ai.finalize module."""

import pytest

from git_commit_ai.editing import AbortReason, ScratchAbortedError
from git_commit_ai.finalize import finalize_commit
from git_commit_ai.git.exceptions import CommitFailedError


class TestFinalizeCommit:
    """Tests for finalize_commit function."""

    def test_commits_stripped_message(self, make_vcs):
        """Test the clean message file holds the stripped message."""
        vcs = make_vcs(staged=True)

        committed = finalize_commit(vcs, "feat: add x\n\nBody\n# Changes to be committed:\n")

        assert committed == "feat: add x\nBody"
        assert vcs.commits == ["feat: add x\nBody\n"]

    def test_empty_message_aborts(self, make_vcs):
        """Test a message edited down to comments never reaches git."""
        vcs = make_vcs(staged=True)

        with pytest.raises(ScratchAbortedError) as exc_info:
            finalize_commit(vcs, "# only\n\n#\n")

        assert exc_info.value.reason is AbortReason.EMPTY
        assert vcs.commits == []

    def test_hash_inside_body_is_kept(self, make_vcs):
        """Test a marker in the middle of a line survives."""
        vcs = make_vcs(staged=True)

        finalize_commit(vcs, "fix: close issue #7")

        assert vcs.commits == ["fix: close issue #7\n"]

    def test_commit_failure_propagates(self, make_vcs):
        """Test a failed commit is reported and attempted once."""
        vcs = make_vcs(staged=True, commit_error=CommitFailedError("hook failed"))

        with pytest.raises(CommitFailedError):
            finalize_commit(vcs, "feat: add x")

        assert len(vcs.commits) == 1

    def test_message_file_is_removed(self, mocker, make_vcs):
        """Test the clean temporary file is deleted after committing."""
        vcs = make_vcs(staged=True)
        paths = []
        original = vcs.commit_from_file

        def record(path):
            paths.append(path)
            return original(path)

        mocker.patch.object(vcs, "commit_from_file", side_effect=record)

        finalize_commit(vcs, "feat: add x")

        assert len(paths) == 1
        assert not paths[0].exists()
