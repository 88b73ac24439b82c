"""Integration tests for the git adapter.

These tests create real git repositories and exercise every Repository
protocol method.
"""

from pathlib import Path

import pytest

from ogit.adapters.git_cmd import GitAdapter
from ogit.domain.modes import CONFIGURED_REMOTE
from tests.helpers.git_repo import (
    create_git_repo,
    git_add_and_commit,
    porcelain_status,
    run_git,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def git_adapter(git_repo: Path) -> GitAdapter:
    """Create a GitAdapter for the test repository."""
    return GitAdapter(git_repo)


class TestInitialization:
    def test_valid_repo(self, git_repo: Path) -> None:
        adapter = GitAdapter(git_repo)
        assert adapter.repo_root == git_repo.resolve()
        assert adapter.remote == "origin"

    def test_subdirectory_resolves_to_top_level(self, git_repo: Path) -> None:
        sub = git_repo / "pkg" / "inner"
        sub.mkdir(parents=True)
        assert GitAdapter(sub).repo_root == git_repo.resolve()

    def test_rejects_non_repo(self, tmp_path: Path) -> None:
        non_repo = tmp_path / "not_a_repo"
        non_repo.mkdir()
        with pytest.raises(RuntimeError, match="Not a git repository"):
            GitAdapter(non_repo)


class TestSnapshot:
    def test_clean_repository(self, git_adapter: GitAdapter) -> None:
        snapshot = git_adapter.snapshot()
        assert snapshot.head == "master"
        assert snapshot.head_message == "Initial commit"
        assert len(snapshot.commits) == 1
        assert len(snapshot.commits[0].short_hash) == 7
        assert snapshot.commits[0].message == "Initial commit"
        assert snapshot.status.untracked == ()
        assert snapshot.status.tracked == ()
        assert snapshot.status.staged == ()

    def test_missing_upstream_shows_failure_text(self, git_adapter: GitAdapter) -> None:
        snapshot = git_adapter.snapshot()
        assert "fatal:" in snapshot.upstream
        assert snapshot.upstream_message == ""
        assert "fatal:" in snapshot.push
        assert snapshot.push_message == ""

    def test_file_lists(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("hello world\n")
        (git_repo / "new.txt").write_text("new\n")
        (git_repo / "ready.txt").write_text("ready\n")
        run_git(git_repo, "add", "ready.txt")

        status = git_adapter.status()
        assert status.untracked == ("new.txt",)
        assert status.tracked == ("test.txt",)
        assert status.staged == ("ready.txt",)

    def test_untracked_files_in_directories_listed(
        self, git_repo: Path, git_adapter: GitAdapter
    ) -> None:
        (git_repo / "docs").mkdir()
        (git_repo / "docs" / "a.md").write_text("a\n")
        assert git_adapter.status().untracked == ("docs/a.md",)

    def test_history_is_limited(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        for i in range(12):
            (git_repo / "test.txt").write_text(f"v{i}\n")
            git_add_and_commit(git_repo, message=f"Commit {i}")
        commits = git_adapter.recent_commits()
        assert len(commits) == 10
        assert commits[0].message == "Commit 11"

    def test_empty_repository(self, tmp_path: Path) -> None:
        repo = create_git_repo(tmp_path / "empty")
        snapshot = GitAdapter(repo).snapshot()
        assert snapshot.commits == ()
        assert snapshot.head == "master"
        assert snapshot.head_message == ""


class TestIndex:
    def test_stage_and_unstage(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("hello world\n")

        git_adapter.stage(["test.txt"])
        assert porcelain_status(git_repo) == ["M  test.txt"]

        git_adapter.unstage(["test.txt"])
        assert porcelain_status(git_repo) == [" M test.txt"]

    def test_unstage_before_first_commit(self, tmp_path: Path) -> None:
        repo = create_git_repo(tmp_path / "empty")
        (repo / "new.txt").write_text("new\n")
        adapter = GitAdapter(repo)

        adapter.stage(["new.txt"])
        assert adapter.status().staged == ("new.txt",)
        adapter.unstage(["new.txt"])
        assert adapter.status().untracked == ("new.txt",)

    def test_stage_keeps_force_added_ignored_file(
        self, git_repo: Path, git_adapter: GitAdapter
    ) -> None:
        (git_repo / ".gitignore").write_text("*.log\n")
        (git_repo / "keep.log").write_text("kept\n")
        run_git(git_repo, "add", "-f", "keep.log")
        git_adapter.unstage(["keep.log"])

        git_adapter.stage(["keep.log"])

        assert "A  keep.log" in porcelain_status(git_repo)

    def test_save_and_restore_index(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("hello world\n")
        git_adapter.stage(["test.txt"])
        (git_repo / "test.txt").write_text("hello there world\n")
        staged_patch = run_git(git_repo, "diff", "--cached")

        tree = git_adapter.save_index()
        git_adapter.unstage(["test.txt"])
        assert porcelain_status(git_repo) == [" M test.txt"]
        git_adapter.restore_index(tree)

        assert porcelain_status(git_repo) == ["MM test.txt"]
        assert run_git(git_repo, "diff", "--cached") == staged_patch

    def test_save_index_with_unmerged_paths(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        run_git(git_repo, "checkout", "-q", "-b", "other")
        (git_repo / "test.txt").write_text("other\n")
        git_add_and_commit(git_repo, message="Other")
        run_git(git_repo, "checkout", "-q", "master")
        (git_repo / "test.txt").write_text("mine\n")
        git_add_and_commit(git_repo, message="Mine")
        git_adapter.run(["merge", "other"])

        assert git_adapter.save_index() == ""

    def test_commit(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("hello world\n")
        git_adapter.stage(["test.txt"])

        output = git_adapter.commit("Update greeting")

        assert "Update greeting" in output
        assert git_adapter.recent_commits()[0].message == "Update greeting"
        assert porcelain_status(git_repo) == []

    def test_commit_with_nothing_staged_returns_git_text(
        self, git_adapter: GitAdapter
    ) -> None:
        assert "nothing to commit" in git_adapter.commit("Empty")

    def test_diff_shows_unstaged_changes(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("hello world\n")
        output = git_adapter.diff()
        assert "-hello" in output
        assert "+hello world" in output
        assert "\x1b[" not in output


class TestBranchesResetStash:
    def test_create_checkout_delete(self, git_adapter: GitAdapter) -> None:
        git_adapter.create_branch("feature")
        assert git_adapter.head() == "feature"

        git_adapter.checkout("master")
        assert git_adapter.head() == "master"

        assert "Deleted branch feature" in git_adapter.delete_branch("feature")

    def test_checkout_unknown_branch_returns_error_text(self, git_adapter: GitAdapter) -> None:
        output = git_adapter.checkout("does-not-exist")
        assert "does-not-exist" in output
        assert git_adapter.head() == "master"

    def test_reset_soft_keeps_changes_staged(
        self, git_repo: Path, git_adapter: GitAdapter
    ) -> None:
        first = git_adapter.recent_commits()[0].short_hash
        (git_repo / "test.txt").write_text("second\n")
        git_add_and_commit(git_repo, message="Second")

        git_adapter.reset_soft(first)

        assert git_adapter.recent_commits()[0].short_hash == first
        assert porcelain_status(git_repo) == ["M  test.txt"]

    def test_reset_hard_discards_changes(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        first = git_adapter.recent_commits()[0].short_hash
        (git_repo / "test.txt").write_text("second\n")
        git_add_and_commit(git_repo, message="Second")

        output = git_adapter.reset_hard(first)

        assert "HEAD is now at" in output
        assert (git_repo / "test.txt").read_text() == "hello\n"

    def test_stash_pop(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("stashed\n")
        run_git(git_repo, "stash")
        assert (git_repo / "test.txt").read_text() == "hello\n"

        git_adapter.stash_pop()

        assert (git_repo / "test.txt").read_text() == "stashed\n"
        assert run_git(git_repo, "stash", "list") == ""

    def test_stash_apply_keeps_entry(self, git_repo: Path, git_adapter: GitAdapter) -> None:
        (git_repo / "test.txt").write_text("stashed\n")
        run_git(git_repo, "stash")

        git_adapter.stash_apply()

        assert (git_repo / "test.txt").read_text() == "stashed\n"
        assert run_git(git_repo, "stash", "list") != ""


class TestRemote:
    @pytest.fixture
    def remote(self, tmp_path: Path, git_repo: Path) -> Path:
        """Bare repository registered as origin."""
        bare = tmp_path / "remote.git"
        bare.mkdir()
        run_git(bare, "init", "--bare")
        run_git(git_repo, "remote", "add", "origin", str(bare))
        return bare

    def test_push_to_named_branch(
        self, remote: Path, git_repo: Path, git_adapter: GitAdapter
    ) -> None:
        git_adapter.push("alice", "s3cret", "master")
        assert "Initial commit" in run_git(remote, "log", "--format=%s", "master")

    def test_configured_upstream(self, remote: Path, git_repo: Path, git_adapter: GitAdapter) -> None:
        git_adapter.push("alice", "s3cret", "master")
        run_git(git_repo, "branch", "--set-upstream-to=origin/master")

        snapshot = git_adapter.snapshot()
        assert snapshot.upstream == "origin/master"
        assert snapshot.upstream_message == "Initial commit"

        (git_repo / "test.txt").write_text("second\n")
        git_add_and_commit(git_repo, message="Second")
        git_adapter.push("alice", "s3cret", CONFIGURED_REMOTE)
        assert run_git(remote, "log", "-1", "--format=%s", "master").strip() == "Second"

    def test_pull_from_named_branch(
        self, remote: Path, git_repo: Path, git_adapter: GitAdapter
    ) -> None:
        git_adapter.push("alice", "s3cret", "master")
        assert "Already up to date" in git_adapter.pull("alice", "s3cret", "master")

    def test_push_to_missing_remote_returns_error_text(self, git_adapter: GitAdapter) -> None:
        output = git_adapter.push("alice", "s3cret", "master")
        assert "origin" in output


def test_run_passes_arguments_through(git_repo: Path, git_adapter: GitAdapter) -> None:
    (git_repo / "new.txt").write_text("new\n")
    assert "?? new.txt" in git_adapter.run(["status", "--porcelain"])
