"""Git adapter implementing the Repository protocol with the git CLI."""

import logging
import os
import subprocess
from pathlib import Path

from ogit.domain.entities import CommitSummary, RepoSnapshot, StatusSnapshot
from ogit.domain.modes import CONFIGURED_REMOTE

logger = logging.getLogger(__name__)

HISTORY_LENGTH = 10
SHORT_HASH_LENGTH = 7
FAILURE_MARKER = "fatal:"

# Status pairs never shown in the file lists
_IGNORED_CODE = "!!"
_UNTRACKED_CODE = "??"
# First status letters whose porcelain -z entry is followed by the old path
_PATH_PAIR_CODES = ("R", "C")

# Credential helper answering git's "get" request from the environment, so
# user and secret never appear on a command line.
_USER_ENV = "OGIT_REMOTE_USER"
_SECRET_ENV = "OGIT_REMOTE_SECRET"
_CREDENTIAL_HELPER = (
    '!f() { test "$1" = get || return 0; '
    f'echo "username=${{{_USER_ENV}}}"; echo "password=${{{_SECRET_ENV}}}"; }}; f'
)


def run_git(directory: Path, args: list[str], env: dict[str, str] | None = None) -> str:
    """Run git in directory and return stdout and stderr interleaved.

    No repository check is made, so commands such as ``init`` or ``clone``
    work from any directory.

    Args:
        directory: Directory passed to ``git -C``.
        args: Git command arguments (without 'git' prefix).
        env: Environment for the child process, inherited when None.

    Returns:
        Decoded combined output.

    Raises:
        FileNotFoundError: If the git executable cannot be found.
    """
    logger.debug("Running git %s", " ".join(args))
    result = subprocess.run(
        ["git", "-C", str(directory)] + args,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
        env=env,
    )
    if result.returncode != 0:
        logger.debug("git %s exited with %d", args[0] if args else "", result.returncode)
    return result.stdout.decode("utf-8", errors="replace")


def classify_status(entries: list[tuple[str, str]]) -> StatusSnapshot:
    """Group porcelain status entries into untracked, tracked and staged.

    ``??`` is untracked and ``!!`` is dropped. Otherwise a non-blank index
    letter means staged and a non-blank worktree letter means tracked with
    unstaged changes; a file with both shows up in both lists.

    Args:
        entries: (two-letter status code, path) pairs in git's order.

    Returns:
        StatusSnapshot with the three lists.
    """
    untracked: list[str] = []
    tracked: list[str] = []
    staged: list[str] = []
    for code, path in entries:
        if code == _IGNORED_CODE:
            continue
        if code == _UNTRACKED_CODE:
            untracked.append(path)
            continue
        index, worktree = code[0], code[1]
        if index not in " ?":
            staged.append(path)
        if worktree not in " ?":
            tracked.append(path)
    return StatusSnapshot(tuple(untracked), tuple(tracked), tuple(staged))


def parse_status_lines(lines: list[str]) -> StatusSnapshot:
    """Classify ``git status --porcelain`` lines such as ``"M  test.txt"``.

    Args:
        lines: Porcelain v1 lines, "XY path" each.

    Returns:
        StatusSnapshot with the three lists.
    """
    entries = [(line[:2], line[3:]) for line in lines if len(line) > 3]
    return classify_status(entries)


def parse_status_z(output: str) -> StatusSnapshot:
    """Classify ``git status --porcelain -z`` output.

    Entries are NUL-separated. Renames and copies are followed by an extra
    entry holding the old path, which is skipped.

    Args:
        output: Raw stdout of git status.

    Returns:
        StatusSnapshot with the three lists.
    """
    entries: list[tuple[str, str]] = []
    records = iter(output.split("\0"))
    for record in records:
        if len(record) < 4:
            continue
        code = record[:2]
        entries.append((code, record[3:]))
        if code[0] in _PATH_PAIR_CODES:
            next(records, None)
    return classify_status(entries)


def parse_log(output: str) -> tuple[CommitSummary, ...]:
    """Parse ``git log --format="%H %s"`` output into commit summaries.

    Lines carrying git's failure marker (an empty repository has no log)
    are skipped.
    """
    commits: list[CommitSummary] = []
    for line in output.splitlines():
        if not line.strip() or FAILURE_MARKER in line:
            continue
        commit_hash, _, message = line.partition(" ")
        commits.append(CommitSummary(commit_hash[:SHORT_HASH_LENGTH], message))
    return tuple(commits)


class GitAdapter:
    """Repository adapter using subprocess calls to the git CLI.

    Every call blocks until git exits. Mutating operations return git's
    combined stdout and stderr so failures reach the user verbatim.
    """

    def __init__(self, repo_root: Path, remote: str = "origin") -> None:
        """Initialize Git adapter.

        Args:
            repo_root: Path inside a git working copy.
            remote: Remote used when pushing to or pulling from a named branch.

        Raises:
            RuntimeError: If repo_root is not inside a git repository.
            FileNotFoundError: If the git executable cannot be found.
        """
        self.repo_root = repo_root.resolve()
        self.remote = remote
        if not self._is_git_repo():
            raise RuntimeError(f"Not a git repository: {self.repo_root}")
        # Porcelain paths are relative to the top level, so run everything there
        toplevel = self._run_git_raw(["rev-parse", "--show-toplevel"])
        if toplevel.returncode == 0:
            self.repo_root = Path(toplevel.stdout.decode("utf-8", errors="replace").strip())

    def _is_git_repo(self) -> bool:
        """Check if repo_root is inside a git repository."""
        result = self._run_git_raw(["rev-parse", "--git-dir"])
        return result.returncode == 0

    def _run_git_raw(
        self,
        args: list[str],
        env: dict[str, str] | None = None,
    ) -> subprocess.CompletedProcess[bytes]:
        """Run a git command with stdout and stderr captured separately.

        Args:
            args: Git command arguments (without 'git' prefix).
            env: Environment for the child process, inherited when None.

        Returns:
            CompletedProcess with command results.
        """
        cmd = ["git", "-C", str(self.repo_root)] + args
        return subprocess.run(cmd, capture_output=True, check=False, env=env)

    def _run_git(self, args: list[str], env: dict[str, str] | None = None) -> str:
        """Run a git command in the working copy, see run_git."""
        return run_git(self.repo_root, args, env=env)

    def _has_head(self) -> bool:
        return self._run_git_raw(["rev-parse", "--verify", "-q", "HEAD"]).returncode == 0

    # Reading state

    def status(self) -> StatusSnapshot:
        """Classify working copy files by status."""
        result = self._run_git_raw(
            ["status", "--porcelain", "-z", "--untracked-files=all"]
        )
        return parse_status_z(result.stdout.decode("utf-8", errors="replace"))

    def recent_commits(self) -> tuple[CommitSummary, ...]:
        """Return up to ten commits reachable from HEAD, newest first."""
        return parse_log(
            self._run_git(["--no-pager", "log", f"-{HISTORY_LENGTH}", "--format=%H %s"])
        )

    def head(self) -> str:
        """Name of the checked-out branch, or git's failure text."""
        output = self._run_git(["symbolic-ref", "HEAD"]).strip()
        _, marker, branch = output.partition("heads/")
        return branch if marker else output

    def tracking_ref(self, ref: str) -> str:
        """Resolve ``@{upstream}`` or ``@{push}`` to a short ref name.

        Returns:
            The ref name, or the first line of git's failure text.
        """
        output = self._run_git(
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", ref]
        ).strip()
        return output.splitlines()[0] if output else ""

    def branch_message(self, ref: str) -> str:
        """Subject of the last commit on ref.

        Refs holding failure text are not looked up, and a ref without
        commits (a fresh repository's branch) has no message.
        """
        if not ref or FAILURE_MARKER in ref:
            return ""
        result = self._run_git_raw(["--no-pager", "log", "-1", "--format=%s", ref, "--"])
        if result.returncode != 0:
            return ""
        return result.stdout.decode("utf-8", errors="replace").strip()

    def snapshot(self) -> RepoSnapshot:
        """Read status, history and refs.

        Returns:
            RepoSnapshot describing the working copy now.
        """
        head = self.head()
        upstream = self.tracking_ref("@{upstream}")
        push = self.tracking_ref("@{push}")
        return RepoSnapshot(
            commits=self.recent_commits(),
            head=head,
            head_message=self.branch_message(head),
            upstream=upstream,
            upstream_message=self.branch_message(upstream),
            push=push,
            push_message=self.branch_message(push),
            status=self.status(),
        )

    # Index

    def stage(self, paths: list[str]) -> str:
        """Add paths to the index.

        Paths come from the status lists, so ``--force`` only matters for
        files already in the index that match an ignore rule.
        """
        return self._run_git(["add", "--force", "--"] + paths)

    def unstage(self, paths: list[str]) -> str:
        """Remove paths from the index, keeping worktree changes.

        Before the first commit there is no HEAD to restore from, so the
        paths are simply dropped from the index.
        """
        if self._has_head():
            return self._run_git(["restore", "--staged", "--"] + paths)
        return self._run_git(["rm", "--cached", "-q", "--"] + paths)

    def save_index(self) -> str:
        """Write the index to a tree object.

        Returns:
            Tree id, or "" when the index cannot be written (unmerged paths).
        """
        result = self._run_git_raw(["write-tree"])
        if result.returncode != 0:
            reason = result.stderr.decode("utf-8", errors="replace").strip()
            logger.debug("Index not saved: %s", reason)
            return ""
        return result.stdout.decode("utf-8", errors="replace").strip()

    def restore_index(self, tree: str) -> str:
        """Replace the index with a tree saved by save_index."""
        return self._run_git(["read-tree", tree])

    def commit(self, message: str) -> str:
        return self._run_git(["commit", "-m", message])

    def diff(self) -> str:
        """Unstaged changes of tracked files."""
        return self._run_git(["--no-pager", "diff", "--no-color"])

    # Branches, reset, stash

    def checkout(self, branch: str) -> str:
        return self._run_git(["checkout", branch])

    def create_branch(self, name: str) -> str:
        """Create a branch at HEAD and switch to it."""
        return self._run_git(["checkout", "-b", name])

    def delete_branch(self, name: str) -> str:
        return self._run_git(["branch", "-d", name])

    def reset_hard(self, commit: str) -> str:
        return self._run_git(["reset", "--hard", commit])

    def reset_soft(self, commit: str) -> str:
        return self._run_git(["reset", "--soft", commit])

    def stash_apply(self) -> str:
        return self._run_git(["stash", "apply"])

    def stash_pop(self) -> str:
        return self._run_git(["stash", "pop"])

    # Remote

    def _remote_args(self, target: str) -> list[str]:
        if target == CONFIGURED_REMOTE:
            return []
        return [self.remote, target]

    def _credential_env(self, user: str, secret: str) -> dict[str, str]:
        env = dict(os.environ)
        env[_USER_ENV] = user
        env[_SECRET_ENV] = secret
        env["GIT_TERMINAL_PROMPT"] = "0"
        return env

    def _remote_call(self, verb: str, user: str, secret: str, target: str) -> str:
        args = [
            "-c",
            "credential.helper=",
            "-c",
            f"credential.helper={_CREDENTIAL_HELPER}",
            verb,
        ] + self._remote_args(target)
        logger.debug("git %s %s", verb, " ".join(self._remote_args(target)))
        return self._run_git(args, env=self._credential_env(user, secret))

    def push(self, user: str, secret: str, target: str) -> str:
        """Push to the upstream (CONFIGURED_REMOTE) or to <remote> <target>."""
        return self._remote_call("push", user, secret, target)

    def pull(self, user: str, secret: str, target: str) -> str:
        """Pull from the upstream (CONFIGURED_REMOTE) or from <remote> <target>."""
        return self._remote_call("pull", user, secret, target)

    # Pass-through

    def run(self, args: list[str]) -> str:
        """Run git with args forwarded verbatim."""
        return self._run_git(args)
