"""Repository port interface.

Defines the operations the transition engine needs from a working copy.
Mutating operations return the combined stdout/stderr of the underlying
tool as plain text; failures are reported in that text, not raised.
"""

from typing import Protocol

from ogit.domain.entities import RepoSnapshot


class Repository(Protocol):
    """Protocol for the version control operations ogit drives."""

    def snapshot(self) -> RepoSnapshot:
        """Read status, recent history and refs in one go.

        Returns:
            RepoSnapshot describing the working copy right now.
        """
        ...

    def stage(self, paths: list[str]) -> str:
        """Add paths to the index.

        Args:
            paths: File paths relative to the repository root.

        Returns:
            Combined command output.
        """
        ...

    def unstage(self, paths: list[str]) -> str:
        """Remove paths from the index, keeping worktree changes.

        Args:
            paths: File paths relative to the repository root.

        Returns:
            Combined command output.
        """
        ...

    def save_index(self) -> str:
        """Save the current index so it can be put back exactly.

        Returns:
            Opaque token for restore_index, or "" when the index cannot be
            saved.
        """
        ...

    def restore_index(self, token: str) -> str:
        """Replace the index with one saved by save_index.

        Args:
            token: Value returned by save_index.

        Returns:
            Combined command output.
        """
        ...

    def commit(self, message: str) -> str:
        """Commit the index with the given message."""
        ...

    def diff(self) -> str:
        """Return the diff between the worktree and the index."""
        ...

    def checkout(self, branch: str) -> str:
        ...

    def create_branch(self, name: str) -> str:
        ...

    def delete_branch(self, name: str) -> str:
        ...

    def reset_hard(self, commit: str) -> str:
        ...

    def reset_soft(self, commit: str) -> str:
        ...

    def stash_apply(self) -> str:
        ...

    def stash_pop(self) -> str:
        ...

    def push(self, user: str, secret: str, target: str) -> str:
        """Push to the remote.

        Args:
            user: Remote user name.
            secret: Password or token.
            target: Branch name, or CONFIGURED_REMOTE for the upstream the
                current branch tracks.

        Returns:
            Combined command output.
        """
        ...

    def pull(self, user: str, secret: str, target: str) -> str:
        """Pull from the remote. Arguments as for push."""
        ...

    def run(self, args: list[str]) -> str:
        """Run an arbitrary command, forwarding args verbatim.

        Args:
            args: Arguments after the program name.

        Returns:
            Combined command output.
        """
        ...
