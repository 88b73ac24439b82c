"""Semantic commands produced by the key interpreter.

Commands are immutable values. The transition engine pattern-matches on
their type; none of them carry behaviour.
"""

from dataclasses import dataclass
from enum import Enum

from ogit.domain.modes import BranchAction, ModeFamily, WizardFields


class DiffScope(str, Enum):
    """What a diff shows."""

    TRACKED = "tracked"  # unstaged changes of tracked files
    STAGED = "staged"  # changes already in the index
    ALL = "all"  # staged and unstaged changes
    FILE = "file"  # changes of the file under the cursor


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# Navigation


@dataclass(frozen=True)
class NavUp(Command):
    """Move the cursor up one line.

    Attributes:
        on_screen: False when the target line lies outside the viewport, in
            which case the view scrolls instead of the cursor moving.
    """

    on_screen: bool = True


@dataclass(frozen=True)
class NavDown(Command):
    """Move the cursor down one line. See NavUp."""

    on_screen: bool = True


# Immediate actions


@dataclass(frozen=True)
class Stage(Command):
    """Stage the file under the cursor."""


@dataclass(frozen=True)
class Unstage(Command):
    """Unstage the file under the cursor."""


@dataclass(frozen=True)
class StageAll(Command):
    pass


@dataclass(frozen=True)
class UnstageAll(Command):
    pass


@dataclass(frozen=True)
class Commit(Command):
    """Commit staged changes. An empty message opens the message prompt."""

    message: str = ""


@dataclass(frozen=True)
class AllShortcut(Command):
    """Stage everything and commit, asking for the message first."""


@dataclass(frozen=True)
class CheckoutBranch(Command):
    name: str = ""


@dataclass(frozen=True)
class CreateBranch(Command):
    name: str = ""


@dataclass(frozen=True)
class DeleteBranch(Command):
    name: str = ""


@dataclass(frozen=True)
class Reset(Command):
    """Reset to a commit.

    Attributes:
        commit: Commit to reset to. Empty means "the commit under the
            cursor", or a prompt when the cursor is not on a commit.
        hard: Hard reset when True, soft reset otherwise.
    """

    commit: str = ""
    hard: bool = False


@dataclass(frozen=True)
class StashApply(Command):
    pass


@dataclass(frozen=True)
class StashPop(Command):
    pass


# Menu openers


@dataclass(frozen=True)
class ShowDiffMenu(Command):
    pass


@dataclass(frozen=True)
class ShowPullMenu(Command):
    pass


@dataclass(frozen=True)
class ShowPushMenu(Command):
    pass


@dataclass(frozen=True)
class ShowBranchMenu(Command):
    pass


@dataclass(frozen=True)
class ShowStashMenu(Command):
    pass


@dataclass(frozen=True)
class ShowResetMenu(Command):
    pass


@dataclass(frozen=True)
class BranchPrompt(Command):
    """Ask for a branch name for the given action."""

    action: BranchAction = BranchAction.CHECKOUT


# Diff selector


@dataclass(frozen=True)
class Diff(Command):
    scope: DiffScope = DiffScope.TRACKED


# Multi-field builders


@dataclass(frozen=True)
class Push(Command):
    """Push wizard step.

    Attributes:
        fields: Collected fields, or None to go back to the push menu.
    """

    fields: WizardFields | None = None


@dataclass(frozen=True)
class Pull(Command):
    """Pull wizard step. See Push."""

    fields: WizardFields | None = None


# Tutorials


@dataclass(frozen=True)
class OpenTutorial(Command):
    family: ModeFamily = ModeFamily.NORMAL


@dataclass(frozen=True)
class CloseTutorial(Command):
    family: ModeFamily = ModeFamily.NORMAL


# Meta


@dataclass(frozen=True)
class Quit(Command):
    pass


@dataclass(frozen=True)
class Clear(Command):
    """Return to the base view."""


@dataclass(frozen=True)
class Nop(Command):
    pass
