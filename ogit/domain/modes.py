"""Interaction modes for the ogit session.

A Mode names what the user is currently looking at and which key table
applies. Exactly one Mode is active at a time. The push and pull wizards
carry an explicit sub-state instead of overloading field values.
"""

from dataclasses import dataclass
from enum import Enum

# Push/pull target meaning "whatever the branch is configured to track".
CONFIGURED_REMOTE = "<configured>"


class ModeFamily(str, Enum):
    """Key-table family a Mode belongs to."""

    NORMAL = "normal"
    DIFF = "diff"
    PULL = "pull"
    PUSH = "push"
    BRANCH = "branch"
    STASH = "stash"
    RESET = "reset"


class BranchAction(str, Enum):
    """Which branch operation a name prompt feeds."""

    CHECKOUT = "checkout"
    CREATE = "create"
    DELETE = "delete"


class WizardStage(str, Enum):
    """Progress of a push/pull wizard."""

    MENU_OPEN = "menu_open"
    AWAITING_USER = "awaiting_user"
    AWAITING_SECRET = "awaiting_secret"
    AWAITING_TARGET = "awaiting_target"
    READY = "ready"


@dataclass(frozen=True)
class WizardFields:
    """Fields collected by a push/pull wizard.

    An empty string means the field has not been supplied yet. Fields are
    collected in order: user, secret, target.

    Attributes:
        user: Remote user name.
        secret: Password or token for the remote.
        target: Branch name, or CONFIGURED_REMOTE for the tracked upstream.
    """

    user: str = ""
    secret: str = ""
    target: str = ""

    @property
    def stage(self) -> WizardStage:
        """Return the first missing field, or READY when all are set."""
        if not self.user:
            return WizardStage.AWAITING_USER
        if not self.secret:
            return WizardStage.AWAITING_SECRET
        if not self.target:
            return WizardStage.AWAITING_TARGET
        return WizardStage.READY

    def fill(self, value: str) -> "WizardFields":
        """Return a copy with the first missing field set to value.

        Args:
            value: Text submitted by the user.

        Returns:
            New WizardFields. Unchanged if every field is already set.
        """
        stage = self.stage
        if stage == WizardStage.AWAITING_USER:
            return WizardFields(value, self.secret, self.target)
        if stage == WizardStage.AWAITING_SECRET:
            return WizardFields(self.user, value, self.target)
        if stage == WizardStage.AWAITING_TARGET:
            return WizardFields(self.user, self.secret, value)
        return self


def wizard_stage(fields: WizardFields | None) -> WizardStage:
    """Stage of a wizard carrying fields (None means the menu is showing)."""
    if fields is None:
        return WizardStage.MENU_OPEN
    return fields.stage


@dataclass(frozen=True)
class Mode:
    """Base class for all interaction modes."""

    @property
    def family(self) -> ModeFamily:
        return ModeFamily.NORMAL

    @property
    def collects_text(self) -> bool:
        """True when the mode reads a line of text instead of single keys."""
        return False


@dataclass(frozen=True)
class Base(Mode):
    """File lists and history, no overlay."""


@dataclass(frozen=True)
class CommitEntry(Mode):
    """Waiting for a commit message.

    Attributes:
        stage_all: Stage every untracked and tracked file before committing.
    """

    stage_all: bool = False

    @property
    def collects_text(self) -> bool:
        return True


@dataclass(frozen=True)
class DiffMenu(Mode):
    @property
    def family(self) -> ModeFamily:
        return ModeFamily.DIFF


@dataclass(frozen=True)
class DiffResult(Mode):
    """Output of a diff, shown below the file lists."""

    text: str = ""

    @property
    def family(self) -> ModeFamily:
        return ModeFamily.DIFF


@dataclass(frozen=True)
class PushWizard(Mode):
    """Push menu and field collection. fields is None while the menu shows."""

    fields: WizardFields | None = None

    @property
    def family(self) -> ModeFamily:
        return ModeFamily.PUSH

    @property
    def stage(self) -> WizardStage:
        return wizard_stage(self.fields)

    @property
    def collects_text(self) -> bool:
        return self.stage not in (WizardStage.MENU_OPEN, WizardStage.READY)


@dataclass(frozen=True)
class PullWizard(Mode):
    """Pull menu and field collection. fields is None while the menu shows."""

    fields: WizardFields | None = None

    @property
    def family(self) -> ModeFamily:
        return ModeFamily.PULL

    @property
    def stage(self) -> WizardStage:
        return wizard_stage(self.fields)

    @property
    def collects_text(self) -> bool:
        return self.stage not in (WizardStage.MENU_OPEN, WizardStage.READY)


@dataclass(frozen=True)
class BranchMenu(Mode):
    @property
    def family(self) -> ModeFamily:
        return ModeFamily.BRANCH


@dataclass(frozen=True)
class BranchNamePrompt(Mode):
    """Waiting for a branch name for the given action."""

    action: BranchAction = BranchAction.CHECKOUT

    @property
    def family(self) -> ModeFamily:
        return ModeFamily.BRANCH

    @property
    def collects_text(self) -> bool:
        return True


@dataclass(frozen=True)
class StashMenu(Mode):
    @property
    def family(self) -> ModeFamily:
        return ModeFamily.STASH


@dataclass(frozen=True)
class ResetMenu(Mode):
    @property
    def family(self) -> ModeFamily:
        return ModeFamily.RESET


@dataclass(frozen=True)
class ResetCommitPrompt(Mode):
    """Waiting for the commit to reset to."""

    hard: bool = False

    @property
    def family(self) -> ModeFamily:
        return ModeFamily.RESET

    @property
    def collects_text(self) -> bool:
        return True


@dataclass(frozen=True)
class ResultDisplay(Mode):
    """Text returned by the last repository action."""

    text: str = ""


@dataclass(frozen=True)
class Tutorial(Mode):
    """Help screen for one family."""

    topic: ModeFamily = ModeFamily.NORMAL

    @property
    def family(self) -> ModeFamily:
        return self.topic


def menu_mode(family: ModeFamily) -> Mode:
    """Return the mode a family's tutorial closes back to.

    Args:
        family: Family whose menu should be shown.

    Returns:
        The menu Mode for the family, or Base for the normal family.
    """
    menus: dict[ModeFamily, Mode] = {
        ModeFamily.NORMAL: Base(),
        ModeFamily.DIFF: DiffMenu(),
        ModeFamily.PULL: PullWizard(),
        ModeFamily.PUSH: PushWizard(),
        ModeFamily.BRANCH: BranchMenu(),
        ModeFamily.STASH: StashMenu(),
        ModeFamily.RESET: ResetMenu(),
    }
    return menus[family]
