"""Mode-scoped key interpreter.

Each mode family has a small table of keys. A key missing from the family
table is looked up in the base table, and anything still unknown becomes
Nop, so interpretation is total for every mode and every key.
"""

import logging

from ogit.domain import commands as cmd
from ogit.domain.commands import Command, DiffScope
from ogit.domain.modes import (
    CONFIGURED_REMOTE,
    BranchAction,
    Mode,
    ModeFamily,
    Tutorial,
    WizardFields,
)

logger = logging.getLogger(__name__)

TUTORIAL_KEY = "i"

BASE_KEYS: dict[str, Command] = {
    "s": cmd.Stage(),
    "u": cmd.Unstage(),
    "k": cmd.NavUp(),
    "up": cmd.NavUp(),
    "j": cmd.NavDown(),
    "down": cmd.NavDown(),
    "q": cmd.Quit(),
    "c": cmd.Commit(""),
    "D": cmd.ShowDiffMenu(),
    "L": cmd.ShowPullMenu(),
    "P": cmd.ShowPushMenu(),
    " ": cmd.Clear(),
    "b": cmd.ShowBranchMenu(),
    "i": cmd.OpenTutorial(ModeFamily.NORMAL),
    "S": cmd.ShowStashMenu(),
    "a": cmd.AllShortcut(),
    "y": cmd.StageAll(),
    "w": cmd.UnstageAll(),
    "R": cmd.ShowResetMenu(),
}

DIFF_KEYS: dict[str, Command] = {
    "s": cmd.Diff(DiffScope.STAGED),
    "t": cmd.Diff(DiffScope.TRACKED),
    "a": cmd.Diff(DiffScope.ALL),
    "f": cmd.Diff(DiffScope.FILE),
    "i": cmd.OpenTutorial(ModeFamily.DIFF),
}

BRANCH_KEYS: dict[str, Command] = {
    "b": cmd.BranchPrompt(BranchAction.CHECKOUT),
    "c": cmd.BranchPrompt(BranchAction.CREATE),
    "x": cmd.BranchPrompt(BranchAction.DELETE),
    "i": cmd.OpenTutorial(ModeFamily.BRANCH),
}

STASH_KEYS: dict[str, Command] = {
    "a": cmd.StashApply(),
    "p": cmd.StashPop(),
    "i": cmd.OpenTutorial(ModeFamily.STASH),
}

RESET_KEYS: dict[str, Command] = {
    "h": cmd.Reset("", hard=True),
    "s": cmd.Reset("", hard=False),
    "i": cmd.OpenTutorial(ModeFamily.RESET),
}


class KeyInterpreter:
    """Turns key names into Commands for the active Mode.

    Keys are single printable characters or prompt_toolkit key names such
    as "up" and "down".

    Args:
        default_branch: Branch offered by the push/pull "u" shortcut.
    """

    def __init__(self, default_branch: str = "master") -> None:
        self.default_branch = default_branch
        self._tables: dict[ModeFamily, dict[str, Command]] = {
            ModeFamily.NORMAL: {},
            ModeFamily.DIFF: DIFF_KEYS,
            ModeFamily.PULL: self._wizard_keys(cmd.Pull, ModeFamily.PULL),
            ModeFamily.PUSH: self._wizard_keys(cmd.Push, ModeFamily.PUSH),
            ModeFamily.BRANCH: BRANCH_KEYS,
            ModeFamily.STASH: STASH_KEYS,
            ModeFamily.RESET: RESET_KEYS,
        }

    def _wizard_keys(
        self, builder: type[cmd.Push] | type[cmd.Pull], family: ModeFamily
    ) -> dict[str, Command]:
        return {
            "p": builder(WizardFields(target=CONFIGURED_REMOTE)),
            "u": builder(WizardFields(target=self.default_branch)),
            "e": builder(WizardFields()),
            "i": cmd.OpenTutorial(family),
        }

    def interpret(self, mode: Mode, key: str) -> Command:
        """Map a key to a Command in the context of a Mode.

        Args:
            mode: Currently active mode.
            key: Key name.

        Returns:
            The matching Command, Nop when the key is unbound.
        """
        if isinstance(mode, Tutorial) and key == TUTORIAL_KEY:
            return cmd.CloseTutorial(mode.topic)

        command = self._tables[mode.family].get(key) or BASE_KEYS.get(key, cmd.Nop())
        logger.debug("Key %r in %s -> %s", key, type(mode).__name__, command)
        return command
