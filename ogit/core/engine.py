"""Transition engine.

Applies Commands to a Session. ``update_mode`` pre-selects the Mode some
commands need; ``exec`` performs the command, calling the repository where
needed, and returns the next Session together with a loop control flag.
Every mutating action re-reads the repository before returning, so the
session never shows stale state.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

from ogit.core.session import Session
from ogit.domain import commands as cmd
from ogit.domain.commands import Command, DiffScope
from ogit.domain.entities import CursorState
from ogit.domain.modes import (
    Base,
    BranchMenu,
    BranchNamePrompt,
    CommitEntry,
    DiffMenu,
    DiffResult,
    PullWizard,
    PushWizard,
    ResetCommitPrompt,
    ResetMenu,
    ResultDisplay,
    StashMenu,
    Tutorial,
    WizardFields,
    WizardStage,
    menu_mode,
)
from ogit.ports.repository import Repository

logger = logging.getLogger(__name__)


class LoopControl(str, Enum):
    """What the driver loop should do after a turn."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class Transition:
    """Result of executing a command."""

    session: Session
    control: LoopControl = LoopControl.CONTINUE


_MENU_MODES = {
    cmd.ShowDiffMenu: DiffMenu,
    cmd.ShowPullMenu: PullWizard,
    cmd.ShowPushMenu: PushWizard,
    cmd.ShowBranchMenu: BranchMenu,
    cmd.ShowStashMenu: StashMenu,
    cmd.ShowResetMenu: ResetMenu,
}


class TransitionEngine:
    """Drives a Repository from Commands and keeps the Session in sync.

    Args:
        repository: Repository the commands act on.
    """

    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def start(self) -> Session:
        """Build the first session from the repository."""
        return Session.from_snapshot(self.repository.snapshot())

    def update_mode(self, session: Session, command: Command) -> Session:
        """Pre-select the Mode a command needs before it executes.

        A commit switches to commit entry. A push/pull that goes back to its
        menu enters the wizard with nothing collected; any other push/pull
        re-enters the wizard carrying its fields. Everything else leaves the
        Mode alone.

        Args:
            session: Current session.
            command: Incoming command.

        Returns:
            Session with the adjusted Mode.
        """
        match command:
            case cmd.Commit():
                if isinstance(session.mode, CommitEntry):
                    return session
                return replace(session, mode=CommitEntry())
            case cmd.Push(fields=None):
                return replace(session, mode=PushWizard(WizardFields()))
            case cmd.Push(fields=fields):
                return replace(session, mode=PushWizard(fields))
            case cmd.Pull(fields=None):
                return replace(session, mode=PullWizard(WizardFields()))
            case cmd.Pull(fields=fields):
                return replace(session, mode=PullWizard(fields))
        return session

    def exec(self, session: Session, command: Command) -> Transition:
        """Apply a command to a session.

        Args:
            session: Session after update_mode.
            command: Command to apply.

        Returns:
            Transition with the next session. Quit yields TERMINATE.
        """
        logger.debug("exec %s in %s", command, type(session.mode).__name__)
        match command:
            case cmd.Quit():
                return Transition(session, LoopControl.TERMINATE)
            case cmd.NavUp(on_screen=on_screen):
                return Transition(self._navigate(session, -1, on_screen))
            case cmd.NavDown(on_screen=on_screen):
                return Transition(self._navigate(session, 1, on_screen))
            case cmd.Clear():
                cursor = min(session.cursor, session.max_cursor)
                return Transition(
                    replace(
                        session,
                        mode=Base(),
                        cursor=cursor,
                        cursor_state=CursorState.ON_SCREEN,
                    )
                )
            case cmd.Stage():
                return Transition(self._on_cursor_file(session, self.repository.stage))
            case cmd.Unstage():
                return Transition(self._on_cursor_file(session, self.repository.unstage))
            case cmd.StageAll():
                paths = list(session.untracked) + list(session.tracked)
                if paths:
                    self.repository.stage(paths)
                return Transition(self._refresh(session))
            case cmd.UnstageAll():
                if session.staged:
                    self.repository.unstage(list(session.staged))
                return Transition(self._refresh(session))
            case cmd.Commit(message=message):
                return Transition(self._commit(session, message))
            case cmd.AllShortcut():
                return Transition(replace(session, mode=CommitEntry(stage_all=True)))
            case cmd.Diff(scope=scope):
                return Transition(self._diff(session, scope))
            case cmd.Push(fields=fields):
                return Transition(self._wizard_step(session, fields, push=True))
            case cmd.Pull(fields=fields):
                return Transition(self._wizard_step(session, fields, push=False))
            case cmd.BranchPrompt(action=action):
                return Transition(replace(session, mode=BranchNamePrompt(action)))
            case cmd.CheckoutBranch(name=name):
                return Transition(self._named_action(session, name, self.repository.checkout))
            case cmd.CreateBranch(name=name):
                return Transition(
                    self._named_action(session, name, self.repository.create_branch)
                )
            case cmd.DeleteBranch(name=name):
                return Transition(
                    self._named_action(session, name, self.repository.delete_branch)
                )
            case cmd.Reset(commit=commit, hard=hard):
                return Transition(self._reset(session, commit, hard))
            case cmd.StashApply():
                return Transition(self._show_result(session, self.repository.stash_apply()))
            case cmd.StashPop():
                return Transition(self._show_result(session, self.repository.stash_pop()))
            case cmd.OpenTutorial(family=family):
                return Transition(replace(session, mode=Tutorial(family)))
            case cmd.CloseTutorial(family=family):
                return Transition(replace(session, mode=menu_mode(family)))
            case _ if type(command) in _MENU_MODES:
                return Transition(replace(session, mode=_MENU_MODES[type(command)]()))
        return Transition(session)

    def _refresh(self, session: Session) -> Session:
        return session.refresh(self.repository.snapshot())

    def _show_result(self, session: Session, output: str) -> Session:
        return replace(self._refresh(session), mode=ResultDisplay(output))

    def _navigate(self, session: Session, step: int, on_screen: bool) -> Session:
        if not on_screen:
            state = CursorState.OFF_SCREEN_UP if step < 0 else CursorState.OFF_SCREEN_DOWN
            return replace(session, cursor_state=state)
        return replace(
            session,
            cursor=max(0, session.cursor + step),
            cursor_state=CursorState.ON_SCREEN,
        )

    def _on_cursor_file(self, session: Session, action) -> Session:
        path = session.file_under_cursor()
        if path is None:
            return session
        action([path])
        return self._refresh(session)

    def _commit(self, session: Session, message: str) -> Session:
        if not message:
            return session
        if isinstance(session.mode, CommitEntry) and session.mode.stage_all:
            paths = list(session.untracked) + list(session.tracked)
            if paths:
                self.repository.stage(paths)
        return self._show_result(session, self.repository.commit(message))

    def _named_action(self, session: Session, name: str, action) -> Session:
        if not name:
            return session
        return self._show_result(session, action(name))

    def _reset(self, session: Session, commit: str, hard: bool) -> Session:
        if not commit:
            commit = session.commit_under_cursor() or ""
        if not commit:
            return replace(session, mode=ResetCommitPrompt(hard))
        if hard:
            output = self.repository.reset_hard(commit)
        else:
            output = self.repository.reset_soft(commit)
        return self._show_result(session, output)

    def _wizard_step(
        self, session: Session, fields: WizardFields | None, push: bool
    ) -> Session:
        wizard = PushWizard if push else PullWizard
        if fields is None or fields.stage != WizardStage.READY:
            return replace(session, mode=wizard(fields))

        if push:
            output = self.repository.push(fields.user, fields.secret, fields.target)
        else:
            output = self.repository.pull(fields.user, fields.secret, fields.target)
        return self._show_result(session, output)

    def _diff(self, session: Session, scope: DiffScope) -> Session:
        """Show a diff for the scope, leaving the index as it was.

        ``git diff`` only compares worktree and index, so the index is
        rearranged to expose the wanted changes and restored afterwards.
        The index is saved first and put back whole. When it cannot be
        saved (unmerged paths), the files moved are moved back one by one.
        """
        staged = list(session.staged)
        to_stage: list[str] = []
        to_unstage: list[str] = []

        if scope == DiffScope.STAGED:
            to_stage, to_unstage = list(session.tracked), staged
        elif scope == DiffScope.ALL:
            to_unstage = staged
        elif scope == DiffScope.FILE:
            path = session.file_under_cursor()
            if path is None:
                return session
            to_stage, to_unstage = list(session.tracked), [path]

        token = self.repository.save_index()
        try:
            if to_stage:
                self.repository.stage(to_stage)
            if to_unstage:
                self.repository.unstage(to_unstage)
            output = self.repository.diff()
        finally:
            if token:
                self.repository.restore_index(token)
            else:
                self._undo_index_moves(staged, to_stage, to_unstage)

        return replace(self._refresh(session), mode=DiffResult(output))

    def _undo_index_moves(
        self, staged: list[str], to_stage: list[str], to_unstage: list[str]
    ) -> None:
        restage = [p for p in to_unstage if p in staged]
        unstage = [p for p in to_stage if p not in staged]
        if unstage:
            self.repository.unstage(unstage)
        if restage:
            self.repository.stage(restage)
