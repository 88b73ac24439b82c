"""Turn protocol between the presentation layer and the transition engine.

The presentation adapter owns the terminal and calls into a Controller
with one key or one line of text per turn. The controller interprets the
input for the active mode, runs ``update_mode`` then ``exec``, and reports
whether the loop should keep going.
"""

import logging
from dataclasses import replace

from ogit.core.engine import LoopControl, TransitionEngine
from ogit.core.keymap import KeyInterpreter
from ogit.core.session import Session
from ogit.domain import commands as cmd
from ogit.domain.commands import Command
from ogit.domain.exceptions import ModeMismatchError
from ogit.domain.modes import (
    BranchAction,
    BranchNamePrompt,
    CommitEntry,
    PullWizard,
    PushWizard,
    ResetCommitPrompt,
)

logger = logging.getLogger(__name__)

_BRANCH_COMMANDS = {
    BranchAction.CHECKOUT: cmd.CheckoutBranch,
    BranchAction.CREATE: cmd.CreateBranch,
    BranchAction.DELETE: cmd.DeleteBranch,
}


class Controller:
    """Owns the Session for the lifetime of the interactive loop.

    Args:
        engine: Transition engine bound to a repository.
        interpreter: Key interpreter.
        session: Initial session. Built from the engine when omitted.
    """

    def __init__(
        self,
        engine: TransitionEngine,
        interpreter: KeyInterpreter,
        session: Session | None = None,
    ) -> None:
        self.engine = engine
        self.interpreter = interpreter
        self.session = session if session is not None else engine.start()

    def step(self, command: Command) -> LoopControl:
        """Run one command through update_mode and exec."""
        session = self.engine.update_mode(self.session, command)
        transition = self.engine.exec(session, command)
        self.session = transition.session
        return transition.control

    def handle_key(self, key: str, top_line: int = 0, height: int | None = None) -> LoopControl:
        """Interpret a key press for the active mode and run it.

        Navigation is marked off-screen when the target line is outside the
        visible window or outside the content, in which case the view
        scrolls instead of the cursor moving.

        Args:
            key: Key name.
            top_line: First visible line of the base view.
            height: Number of visible lines, None for unbounded.

        Returns:
            Loop control for the driver.
        """
        command = self.interpreter.interpret(self.session.mode, key)
        if isinstance(command, (cmd.NavUp, cmd.NavDown)):
            step = -1 if isinstance(command, cmd.NavUp) else 1
            target = self.session.cursor + step
            command = replace(command, on_screen=self._visible(target, top_line, height))
        return self.step(command)

    def _visible(self, line: int, top_line: int, height: int | None) -> bool:
        if line < 0 or line > self.session.max_cursor:
            return False
        if height is None:
            return True
        return top_line <= line < top_line + height

    def submit_text(self, text: str) -> LoopControl:
        """Feed a line of text to the mode collecting it.

        An empty line cancels: prompts return to the base view and wizards
        go back to their menu.

        Args:
            text: Submitted line, without the trailing newline.

        Returns:
            Loop control for the driver.

        Raises:
            ModeMismatchError: If the active mode does not collect text.
        """
        mode = self.session.mode
        if not mode.collects_text:
            raise ModeMismatchError(mode, "submit text")
        if not text:
            return self.cancel_input()

        match mode:
            case CommitEntry():
                command: Command = cmd.Commit(text)
            case BranchNamePrompt(action=action):
                command = _BRANCH_COMMANDS[action](text)
            case ResetCommitPrompt(hard=hard):
                command = cmd.Reset(text, hard=hard)
            case PushWizard(fields=fields) if fields is not None:
                command = cmd.Push(fields.fill(text))
            case PullWizard(fields=fields) if fields is not None:
                command = cmd.Pull(fields.fill(text))
            case _:
                raise ModeMismatchError(mode, "submit text")
        return self.step(command)

    def cancel_input(self) -> LoopControl:
        """Abandon text entry: wizards go back to their menu, prompts to base.

        Raises:
            ModeMismatchError: If the active mode does not collect text.
        """
        mode = self.session.mode
        if not mode.collects_text:
            raise ModeMismatchError(mode, "cancel input")
        logger.debug("Input cancelled in %s", type(mode).__name__)
        if isinstance(mode, PushWizard):
            return self.step(cmd.Push(None))
        if isinstance(mode, PullWizard):
            return self.step(cmd.Pull(None))
        return self.step(cmd.Clear())
