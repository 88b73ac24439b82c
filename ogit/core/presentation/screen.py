"""Screen model: what each mode shows besides the base view.

The base view (file lists, refs, history) is always visible. Below it a
panel shows the active menu, the result of the last action, or a help
screen, and modes that read text provide a prompt.
"""

from ogit.core.presentation.colors import StyledFragments, highlight_diff, plain_lines
from ogit.core.presentation.tutorial import TUTORIALS
from ogit.domain.exceptions import ModeMismatchError
from ogit.domain.modes import (
    BranchAction,
    BranchMenu,
    BranchNamePrompt,
    CommitEntry,
    DiffMenu,
    DiffResult,
    Mode,
    PullWizard,
    PushWizard,
    ResetCommitPrompt,
    ResetMenu,
    ResultDisplay,
    StashMenu,
    Tutorial,
    WizardStage,
)

COMMIT_PROMPT = "Enter your commit message: "
BRANCH_PROMPT = "Enter branch name: "
RESET_PROMPT = "Enter commit to reset to: "
USER_PROMPT = "Enter username: "
SECRET_PROMPT = "Enter password: "
PUSH_TARGET_PROMPT = "Enter branch to push to: "
PULL_TARGET_PROMPT = "Enter branch to pull from: "

RESULTS_TITLE = "Results: "
DIFF_TITLE = "Diff results: "

DIFF_OPTIONS = (("t", "tracked"), ("s", "staged"), ("f", "file"), ("a", "all"))
BRANCH_OPTIONS = (("b", "checkout branch"), ("c", "create branch"), ("x", "delete branch"))
STASH_OPTIONS = (("a", "apply"), ("p", "pop"))
RESET_OPTIONS = (("h", "reset hard"), ("s", "reset soft"))

BRANCH_TITLES = {
    BranchAction.CHECKOUT: "Checkout branch",
    BranchAction.CREATE: "Create branch",
    BranchAction.DELETE: "Delete branch",
}


def _wizard_options(
    verb: str, preposition: str, remote: str, branch: str
) -> tuple[tuple[str, str], ...]:
    return (
        ("p", f"{verb} {preposition} remote"),
        ("u", f"{verb} {remote}/{branch}"),
        ("e", f"{verb} elsewhere"),
    )


def _menu(title: str, options: tuple[tuple[str, str], ...]) -> StyledFragments:
    fragments: StyledFragments = [("class:title", f"{title}\n")]
    for key, label in options:
        fragments.append(("class:menu.key", f"{key}  "))
        fragments.append(("class:menu.label", f"{label}\n"))
    return fragments


def panel_text(
    mode: Mode,
    remote_name: str = "origin",
    default_branch: str = "master",
    syntax_highlighting: bool = True,
) -> StyledFragments:
    """Build the panel shown under the base view for a mode.

    Args:
        mode: Active mode.
        remote_name: Remote named by the push/pull shortcut option.
        default_branch: Branch named by the push/pull shortcut option.
        syntax_highlighting: Colour diff output.

    Returns:
        Formatted text fragments; empty when the mode has no panel.
    """
    match mode:
        case DiffMenu():
            return _menu("Diff", DIFF_OPTIONS)
        case DiffResult(text=text):
            body = highlight_diff(text) if syntax_highlighting else plain_lines(text)
            return [("class:title", f"{DIFF_TITLE}\n")] + body
        case PushWizard(stage=WizardStage.MENU_OPEN):
            return _menu("Push", _wizard_options("push", "to", remote_name, default_branch))
        case PullWizard(stage=WizardStage.MENU_OPEN):
            return _menu("Pull", _wizard_options("pull", "from", remote_name, default_branch))
        case PushWizard():
            return [("class:title", "Push\n")]
        case PullWizard():
            return [("class:title", "Pull\n")]
        case BranchMenu():
            return _menu("Branch", BRANCH_OPTIONS)
        case BranchNamePrompt(action=action):
            return [("class:title", f"{BRANCH_TITLES[action]}\n")]
        case StashMenu():
            return _menu("Stash", STASH_OPTIONS)
        case ResetMenu():
            return _menu("Reset", RESET_OPTIONS)
        case ResetCommitPrompt(hard=hard):
            return [("class:title", "Reset hard\n" if hard else "Reset soft\n")]
        case ResultDisplay(text=text):
            return [("class:title", f"{RESULTS_TITLE}\n")] + plain_lines(text, "class:result")
        case Tutorial(topic=topic):
            return plain_lines("\n".join(TUTORIALS[topic]), "class:help")
    return []


def prompt_for(mode: Mode) -> str:
    """Return the prompt for a mode that reads text.

    Args:
        mode: Active mode.

    Returns:
        Prompt text.

    Raises:
        ModeMismatchError: If the mode does not read text.
    """
    if not mode.collects_text:
        raise ModeMismatchError(mode, "render a prompt")

    match mode:
        case CommitEntry():
            return COMMIT_PROMPT
        case BranchNamePrompt():
            return BRANCH_PROMPT
        case ResetCommitPrompt():
            return RESET_PROMPT
        case PushWizard(stage=stage) | PullWizard(stage=stage):
            if stage == WizardStage.AWAITING_USER:
                return USER_PROMPT
            if stage == WizardStage.AWAITING_SECRET:
                return SECRET_PROMPT
            return PUSH_TARGET_PROMPT if isinstance(mode, PushWizard) else PULL_TARGET_PROMPT
    raise ModeMismatchError(mode, "render a prompt")


def is_secret_input(mode: Mode) -> bool:
    """True when typed text must be masked."""
    return (
        isinstance(mode, (PushWizard, PullWizard))
        and mode.stage == WizardStage.AWAITING_SECRET
    )
