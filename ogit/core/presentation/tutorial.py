"""Help screens, one per key-table family."""

from ogit.domain.modes import ModeFamily

TUTORIALS: dict[ModeFamily, tuple[str, ...]] = {
    ModeFamily.NORMAL: (
        "Move the cursor with j/k or the arrow keys.",
        "s  stage the file under the cursor",
        "u  unstage the file under the cursor",
        "y  stage every untracked and tracked file",
        "w  unstage every staged file",
        "c  commit staged changes",
        "a  stage everything and commit",
        "D  diff menu",
        "b  branch menu",
        "S  stash menu",
        "R  reset menu",
        "P  push menu",
        "L  pull menu",
        "space  back to the file lists",
        "q  quit",
        "Press 'i' again to close this help.",
    ),
    ModeFamily.DIFF: (
        "Show changes without touching what is staged.",
        "t  unstaged changes of tracked files",
        "s  changes already staged",
        "a  staged and unstaged changes together",
        "f  changes of the file under the cursor",
        "Press 'i' to go back to the diff menu.",
    ),
    ModeFamily.PUSH: (
        "Push commits to the remote. You will be asked for a username and",
        "password before anything is sent.",
        "p  push to the upstream the current branch tracks",
        "u  push to the default branch of the remote",
        "e  choose the branch to push to",
        "Press escape while typing to go back to this menu.",
        "Press 'i' to go back to the push menu.",
    ),
    ModeFamily.PULL: (
        "Fetch and merge commits from the remote. You will be asked for a",
        "username and password first.",
        "p  pull from the upstream the current branch tracks",
        "u  pull from the default branch of the remote",
        "e  choose the branch to pull from",
        "Press escape while typing to go back to this menu.",
        "Press 'i' to go back to the pull menu.",
    ),
    ModeFamily.BRANCH: (
        "Work with local branches. Each option asks for a branch name.",
        "b  check out an existing branch",
        "c  create a branch at the current commit",
        "x  delete a branch",
        "Press 'i' to go back to the branch menu.",
    ),
    ModeFamily.STASH: (
        "Bring back changes saved with 'git stash'.",
        "a  apply the latest stash and keep it",
        "p  apply the latest stash and drop it",
        "Press 'i' to go back to the stash menu.",
    ),
    ModeFamily.RESET: (
        "Move the current branch to another commit. With the cursor on a",
        "recent commit that commit is used, otherwise you are asked for one.",
        "h  hard reset: discard staged and unstaged changes",
        "s  soft reset: keep changes staged",
        "Press 'i' to go back to the reset menu.",
    ),
}
