"""Unit tests for per-mode panels and prompts."""

import pytest

from ogit.core.presentation.screen import (
    BRANCH_PROMPT,
    COMMIT_PROMPT,
    DIFF_TITLE,
    PULL_TARGET_PROMPT,
    PUSH_TARGET_PROMPT,
    RESET_PROMPT,
    RESULTS_TITLE,
    SECRET_PROMPT,
    USER_PROMPT,
    is_secret_input,
    panel_text,
    prompt_for,
)
from ogit.domain.exceptions import ModeMismatchError
from ogit.domain.modes import (
    Base,
    BranchAction,
    BranchMenu,
    BranchNamePrompt,
    CommitEntry,
    DiffMenu,
    DiffResult,
    ModeFamily,
    PullWizard,
    PushWizard,
    ResetCommitPrompt,
    ResetMenu,
    ResultDisplay,
    StashMenu,
    Tutorial,
    WizardFields,
)


def _text(fragments: list[tuple[str, str]]) -> str:
    return "".join(value for _, value in fragments)


class TestPanelText:
    def test_base_has_no_panel(self) -> None:
        assert panel_text(Base()) == []

    def test_commit_entry_has_no_panel(self) -> None:
        assert panel_text(CommitEntry()) == []

    def test_diff_menu_lists_scopes(self) -> None:
        text = _text(panel_text(DiffMenu()))
        for option in ("t  tracked", "s  staged", "f  file", "a  all"):
            assert option in text

    def test_push_menu_names_remote_and_branch(self) -> None:
        text = _text(panel_text(PushWizard(), remote_name="upstream", default_branch="main"))
        assert "p  push to remote" in text
        assert "u  push upstream/main" in text
        assert "e  push elsewhere" in text

    def test_pull_menu(self) -> None:
        text = _text(panel_text(PullWizard()))
        assert "u  pull origin/master" in text

    def test_wizard_collecting_shows_title_only(self) -> None:
        assert _text(panel_text(PushWizard(WizardFields()))) == "Push\n"
        assert _text(panel_text(PullWizard(WizardFields(user="bob")))) == "Pull\n"

    def test_branch_menu_and_prompt(self) -> None:
        assert "x  delete branch" in _text(panel_text(BranchMenu()))
        assert _text(panel_text(BranchNamePrompt(BranchAction.CREATE))) == "Create branch\n"

    def test_stash_and_reset_menus(self) -> None:
        assert "p  pop" in _text(panel_text(StashMenu()))
        assert "h  reset hard" in _text(panel_text(ResetMenu()))
        assert _text(panel_text(ResetCommitPrompt(hard=False))) == "Reset soft\n"

    def test_result_display(self) -> None:
        fragments = panel_text(ResultDisplay("line one\nline two"))
        assert _text(fragments) == f"{RESULTS_TITLE}\nline one\nline two\n"
        assert fragments[1][0] == "class:result"

    def test_diff_result_highlighted(self) -> None:
        fragments = panel_text(DiffResult("+added\n"))
        assert _text(fragments).startswith(DIFF_TITLE)
        assert ("class:diff.inserted", "+added") in fragments

    def test_diff_result_plain(self) -> None:
        fragments = panel_text(DiffResult("+added"), syntax_highlighting=False)
        assert fragments == [("class:title", f"{DIFF_TITLE}\n"), ("", "+added\n")]

    @pytest.mark.parametrize("family", list(ModeFamily))
    def test_every_family_has_a_tutorial(self, family: ModeFamily) -> None:
        text = _text(panel_text(Tutorial(family)))
        assert "'i'" in text


class TestPromptFor:
    @pytest.mark.parametrize(
        "mode,prompt",
        [
            (CommitEntry(), COMMIT_PROMPT),
            (CommitEntry(stage_all=True), COMMIT_PROMPT),
            (BranchNamePrompt(BranchAction.DELETE), BRANCH_PROMPT),
            (ResetCommitPrompt(hard=True), RESET_PROMPT),
            (PushWizard(WizardFields()), USER_PROMPT),
            (PullWizard(WizardFields(user="bob")), SECRET_PROMPT),
            (PushWizard(WizardFields("bob", "pw")), PUSH_TARGET_PROMPT),
            (PullWizard(WizardFields("bob", "pw")), PULL_TARGET_PROMPT),
        ],
    )
    def test_prompts(self, mode, prompt: str) -> None:
        assert prompt_for(mode) == prompt

    @pytest.mark.parametrize("mode", [Base(), DiffMenu(), PushWizard(), ResultDisplay("x")])
    def test_no_prompt_outside_text_modes(self, mode) -> None:
        with pytest.raises(ModeMismatchError, match="render a prompt"):
            prompt_for(mode)


class TestSecretInput:
    def test_only_secret_stage_is_masked(self) -> None:
        assert is_secret_input(PushWizard(WizardFields(user="alice")))
        assert is_secret_input(PullWizard(WizardFields(user="alice")))
        assert not is_secret_input(PushWizard(WizardFields()))
        assert not is_secret_input(PushWizard(WizardFields("alice", "pw")))
        assert not is_secret_input(CommitEntry())
