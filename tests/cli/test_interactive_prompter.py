from __future__ import annotations

import io
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console

from manifestsync import DependencyType, MismatchEntry, PromptError
from manifestsync.cli.prompt import QuestionaryPrompter, StaticPrompter

REPORT = {
    "react": MismatchEntry(required="^16.0.0", project="15.0.0", type=DependencyType.DEPENDENCIES),
    "jest": MismatchEntry(required="^21.0.0", project="missing", type=DependencyType.DEV_DEPENDENCIES),
}


def _question(answer: Any) -> MagicMock:
    question = MagicMock()
    question.ask_async = AsyncMock(return_value=answer)
    return question


@pytest.fixture
def tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "manifestsync.cli.prompt.interactive.sys.stdin",
        SimpleNamespace(isatty=lambda: True),
    )


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


def make_prompter(output: io.StringIO, **kwargs: Any) -> QuestionaryPrompter:
    return QuestionaryPrompter(console=Console(file=output, width=120), **kwargs)


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_confirm_and_keep_all_entries(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(True)
        questionary.checkbox.return_value = _question(["react", "jest"])

        decision = await make_prompter(console_output).prompt(REPORT)

    assert decision.should_fix is True
    assert decision.mismatched_modules == REPORT
    assert "react" in console_output.getvalue()


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_deselected_entries_are_dropped(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(True)
        questionary.checkbox.return_value = _question(["jest"])

        decision = await make_prompter(console_output).prompt(REPORT)

    assert decision.should_fix is True
    assert list(decision.mismatched_modules) == ["jest"]


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_deselecting_everything_means_no_fix(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(True)
        questionary.checkbox.return_value = _question([])

        decision = await make_prompter(console_output).prompt(REPORT)

    assert decision.should_fix is False
    assert decision.mismatched_modules == {}


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_declining_keeps_report(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(False)

        decision = await make_prompter(console_output).prompt(REPORT)

    assert decision.should_fix is False
    assert decision.mismatched_modules == REPORT
    questionary.checkbox.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_deselect_step_can_be_disabled(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(True)

        decision = await make_prompter(console_output, allow_deselect=False).prompt(REPORT)

    assert decision.mismatched_modules == REPORT
    questionary.checkbox.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_interrupted_confirm_raises_prompt_error(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(None)

        with pytest.raises(PromptError, match="Aborted"):
            await make_prompter(console_output).prompt(REPORT)


@pytest.mark.asyncio
@pytest.mark.usefixtures("tty")
async def test_interrupted_selection_raises_prompt_error(console_output: io.StringIO) -> None:
    with patch("manifestsync.cli.prompt.interactive.questionary") as questionary:
        questionary.confirm.return_value = _question(True)
        questionary.checkbox.return_value = _question(None)

        with pytest.raises(PromptError, match="selection"):
            await make_prompter(console_output).prompt(REPORT)


@pytest.mark.asyncio
async def test_non_tty_stdin_raises_prompt_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "manifestsync.cli.prompt.interactive.sys.stdin",
        SimpleNamespace(isatty=lambda: False),
    )

    with pytest.raises(PromptError, match="not interactive"):
        await make_prompter(io.StringIO()).prompt(REPORT)


@pytest.mark.asyncio
async def test_static_prompter_returns_report_unchanged() -> None:
    decision = await StaticPrompter(True).prompt(REPORT)

    assert decision.should_fix is True
    assert decision.mismatched_modules == REPORT
