"""Unit tests for the terminal prompter."""

from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner
from zfsdu.cli.prompts import TyperPrompter
from zfsdu.core.planner import DeletionPlan

runner = CliRunner()


def confirm_app(answers: list[bool]) -> typer.Typer:
    """Build a one-command app that records a single confirm answer."""
    app = typer.Typer()

    @app.command()
    def ask() -> None:
        answers.append(TyperPrompter().confirm("Really?"))

    return app


class TestTyperPrompter:
    """Tests for TyperPrompter."""

    @pytest.mark.parametrize("typed", ["y", "yes", "Y", " YES "])
    def test_confirm_accepts_yes(self, typed: str) -> None:
        """An explicit yes confirms."""
        answers: list[bool] = []

        result = runner.invoke(confirm_app(answers), [], input=f"{typed}\n")

        assert result.exit_code == 0
        assert answers == [True]

    @pytest.mark.parametrize("typed", ["", "n", "no", "ja", "yess"])
    def test_confirm_declines_anything_else(self, typed: str) -> None:
        """Empty input and any other answer decline."""
        answers: list[bool] = []

        result = runner.invoke(confirm_app(answers), [], input=f"{typed}\n")

        assert result.exit_code == 0
        assert answers == [False]

    def test_confirm_does_not_ask_again(self) -> None:
        """An invalid answer declines at once instead of repeating the question."""
        answers: list[bool] = []

        result = runner.invoke(confirm_app(answers), [], input="maybe\ny\n")

        assert result.exit_code == 0
        assert answers == [False]
        assert result.output.count("Really? [y/N]") == 1

    def test_confirm_end_of_input_is_no(self) -> None:
        """End of input at the question counts as no."""
        answers: list[bool] = []

        runner.invoke(confirm_app(answers), [], input="")

        assert answers == [False]

    def test_confirm_abort_is_no(self) -> None:
        """Ctrl-C at the question counts as no."""
        with patch("zfsdu.cli.prompts.typer.prompt", side_effect=typer.Abort()):
            assert TyperPrompter().confirm("Really?") is False

    def test_ask_returns_text(self) -> None:
        """ask returns the typed text unchanged."""
        with patch("zfsdu.cli.prompts.typer.prompt", return_value="DELETE"):
            assert TyperPrompter().ask("Type DELETE") == "DELETE"

    def test_ask_abort_is_empty(self) -> None:
        """Ctrl-C at the text prompt gives an empty answer."""
        with patch("zfsdu.cli.prompts.typer.prompt", side_effect=typer.Abort()):
            assert TyperPrompter().ask("Type DELETE") == ""

    def test_pause_survives_abort(self) -> None:
        """Ctrl-C at the pause prompt just continues."""
        with patch("zfsdu.cli.prompts.typer.prompt", side_effect=typer.Abort()) as mock_prompt:
            TyperPrompter().pause()

        mock_prompt.assert_called_once()

    def test_show_plan_delegates(self) -> None:
        """show_plan prints the deletion preview."""
        plan = DeletionPlan(snapshots=("tank@a",))
        with patch("zfsdu.cli.prompts.print_deletion_plan") as mock_print:
            TyperPrompter().show_plan(plan, True)

        mock_print.assert_called_once_with(plan, True)
