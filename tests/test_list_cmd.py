"""
Tests for ListCommand — list, view, help
"""

import pytest

from sexec.content import render_help
from sexec.errors import MissingTargetError, NotFoundError


class TestList:

    def test_lists_positions_and_names(self, runner, capsys):
        runner.exec_from_args(["list"], interactive=False)
        out = capsys.readouterr().out
        assert "1. A\n2. B\n3. C\n" in out

    def test_names_are_escaped(self, runner_factory, capsys):
        runner_factory.add_command("two words", "echo 2")
        runner = runner_factory.create_runner()

        runner.exec_from_args(["-l"], interactive=False)

        assert "1. two\\ words" in capsys.readouterr().out
        # Display escaping never touches the stored name
        assert runner.commands[0].name == "two words"
        assert runner_factory.saved_names() == ["two words"]

    def test_empty_hint_batch(self, runner_factory, capsys):
        runner = runner_factory.create_runner()
        runner.exec_from_args(["list"], interactive=False)
        assert 'No commands saved. Run "se add" to get started.' in capsys.readouterr().out

    def test_empty_hint_interactive(self, runner_factory, capsys):
        runner = runner_factory.create_runner()
        runner.exec_from_args(["list"], interactive=True)
        assert 'No commands saved. Run "add" to get started.' in capsys.readouterr().out

    def test_ignores_arguments(self, runner, capsys):
        runner.exec_from_args(["list", "whatever"], interactive=False)
        assert "1. A" in capsys.readouterr().out


class TestView:

    def test_shows_template_verbatim(self, runner_factory, capsys):
        runner_factory.add_command("fmt", "printf '%0\\t%1'  ")
        runner = runner_factory.create_runner()

        runner.exec_from_args(["view", "fmt"], interactive=False)

        out = capsys.readouterr().out
        assert "Name: fmt\n" in out
        assert "Command: printf '%0\\t%1'  \n" in out

    def test_view_requires_target(self, runner):
        with pytest.raises(MissingTargetError):
            runner.exec_from_args(["view"], interactive=False)

    def test_view_unknown(self, runner):
        with pytest.raises(NotFoundError):
            runner.exec_from_args(["view", "Q"], interactive=False)


class TestHelp:

    def test_batch_help_uses_se_prefix(self, runner, capsys):
        runner.exec_from_args(["help"], interactive=False)
        out = capsys.readouterr().out
        assert "se add [name]" in out
        assert "exit" not in out

    def test_interactive_help_uses_bare_actions(self, runner, capsys):
        runner.exec_from_args(["-h"], interactive=True)
        out = capsys.readouterr().out
        assert "se add" not in out
        assert "  add [name]" in out
        assert "exit" in out

    def test_help_never_fails_with_extra_args(self, runner, capsys):
        runner.process_args(["help", "1", "2"], interactive=False)
        assert "Error" not in capsys.readouterr().out

    def test_render_help_mentions_every_action(self):
        text = render_help(interactive=False)
        for keyword in ["run", "list", "view", "add", "edit", "move", "del", "help"]:
            assert f"se {keyword}" in text
