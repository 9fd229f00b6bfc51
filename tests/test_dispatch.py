"""
Tests for ShortcutRunner dispatch — action lookup, run fallback, errors

These tests validate:
- Keywords and aliases select handlers with the remaining tokens
- Unknown first tokens behave exactly like an explicit "run"
- Target resolution errors and their interactive/batch phrasing
- process_args reports errors and never raises them
- The REPL loop and one-shot surface
"""

import pytest
from unittest.mock import patch

from sexec.errors import (
    MissingTargetError, NoActionError, NotFoundError, OutOfRangeError,
)


class TestExecFromArgs:

    def test_empty_tokens(self, runner):
        with pytest.raises(NoActionError) as exc:
            runner.exec_from_args([], interactive=False)
        assert exc.value.message == "No action or identifier given!"

    def test_empty_first_token(self, runner):
        with pytest.raises(NoActionError):
            runner.exec_from_args(["", "list"], interactive=False)

    def test_keyword_dispatch(self, runner, capsys):
        runner.exec_from_args(["list"], interactive=True)
        out = capsys.readouterr().out
        assert "1. A" in out
        assert "3. C" in out

    def test_alias_dispatch(self, runner, capsys):
        runner.exec_from_args(["-v", "2"], interactive=True)
        out = capsys.readouterr().out
        assert "Name: B" in out
        assert "Command: echo b %0" in out

    def test_unknown_token_runs_by_name(self, runner_env):
        runner = runner_env.create_runner()
        runner.exec_from_args(["C", "x", "y"], interactive=False)
        assert runner_env.shell.executed == ["echo C and x"]

    def test_unknown_token_runs_by_position(self, runner_env):
        runner = runner_env.create_runner()
        runner.exec_from_args(["2", "arg"], interactive=False)
        assert runner_env.shell.executed == ["echo b 2"]

    @pytest.mark.parametrize("tokens", [
        ["A"],
        ["3", "p", "q"],
        ["B", "one", "two", "three"],
    ])
    def test_fallback_matches_explicit_run(self, runner_env, tokens, capsys):
        runner = runner_env.create_runner()

        runner.exec_from_args(tokens, interactive=False)
        implicit_out = capsys.readouterr().out
        runner.exec_from_args(["run"] + tokens, interactive=False)
        explicit_out = capsys.readouterr().out

        assert runner_env.shell.executed[0] == runner_env.shell.executed[1]
        assert implicit_out == explicit_out

    def test_fallback_unknown_name(self, runner):
        with pytest.raises(NotFoundError) as exc:
            runner.exec_from_args(["nope"], interactive=False)
        assert exc.value.message == 'Command with name "nope" not found. Run "se help" for help.'


class TestGetCommandIndex:

    def test_position(self, runner):
        assert runner.get_command_index(["1"], False) == 0
        assert runner.get_command_index(["3"], False) == 2

    def test_name(self, runner):
        assert runner.get_command_index(["B"], False) == 1

    def test_only_first_argument_counts(self, runner):
        assert runner.get_command_index(["C", "A"], False) == 2

    @pytest.mark.parametrize("args", [[], [""]])
    def test_missing(self, runner, args):
        with pytest.raises(MissingTargetError) as exc:
            runner.get_command_index(args, False)
        assert exc.value.message == "No command specified for action."

    def test_zero_does_not_wrap(self, runner):
        with pytest.raises(OutOfRangeError) as exc:
            runner.get_command_index(["0"], True)
        assert exc.value.message == 'Command #0 does not exist. Run "help" for help.'

    def test_past_end(self, runner):
        with pytest.raises(OutOfRangeError) as exc:
            runner.get_command_index(["4"], False)
        assert exc.value.message == 'Command #4 does not exist. Run "se help" for help.'

    def test_not_found_interactive_phrasing(self, runner):
        with pytest.raises(NotFoundError) as exc:
            runner.get_command_index(["zzz"], True)
        assert 'Run "help" for help.' in exc.value.message

    def test_not_found_suggests_close_names(self, runner_factory):
        runner_factory.add_command("deploy", "make deploy")
        runner = runner_factory.create_runner()

        with pytest.raises(NotFoundError) as exc:
            runner.get_command_index(["deply"], False)
        assert exc.value.suggestions == ["deploy"]
        assert exc.value.message.endswith('Did you mean "deploy"?')


class TestProcessArgs:

    def test_error_is_printed(self, runner, capsys):
        runner.process_args(["view", "9"], interactive=False)
        out = capsys.readouterr().out
        assert "\nError: Command #9 does not exist." in out

    def test_empty_input_is_printed(self, runner, capsys):
        runner.process_args([], interactive=True)
        assert "Error: No action or identifier given!" in capsys.readouterr().out


class TestSurfaces:

    def test_run_args_prints_title_then_dispatches(self, runner, capsys):
        runner.run_args(["list"])
        out = capsys.readouterr().out
        assert out.startswith("se ")
        assert "1. A" in out

    def test_repl_dispatches_until_exit(self, runner_env, capsys):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines("list", "A", "exit", "list")

        runner.show_runner()

        out = capsys.readouterr().out
        assert out.count("1. A") == 1
        assert runner_env.shell.executed == ["echo a"]
        # The line after exit was never read
        assert runner_env.editor.lines == ["list"]

    def test_repl_uses_prompt(self, runner_env):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines("exit")

        runner.show_runner()

        assert runner_env.editor.prompts == [("se > ", "")]

    def test_repl_exit_with_trailing_tokens(self, runner_env):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines("  exit now  ", "list")

        runner.show_runner()

        assert runner_env.editor.lines == ["list"]

    def test_repl_stops_at_end_of_input(self, runner_env):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines("list")

        runner.show_runner()  # EOFError after "list" ends the loop

        assert runner_env.editor.lines == []

    def test_repl_ctrl_c_discards_line(self, runner_env, capsys):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines(KeyboardInterrupt(), "A", "exit")

        runner.show_runner()

        assert runner_env.shell.executed == ["echo a"]

    def test_repl_errors_do_not_stop_loop(self, runner_env, capsys):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines("", "nope", "B z", "exit")

        runner.show_runner()

        out = capsys.readouterr().out
        assert "Error: No action or identifier given!" in out
        assert 'Command with name "nope" not found. Run "help" for help.' in out
        assert runner_env.shell.executed == ["echo b B"]

    def test_repl_quoted_arguments(self, runner_env):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines('C "a b" c', "exit")

        runner.show_runner()

        assert runner_env.shell.executed == ["echo C and a b"]

    def test_repl_survives_ctrl_c_during_command(self, runner_env, capsys):
        runner = runner_env.create_runner()
        runner_env.editor.type_lines("A", "list", "exit")

        with patch.object(runner_env.shell, "execute", side_effect=KeyboardInterrupt):
            runner.show_runner()

        # The interrupted run is dropped and the next line still dispatches
        assert "1. A" in capsys.readouterr().out
        assert runner_env.editor.lines == []
