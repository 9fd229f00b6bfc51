"""
Test Data Factory — Isolated runner environments for se tests

Provides a real CommandStore backed by tmp_path plus scripted stand-ins
for the two interactive boundaries (line input and shell execution).

Usage:
    @pytest.fixture
    def runner_env(tmp_path):
        factory = RunnerTestFactory(tmp_path)
        factory.add_command("hello", "echo hello")
        return factory

    def test_something(runner_env):
        runner = runner_env.create_runner()
        runner_env.editor.answer("y")
        runner.exec_from_args(["del", "1"], interactive=True)
"""

from pathlib import Path
from typing import List, Optional, Tuple

from sexec.cli import ShortcutRunner
from sexec.core.store import CommandRecord, CommandStore
from sexec.errors import AbortedError
from sexec.presentation.symbols import ASCII

# Answer that accepts whatever was pre-filled
KEEP = object()


class ScriptedEditor:
    """
    Line editor that replays queued answers.

    Records every prompt with its pre-filled text so tests can check
    what the user would have seen.
    """

    def __init__(self):
        self.answers: List[object] = []
        self.lines: List[str] = []
        self.prompts: List[Tuple[str, str]] = []

    def answer(self, *answers):
        self.answers.extend(answers)
        return self

    def type_lines(self, *lines):
        self.lines.extend(lines)
        return self

    def read_line(self, prompt: str, initial: str = "") -> str:
        self.prompts.append((prompt, initial))
        if not self.answers:
            # Behaves like Ctrl-D at the prompt
            raise AbortedError("Input aborted.")
        answer = self.answers.pop(0)
        return initial if answer is KEEP else answer

    def read_command_line(self, prompt: str) -> str:
        self.prompts.append((prompt, ""))
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


class FakeShell:
    """Shell executor that records commands instead of running them."""

    def __init__(self, exit_code: Optional[int] = 0):
        self.exit_code = exit_code
        self.executed: List[str] = []

    def execute(self, command: str) -> Optional[int]:
        self.executed.append(command)
        return self.exit_code


class RunnerTestFactory:
    """
    Factory for isolated runner environments.

    All data lives under pytest's tmp_path.
    """

    def __init__(self, tmp_path: Path):
        self.tmp_path = Path(tmp_path)
        self.store_path = self.tmp_path / ".se" / "commands.json"
        self.store = CommandStore(self.store_path)
        self.editor = ScriptedEditor()
        self.shell = FakeShell()
        self._seed: List[CommandRecord] = []

    def add_command(self, name: str, template: str) -> CommandRecord:
        """Save a command before the runner is created."""
        record = CommandRecord(name=name, template=template)
        self._seed.append(record)
        self.store.save(self._seed)
        return record

    def create_sample_commands(self):
        """Three commands: A, B, C."""
        self.add_command("A", "echo a")
        self.add_command("B", "echo b %0")
        self.add_command("C", "echo %0 and %1")

    def create_runner(self) -> ShortcutRunner:
        return ShortcutRunner(self.store, self.editor, self.shell, symbols=ASCII)

    def saved_names(self) -> List[str]:
        """Names as persisted on disk (not the runner's memory)."""
        return [record.name for record in CommandStore(self.store_path).load()]
