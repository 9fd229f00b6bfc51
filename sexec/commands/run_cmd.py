"""
RunCommand — Fill placeholders and execute a saved command

Substitution is plain text replacement over the handler arguments:
%0 is the command reference as typed, %1 the first argument after it,
and so on. Each %i is replaced everywhere before moving on to %i+1.
There is no escape for a literal %N, and %1 is replaced before %10
would be.
"""

from typing import List, Sequence

from ..commands.base import BaseCommand
from ..presentation.symbols import safe_print


def substitute(template: str, args: Sequence[str]) -> str:
    """
    Replace positional placeholders with arguments.

    Example:
        >>> substitute("echo %0 and %1", ["a", "b"])
        'echo a and b'
        >>> substitute("%0%0", ["x"])
        'xx'
    """
    command = template
    for i, arg in enumerate(args):
        command = command.replace(f"%{i}", arg)
    return command


class RunCommand(BaseCommand):
    """Execute saved commands."""

    def run(self, args: List[str], interactive: bool):
        """
        Run the command referenced by args[0].

        Args:
            args: Target reference followed by arguments; all of them fill
                  placeholders, the reference itself as %0

        Raises:
            ExecutionError: If the shell could not be started
        """
        record = self.commands[self.get_command_index(args, interactive)]
        command = substitute(record.template, args)

        safe_print(f"\n{self.symbols.arrow} Running command: {command}\n")

        code = self.shell.execute(command)

        status = str(code) if code is not None else "N/A"
        print(f"\nCommand exited with status code {status}.")
