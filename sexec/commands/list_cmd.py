"""
ListCommand — Read-only display actions

Provides list, view and help. None of these touch the store.
"""

from typing import List

from ..commands.base import BaseCommand
from ..content import render_help
from ..core.tokenizer import escape_string
from ..presentation.symbols import safe_print


class ListCommand(BaseCommand):
    """Show saved commands and usage."""

    def list_commands(self, args: List[str], interactive: bool):
        """Print every command as '<position>. <escaped name>'."""
        print()

        for i, record in enumerate(self.commands, 1):
            safe_print(f"{i}. {escape_string(record.name)}")

        if not self.commands:
            add_cmd = "add" if interactive else "se add"
            print(f"No commands saved. Run \"{add_cmd}\" to get started.")

    def view(self, args: List[str], interactive: bool):
        """Print one command's name and template verbatim."""
        record = self.commands[self.get_command_index(args, interactive)]

        print()
        safe_print(f"Name: {record.name}")
        safe_print(f"Command: {record.template}")

    def help(self, args: List[str], interactive: bool):
        print(render_help(interactive))
