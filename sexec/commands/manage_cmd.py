"""
ManageCommand — Handlers that change the saved command list

Provides:
- add:  prompt for name + template, append
- del:  confirm, remove
- edit: re-prompt pre-filled with current values, replace in place
- move: prompt for a new 1-based position, reinsert

Every successful change rewrites the full list to the store.
"""

import logging
from typing import List

from ..commands.base import BaseCommand
from ..core.store import CommandRecord
from ..errors import AbortedError, DuplicateNameError, InvalidNameError, InvalidNumberError

logger = logging.getLogger(__name__)

CONFIRM_ANSWERS = ("y", "yes")


class ManageCommand(BaseCommand):
    """Create, edit, reorder and delete saved commands."""

    def add(self, args: List[str], interactive: bool):
        """
        Save a new command.

        Args:
            args: Optional initial name in args[0]
        """
        base = CommandRecord(name=args[0] if args else "", template="")
        record = self.create_cmd(base, name_reserved=False)

        self.commands.append(record)
        self.save_commands()

        print(f"\n{self.symbols.check_pass} Command created successfully.")

    def delete(self, args: List[str], interactive: bool):
        """
        Delete a command after a Y/N confirmation.

        Raises:
            AbortedError: If the answer is anything but y/yes
        """
        index = self.get_command_index(args, interactive)

        print()
        confirm = self.prompt(
            f"Are you sure you want to delete command #{index + 1}? (Y/N) "
        ).lower()

        if confirm not in CONFIRM_ANSWERS:
            raise AbortedError("Deletion aborted.")

        removed = self.commands.pop(index)
        logger.debug("Deleted command %r at index %d", removed.name, index)
        self.save_commands()

        print(f"\n{self.symbols.check_pass} Command deleted successfully.")

    def edit(self, args: List[str], interactive: bool):
        """Re-prompt name and template, pre-filled with current values."""
        index = self.get_command_index(args, interactive)

        self.commands[index] = self.create_cmd(self.commands[index], name_reserved=True)
        self.save_commands()

        print(f"\n{self.symbols.check_pass} Command edited successfully.")

    def move(self, args: List[str], interactive: bool):
        """
        Move a command to a new 1-based position.

        The position is clamped to [1, len + 1]; past-the-end appends.

        Raises:
            InvalidNumberError: If the position is not an integer
        """
        index = self.get_command_index(args, interactive)

        print()
        pos_line = self.prompt("New position: ").strip()

        try:
            position = int(pos_line)
        except ValueError:
            raise InvalidNumberError()

        count = len(self.commands)
        new_index = min(max(position, 1), count + 1) - 1

        record = self.commands.pop(index)
        self.commands.insert(new_index, record)
        logger.debug("Moved command %r from %d to %d", record.name, index, new_index)
        self.save_commands()

        print(f"\n{self.symbols.check_pass} Command moved successfully.")

    def create_cmd(self, base: CommandRecord, name_reserved: bool) -> CommandRecord:
        """
        Prompt for a name and template, pre-filled from base.

        Args:
            base: Starting values (empty for a new command)
            name_reserved: True when editing; keeping the original name
                is then not a collision

        Raises:
            InvalidNameError: If the name is empty
            DuplicateNameError: If the name belongs to another command
        """
        print()

        name = self.prompt("Name: ", base.name)
        template = self.prompt("Command: ", base.template)

        if not name:
            raise InvalidNameError()

        keeps_own_name = name_reserved and base.name and base.name == name
        if not keeps_own_name and any(command.name == name for command in self.commands):
            raise DuplicateNameError(name)

        return CommandRecord(name=name, template=template)
