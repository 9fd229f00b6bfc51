"""
BaseCommand — Shared foundation for all action handlers

Provides access to runner resources via composition.
Handlers receive the runner instance and access its state through properties.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..cli import ShortcutRunner


class BaseCommand:
    """
    Base class for action handlers with access to shared resources.

    Handlers don't own state: the command list, store and editor all
    belong to the runner.
    """

    def __init__(self, runner: 'ShortcutRunner'):
        """
        Initialize handler with runner instance.

        Args:
            runner: The ShortcutRunner holding the command list and services
        """
        self._runner = runner

    # -------------------------------------------------------------------------
    # Runner state (convenience properties)
    # -------------------------------------------------------------------------

    @property
    def commands(self):
        """In-memory command list (source of truth for the session)."""
        return self._runner.commands

    @property
    def store(self):
        """Command store for persistence."""
        return self._runner.store

    @property
    def editor(self):
        """Line editor for interactive prompts."""
        return self._runner.editor

    @property
    def shell(self):
        """Shell executor for running commands."""
        return self._runner.shell

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._runner.symbols

    # -------------------------------------------------------------------------
    # Shared helpers
    # -------------------------------------------------------------------------

    def get_command_index(self, args, interactive: bool) -> int:
        """Resolve the target reference in args[0]. See ShortcutRunner."""
        return self._runner.get_command_index(args, interactive)

    def prompt(self, text: str, initial: str = "") -> str:
        """Read a line from the user, optionally pre-filled."""
        return self.editor.read_line(text, initial)

    def save_commands(self):
        """Persist the whole list. Raises PersistenceError on failure."""
        self.store.save(self.commands)
