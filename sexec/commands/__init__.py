"""
Commands — Action registry and handler implementations

The action set is closed: eight keywords, each with one short alias.
Lookup is read-only; nothing registers actions at runtime.

Handler modules:
- manage_cmd: add, del, edit, move (mutate and persist the list)
- run_cmd:    run (placeholder substitution and execution)
- list_cmd:   list, view, help (read-only display)
"""

from enum import Enum
from typing import Dict, Optional

from .base import BaseCommand


class Action(Enum):
    """Canonical action keywords."""
    ADD = "add"
    DEL = "del"
    EDIT = "edit"
    VIEW = "view"
    MOVE = "move"
    RUN = "run"
    HELP = "help"
    LIST = "list"


# Alias -> canonical keyword. One hop only: targets are never aliases.
ALIASES: Dict[str, str] = {
    "-a": "add",
    "-d": "del",
    "-e": "edit",
    "-v": "view",
    "-m": "move",
    "-r": "run",
    "-h": "help",
    "-l": "list",
}

_BY_KEYWORD: Dict[str, Action] = {action.value: action for action in Action}


def get_action(token: str) -> Optional[Action]:
    """
    Resolve a token to an action.

    Aliases are substituted before lookup. Unknown tokens return None
    so the caller can fall back to running a saved command.
    """
    keyword = ALIASES.get(token, token)
    return _BY_KEYWORD.get(keyword)


__all__ = ['Action', 'ALIASES', 'get_action', 'BaseCommand']
