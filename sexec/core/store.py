"""
CommandStore — Durable list of saved commands

Storage: ~/.se/commands.json (path configurable)

Design:
- The whole list is rewritten on every save (no append log)
- Writes go to a temp file and are swapped in with os.replace
- Order in the file is the user-visible order
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Any, Iterable

import orjson

from ..errors import PersistenceError

logger = logging.getLogger(__name__)

STORE_VERSION = 1


@dataclass
class CommandRecord:
    """
    A saved command.

    The template may hold positional placeholders (%0, %1, ...) which
    are filled from trailing arguments at run time.
    """
    name: str
    template: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "command": self.template}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CommandRecord':
        return cls(name=data["name"], template=data["command"])


class CommandStore:
    """
    Loads and saves the ordered command list.

    The store owns durability only; the runner holds the in-memory
    truth for the session.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> List[CommandRecord]:
        """
        Load the saved commands.

        Returns:
            Records in saved order (empty if nothing was saved yet)

        Raises:
            PersistenceError: If the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            logger.debug("No command store at %s, starting empty", self.path)
            return []

        try:
            data = orjson.loads(self.path.read_bytes())
        except OSError as e:
            raise PersistenceError(f"Failed to read commands from {self.path}: {e}")
        except orjson.JSONDecodeError as e:
            raise PersistenceError(f"Command store {self.path} is corrupted: {e}")

        if not isinstance(data, dict) or not isinstance(data.get("commands"), list):
            raise PersistenceError(f"Command store {self.path} has an unexpected layout.")

        try:
            records = [CommandRecord.from_dict(item) for item in data["commands"]]
        except (KeyError, TypeError) as e:
            raise PersistenceError(f"Command store {self.path} has an invalid entry: {e}")

        logger.debug("Loaded %d command(s) from %s", len(records), self.path)
        return records

    def save(self, records: Iterable[CommandRecord]) -> None:
        """
        Rewrite the full command list.

        Raises:
            PersistenceError: If the file cannot be written
        """
        payload = {
            "version": STORE_VERSION,
            "commands": [record.to_dict() for record in records],
        }

        temp_path = self.path.with_suffix('.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
            os.replace(temp_path, self.path)
        except OSError as e:
            raise PersistenceError(f"Failed to save commands to {self.path}: {e}")

        logger.debug("Saved %d command(s) to %s", len(payload["commands"]), self.path)
