"""
Line Editor — Interactive line input with history and pre-filled text

Wraps GNU readline when available:
- History is loaded on enter and written back on exit (even on error)
- read_line() can pre-fill the input buffer for editing
Without readline, the current value is shown in brackets and an empty
answer keeps it.
"""

import logging
from pathlib import Path
from typing import Optional

try:
    import readline  # type: ignore
except ImportError:  # Windows without pyreadline
    readline = None  # type: ignore

from ..errors import AbortedError

logger = logging.getLogger(__name__)


class LineEditor:
    """
    Scoped line-input resource.

    Usage:
        with LineEditor(history_file) as editor:
            name = editor.read_line("Name: ", initial="deploy")
    """

    def __init__(self, history_file: Optional[Path] = None, history_length: int = 1000):
        self.history_file = Path(history_file) if history_file else None
        self.history_length = history_length

    def __enter__(self):
        self._load_history()
        return self

    def __exit__(self, *args):
        self._save_history()

    def _load_history(self):
        if readline is None:
            return
        readline.set_history_length(self.history_length)
        if self.history_file and self.history_file.exists():
            try:
                readline.read_history_file(str(self.history_file))
            except OSError as e:
                logger.debug("Could not read history %s: %s", self.history_file, e)

    def _save_history(self):
        if readline is None or self.history_file is None:
            return
        try:
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
            readline.write_history_file(str(self.history_file))
        except OSError as e:
            logger.debug("Could not write history %s: %s", self.history_file, e)

    def read_command_line(self, prompt: str) -> str:
        """
        Read a REPL line.

        EOFError and KeyboardInterrupt propagate so the loop decides
        whether to stop or re-prompt.
        """
        return input(prompt)

    def read_line(self, prompt: str, initial: str = "") -> str:
        """
        Read a line inside an action, optionally pre-filled.

        Raises:
            AbortedError: If the user pressed Ctrl-C or Ctrl-D
        """
        if initial and readline is None:
            return self._read_with_default(prompt, initial)

        if initial:
            readline.set_startup_hook(lambda: readline.insert_text(initial))
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            raise AbortedError("Input aborted.")
        finally:
            if readline is not None:
                readline.set_startup_hook(None)

    def _read_with_default(self, prompt: str, initial: str) -> str:
        """No pre-fill available: show the current value, empty keeps it."""
        label = prompt.rstrip()
        if label.endswith(":"):
            label = label[:-1]
        try:
            answer = input(f"{label} [{initial}]: ")
        except (EOFError, KeyboardInterrupt):
            print()
            raise AbortedError("Input aborted.")
        return answer if answer else initial
