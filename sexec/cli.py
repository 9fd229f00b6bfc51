"""
CLI -- Runner and entry point for se

One dispatch path serves both surfaces:
- One-shot: se <action-or-target> [args...]
- Interactive: se (no arguments) opens a REPL

Dispatch:
- First token names an action (or alias) -> handler gets the rest
- Anything else -> "run" with the whole token list, so "se 3 foo"
  and "se deploy" run saved commands directly
- Handler errors are printed and never end the process
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .commands import Action, get_action
from .commands.list_cmd import ListCommand
from .commands.manage_cmd import ManageCommand
from .commands.run_cmd import RunCommand
from .config import ConfigManager, DEFAULT_PROMPT
from .content import TITLE
from .core.resolver import ResolveStatus, resolve_target
from .core.store import CommandStore
from .core.tokenizer import string_to_arguments
from .errors import (
    SeError, NoActionError, MissingTargetError, NotFoundError, OutOfRangeError, PersistenceError,
)
from .presentation.symbols import SymbolSet, get_symbols
from .services.line_input import LineEditor
from .services.shell import ShellExecutor

logger = logging.getLogger(__name__)


class ShortcutRunner:
    """
    Owns the command list for the session and dispatches actions on it.

    The list is loaded once from the store at construction and written
    back in full after every successful change.
    """

    def __init__(
        self,
        store: CommandStore,
        editor: LineEditor,
        shell: Optional[ShellExecutor] = None,
        symbols: Optional[SymbolSet] = None,
        prompt: str = DEFAULT_PROMPT,
    ):
        """
        Args:
            store: Persistence for the command list
            editor: Line input for prompts (entered by the caller)
            shell: Executor for "run" (default: system shell)
            symbols: Display markers (default: auto-detect)
            prompt: REPL prompt text

        Raises:
            PersistenceError: If the saved list cannot be loaded
        """
        self.store = store
        self.editor = editor
        self.shell = shell or ShellExecutor()
        self.symbols = symbols or get_symbols()
        self.prompt = prompt

        self.commands = store.load()

        self._manage_cmd = ManageCommand(self)
        self._run_cmd = RunCommand(self)
        self._list_cmd = ListCommand(self)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def get_command_index(self, args: Sequence[str], interactive: bool) -> int:
        """
        Resolve args[0] (1-based position or exact name) to a 0-based index.

        Raises:
            MissingTargetError: No reference given
            NotFoundError: Name not in the list
            OutOfRangeError: Position outside the list (including 0)
        """
        result = resolve_target(self.commands, args[0] if args else None)

        if result.found:
            return result.index
        if result.status == ResolveStatus.MISSING:
            raise MissingTargetError()
        if result.status == ResolveStatus.NOT_FOUND:
            raise NotFoundError(result.query, interactive, result.suggestions)
        raise OutOfRangeError(result.query, interactive)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def exec_from_args(self, args: Sequence[str], interactive: bool):
        """
        Dispatch one tokenized invocation.

        Raises:
            NoActionError: Empty input
            SeError: Whatever the handler raises
        """
        if not args or not args[0]:
            raise NoActionError()

        action = get_action(args[0])

        if action is None:
            logger.debug("No action %r, falling back to run", args[0])
            action = Action.RUN
            extra_args = list(args)
        else:
            extra_args = list(args[1:])

        self._invoke(action, extra_args, interactive)

    def _invoke(self, action: Action, args: List[str], interactive: bool):
        if action == Action.ADD:
            self._manage_cmd.add(args, interactive)
        elif action == Action.DEL:
            self._manage_cmd.delete(args, interactive)
        elif action == Action.EDIT:
            self._manage_cmd.edit(args, interactive)
        elif action == Action.VIEW:
            self._list_cmd.view(args, interactive)
        elif action == Action.MOVE:
            self._manage_cmd.move(args, interactive)
        elif action == Action.RUN:
            self._run_cmd.run(args, interactive)
        elif action == Action.HELP:
            self._list_cmd.help(args, interactive)
        elif action == Action.LIST:
            self._list_cmd.list_commands(args, interactive)

    def process_args(self, args: Sequence[str], interactive: bool):
        """Dispatch and report any error. Never raises SeError."""
        try:
            self.exec_from_args(args, interactive)
        except SeError as e:
            print(f"\nError: {e.message}")

    # -------------------------------------------------------------------------
    # Surfaces
    # -------------------------------------------------------------------------

    def title(self):
        print(TITLE.format(version=__version__))

    def run_args(self, args: Sequence[str]):
        """One-shot mode: dispatch a single invocation."""
        self.title()
        self.process_args(args, interactive=False)

    def show_runner(self):
        """
        Interactive mode: read, dispatch, repeat.

        Stops on "exit" or end of input. Ctrl-C at the prompt discards the
        current line; during an action it abandons that action.
        """
        self.title()

        while True:
            print()

            try:
                line = self.editor.read_command_line(self.prompt)
            except KeyboardInterrupt:
                print()
                continue
            except EOFError:
                print()
                break

            args = string_to_arguments(line.strip())

            if args and args[0] == "exit":
                break

            try:
                self.process_args(args, interactive=True)
            except KeyboardInterrupt:
                # Ctrl-C during an action drops that action only
                print()


# =============================================================================
# Entry point
# =============================================================================

# Leading options belong to se; everything from the first other token on
# is passed to the runner untouched (so "-h", "-v" reach the alias table).
OPTIONS_WITH_VALUE = ('--store', '--config')
OPTION_FLAGS = ('--show-config', '--version', '--help')


def _split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate leading se options from runner tokens."""
    options: List[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == '--':
            i += 1
            break
        name = token.split('=', 1)[0]
        if name in OPTIONS_WITH_VALUE:
            options.append(token)
            if '=' not in token and i + 1 < len(argv):
                options.append(argv[i + 1])
                i += 1
        elif token in OPTION_FLAGS:
            options.append(token)
        else:
            break
        i += 1
    return options, list(argv[i:])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='se',
        usage='se [--store PATH] [--config PATH] [--show-config] <action-or-command> [args ...]',
        description="se -- Save, list and run shell command shortcuts",
        epilog="Run 'se help' for actions. Run 'se' alone for the interactive shell.",
        add_help=False,
    )
    parser.add_argument('--help', action='help', help='Show this message and exit')
    parser.add_argument(
        '--store',
        default=None,
        help='Command store file (default: store.path from config, or ~/.se/commands.json)'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Config file (default: SE_CONFIG or ~/.se/config.yaml)'
    )
    parser.add_argument(
        '--show-config',
        action='store_true',
        help='Print the effective configuration and exit'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'se {__version__}'
    )
    return parser


def _configure_logging():
    """Diagnostics go to stderr; SE_DEBUG=1 turns on debug tracing."""
    debug = os.environ.get('SE_DEBUG', '').lower() in ('1', 'true', 'yes')
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for se.

    Returns:
        0 normally (handler errors are reported, not propagated);
        1 if configuration or the command store cannot be loaded
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    options, tokens = _split_argv(argv)
    args = _build_parser().parse_args(options)

    _configure_logging()

    manager = ConfigManager(Path(args.config) if args.config else None)
    config = manager.load()
    if args.store:
        config.store.path = args.store

    error = config.validate()
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if args.show_config:
        print(manager.display())
        return 0

    store = CommandStore(config.store.resolved_path)
    shell = ShellExecutor(config.execution.shell)
    symbols = get_symbols(config.display.symbols)

    with LineEditor(config.repl.resolved_history_file, config.repl.history_length) as editor:
        try:
            runner = ShortcutRunner(store, editor, shell, symbols, prompt=config.repl.prompt)
        except PersistenceError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

        if tokens:
            runner.run_args(tokens)
        else:
            runner.show_runner()

    return 0


if __name__ == '__main__':
    sys.exit(main())
