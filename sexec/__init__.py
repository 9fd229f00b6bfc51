"""
se — Saved shell command shortcuts

Save a command once, run it by name or number from then on.

Usage:
    se add deploy            Prompt for the template and save it
    se list                  Show saved commands with their positions
    se deploy staging        Run "deploy", %0 -> deploy, %1 -> staging
    se 2 foo bar             Run command #2, %1 -> foo, %2 -> bar
    se                       Open the interactive shell
"""

__version__ = "0.1.0"

# Core layer (data)
from .core.store import CommandRecord, CommandStore
from .core.resolver import ResolveStatus, ResolveResult, resolve_target
from .core.tokenizer import string_to_arguments, escape_string

# Errors
from .errors import (
    SeError, NoActionError, MissingTargetError, NotFoundError, OutOfRangeError,
    DuplicateNameError, InvalidNameError, InvalidNumberError, AbortedError,
    ExecutionError, PersistenceError,
)

# Config
from .config import Config, ConfigManager, get_config

__all__ = [
    # Core
    'CommandRecord', 'CommandStore',
    'ResolveStatus', 'ResolveResult', 'resolve_target',
    'string_to_arguments', 'escape_string',
    # Errors
    'SeError', 'NoActionError', 'MissingTargetError', 'NotFoundError', 'OutOfRangeError',
    'DuplicateNameError', 'InvalidNameError', 'InvalidNumberError', 'AbortedError',
    'ExecutionError', 'PersistenceError',
    # Config
    'Config', 'ConfigManager', 'get_config',
]
