"""
Core — Command records, storage, reference resolution and tokenizing
"""

from .store import CommandRecord, CommandStore
from .resolver import ResolveStatus, ResolveResult, resolve_target, parse_position
from .tokenizer import string_to_arguments, escape_string

__all__ = [
    'CommandRecord', 'CommandStore',
    'ResolveStatus', 'ResolveResult', 'resolve_target', 'parse_position',
    'string_to_arguments', 'escape_string',
]
