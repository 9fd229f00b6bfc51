"""
Services — Boundaries to the terminal and the operating system
"""

from .shell import ShellExecutor
from .line_input import LineEditor

__all__ = ['ShellExecutor', 'LineEditor']
