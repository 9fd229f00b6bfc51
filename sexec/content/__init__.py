"""
Content — Static text content for CLI display

Separates presentation text from logic.
"""

from .help_text import HELP_TEXT, TITLE, render_help

__all__ = ['HELP_TEXT', 'TITLE', 'render_help']
