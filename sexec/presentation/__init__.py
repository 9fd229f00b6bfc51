"""
Presentation — Display markers and encoding-safe output
"""

from .symbols import SymbolSet, UNICODE, ASCII, get_symbols, safe_print, supports_unicode

__all__ = ['SymbolSet', 'UNICODE', 'ASCII', 'get_symbols', 'safe_print', 'supports_unicode']
