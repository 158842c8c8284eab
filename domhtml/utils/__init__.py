"""
Utility modules for charset handling
"""

from .charset import convert_charset, lookup_charset, normalize_charset, same_charset

__all__ = [
    'convert_charset',
    'lookup_charset',
    'normalize_charset',
    'same_charset'
]
