"""
HTML document wrapper with a deletion-safe tree iterator
"""

from .config import DocumentConfig
from .dom import DomTreeIterator, HtmlDocument, TraversalFrame, TraversalState
from .errors import CharsetError, DomHtmlError, ErrorType, ParsingError, TraversalStateError

__all__ = [
    'CharsetError',
    'DocumentConfig',
    'DomHtmlError',
    'DomTreeIterator',
    'ErrorType',
    'HtmlDocument',
    'ParsingError',
    'TraversalFrame',
    'TraversalState',
    'TraversalStateError'
]
