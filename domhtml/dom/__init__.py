"""
HTML document wrapper and tree traversal
"""

from .document import HtmlDocument
from .traversal_frame import TraversalFrame
from .tree_iterator import DomTreeIterator, TraversalState

__all__ = [
    'DomTreeIterator',
    'HtmlDocument',
    'TraversalFrame',
    'TraversalState'
]
