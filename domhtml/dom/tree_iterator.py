"""
Depth-first traversal over a parsed HTML document.

The document itself is produced first, then every node in pre-order. Each
sibling list is walked from its last entry to its first, so the node that
was just produced (and any node produced before it) can be removed from
the tree without disturbing the rest of the walk. Siblings that have not
been visited yet must not be removed or reordered.
"""

import logging
from enum import Enum
from typing import Any, List

from bs4 import BeautifulSoup, Tag

from ..errors import TraversalStateError
from .traversal_frame import TraversalFrame

logger = logging.getLogger(__name__)


class TraversalState(Enum):
    NOT_STARTED = "not_started"
    AT_ROOT = "at_root"
    DESCENDING = "descending"
    FINISHED = "finished"


def _has_children(node: Any) -> bool:
    return isinstance(node, Tag) and bool(node.contents)


class DomTreeIterator:
    """Pre-order, reverse-sibling, deletion-safe iterator over a document tree"""

    def __init__(self, document: BeautifulSoup):
        self.document = document
        self.state = TraversalState.NOT_STARTED
        self.position = -1
        self._stack: List[TraversalFrame] = []
        self._unyielded = False

    @property
    def has_current(self) -> bool:
        return self.state in (TraversalState.AT_ROOT, TraversalState.DESCENDING)

    @property
    def current(self) -> Any:
        """The document while at the root, otherwise the node under the top frame"""
        if self.state == TraversalState.AT_ROOT:
            return self.document
        if self.state == TraversalState.DESCENDING:
            # same as siblings[cursor] unless the caller detached the node
            return self._stack[-1].node
        raise TraversalStateError(f"No current node in state {self.state.value}")

    @property
    def depth(self) -> int:
        """Number of frames between the document and the current node"""
        return len(self._stack)

    def reset(self):
        """(Re)start the traversal at the document"""
        self._stack = []
        self.position = 0
        self.state = TraversalState.AT_ROOT
        self._unyielded = True

    def advance(self):
        """Move to the next node, or to FINISHED when none are left"""
        self._unyielded = False
        if self.state == TraversalState.AT_ROOT:
            if _has_children(self.document):
                self._stack.append(TraversalFrame.at_last(self.document.contents))
                self.state = TraversalState.DESCENDING
                self.position += 1
            else:
                self._finish()
            return

        if self.state != TraversalState.DESCENDING:
            raise TraversalStateError(f"Cannot advance in state {self.state.value}")

        frame = self._stack[-1]
        # A detached node leaves a later (already visited) sibling or nothing in
        # its slot; only descend while the recorded node is still there.
        if (not frame.children_pushed and frame.addresses_node()
                and _has_children(frame.node)):
            frame.children_pushed = True
            self._stack.append(TraversalFrame.at_last(frame.node.contents))
            self.position += 1
            return

        while self._stack:
            if self._stack[-1].step_back():
                self.position += 1
                return
            self._stack.pop()

        self._finish()

    def _finish(self):
        self._stack = []
        self.state = TraversalState.FINISHED
        logger.debug(f"Traversal finished after {self.position + 1} nodes")

    def __iter__(self):
        return self

    def __next__(self):
        if self.state == TraversalState.NOT_STARTED:
            self.reset()

        if self._unyielded:
            self._unyielded = False
        elif self.state == TraversalState.FINISHED:
            raise StopIteration
        else:
            self.advance()

        if not self.has_current:
            raise StopIteration
        return self.current
