from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class TraversalFrame:
    """One entry of the traversal stack: a live child list and a cursor into it"""
    siblings: List[Any]
    cursor: int
    children_pushed: bool = False
    node: Optional[Any] = None

    def __post_init__(self):
        if self.node is None and 0 <= self.cursor < len(self.siblings):
            self.node = self.siblings[self.cursor]

    @classmethod
    def at_last(cls, siblings: List[Any]) -> 'TraversalFrame':
        """Frame positioned on the last entry of a child list"""
        return cls(siblings=siblings, cursor=len(siblings) - 1)

    def addresses_node(self) -> bool:
        """Whether the recorded node still sits at the cursor position"""
        return (0 <= self.cursor < len(self.siblings)
                and self.siblings[self.cursor] is self.node)

    def step_back(self) -> bool:
        """Move to the previous sibling, returning False when the list is exhausted"""
        self.cursor -= 1
        self.children_pushed = False
        if self.cursor < 0:
            self.node = None
            return False
        self.node = self.siblings[self.cursor]
        return True
