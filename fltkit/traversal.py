"""Callbacks that steer a traversal of the record hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable


class TraversalAction(IntEnum):
    """What a traversal callback asks the traversal to do next."""

    EXIT = 0
    CONTINUE = 1
    SIBLING = 2  # in-order only: skip the node's children
    POP = 3  # skip up to the matching pop node
    UP = 4  # skip remaining siblings and return to the parent
    TRAVERSE = 5  # descend into the internals of container nodes


@dataclass
class Callback:
    """A function paired with user data, called as ``func(sysdata, data)``."""

    func: Callable[[Any, Any], int]
    data: Any = None

    def __call__(self, sysdata: Any) -> TraversalAction:
        """Invoke the function; raises ValueError for an unknown action."""
        return TraversalAction(self.func(sysdata, self.data))