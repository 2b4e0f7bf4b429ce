"""
Overlay mounting primitive: keeps at most one overlay node mounted on a fixed
layer above normal content, detached from layout flow, and reports its size
back through a SizeObserver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from tipplace.core.config import OVERLAY_POSITION, OVERLAY_Z_INDEX
from tipplace.core.observers import SizeObserver
from tipplace.core.types import Location, Size

logger = logging.getLogger(__name__)

Measure = Callable[[Any], Size]


@dataclass(frozen=True)
class OverlayNode:
    """Renderable overlay: content anchored at origin on the overlay layer."""
    content: Any
    origin: Location
    z_index: int = OVERLAY_Z_INDEX
    position: str = OVERLAY_POSITION

    @property
    def style(self) -> dict[str, Any]:
        return {
            "z_index": self.z_index,
            "position": self.position,
            "top": self.origin.y,
            "left": self.origin.x,
        }


class OverlayLayer:
    """
    Mounts, moves and unmounts the overlay node.
    measure, when given, is called with the node content on mount and whenever the
    content changes; its result is pushed to the size observer. Without it the host
    is expected to push sizes itself.
    """

    def __init__(self, measure: Measure | None = None) -> None:
        self._measure = measure
        self._node: OverlayNode | None = None
        self.mounts = 0

    @property
    def node(self) -> OverlayNode | None:
        return self._node

    @property
    def is_mounted(self) -> bool:
        return self._node is not None

    def render(self, node: OverlayNode | None, size_observer: SizeObserver) -> None:
        previous = self._node
        # Set before measuring: a size report re-enters render() with a newer node.
        self._node = node
        if node is None:
            if previous is not None:
                logger.debug("overlay unmounted")
                size_observer.bind(None)
            return
        if previous is None:
            self.mounts += 1
            logger.debug("overlay mounted at %s", node.origin)
        elif previous.content is node.content:
            logger.debug("overlay moved to %s", node.origin)
            return
        size_observer.bind(node)
        if self._measure is not None:
            size_observer.set(self._measure(node.content))
