"""
Visibility and measurement coordinator for a single tooltip.

Tracks hover to decide visibility, mounts the overlay off screen until its size is
known, then places it with compute_origin. Phases: hidden -> measuring -> visible.
ViewportTooSmall from the engine is not caught here.
See: docs/ALGORITHM.md (coordinator).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

from tipplace.core.config import OFF_SCREEN_X, OFF_SCREEN_Y, OVERLAY_Z_INDEX
from tipplace.core.memo import Memo
from tipplace.core.observers import BoxObserver, HoverObserver, SizeObserver, ViewportObserver
from tipplace.core.placement import compute_origin
from tipplace.core.portal import OverlayLayer, OverlayNode
from tipplace.core.types import Location, Phase, TooltipConfig

logger = logging.getLogger(__name__)

OFF_SCREEN = Location(OFF_SCREEN_X, OFF_SCREEN_Y)

ContentProvider = Callable[[], Any]
VisibleUpdate = Union[bool, Callable[[bool], bool]]


class TooltipCoordinator:
    """
    Owns the visibility flag and drives the overlay layer.

    Observers that are not supplied are created with their defaults, so a missing
    hover observer simply never shows the tooltip and a missing viewport observer
    falls back to the default viewport size.
    """

    def __init__(
        self,
        content_provider: ContentProvider,
        config: TooltipConfig | None = None,
        *,
        hover: HoverObserver | None = None,
        trigger_box: BoxObserver | None = None,
        overlay_size: SizeObserver | None = None,
        viewport: ViewportObserver | None = None,
        layer: OverlayLayer | None = None,
    ) -> None:
        self.config = config or TooltipConfig()
        self._content_provider = content_provider
        self._hover = hover or HoverObserver()
        self._box = trigger_box or BoxObserver()
        self._size = overlay_size or SizeObserver()
        self._viewport = viewport or ViewportObserver()
        self._layer = layer or OverlayLayer()

        self._visible = False
        self._phase: Phase = "hidden"
        self._origin = OFF_SCREEN
        self._node: OverlayNode | None = None

        self._content_memo: Memo[Any] = Memo()
        self._origin_memo: Memo[Location] = Memo()
        self._node_memo: Memo[OverlayNode] = Memo()

        self._unsubscribe = [
            self._hover.subscribe(self._on_hover),
            self._box.subscribe(self._on_change),
            self._size.subscribe(self._on_change),
            self._viewport.subscribe(self._on_change),
        ]
        self._on_hover(self._hover.value)

    # ----- public contract -----

    def ref(self, target: Any) -> None:
        """Bind the trigger element (hover and bounding box). ref(None) detaches."""
        self._hover.bind(target)
        self._box.bind(target)

    @property
    def node(self) -> OverlayNode | None:
        """Overlay node for the current state; None while hidden."""
        return self._node

    @property
    def is_visible(self) -> bool:
        return self._visible

    def set_visible(self, value: VisibleUpdate) -> None:
        """Set the flag directly, or pass a function of the previous flag."""
        if callable(value):
            value = value(self._visible)
        self._set_visible(bool(value))

    def snapshot(self) -> tuple[Callable[[Any], None], OverlayNode | None, Callable[[VisibleUpdate], None], bool]:
        """(ref, node, set_visible, is_visible) for the current state."""
        return self.ref, self._node, self.set_visible, self._visible

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def origin(self) -> Location:
        """Where the overlay is (or would be) mounted."""
        return self._origin

    def set_content_provider(self, content_provider: ContentProvider) -> None:
        self._content_provider = content_provider
        self._refresh()

    def set_config(self, config: TooltipConfig) -> None:
        """Replace config; hover rules are re-applied to the current hover state."""
        self.config = config
        self._on_hover(self._hover.value)
        self._refresh()

    def close(self) -> None:
        """Stop observing and unmount the overlay."""
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
        self._visible = False
        self._refresh()

    # ----- internals -----

    def _on_hover(self, is_hover: bool) -> None:
        if self.config.show_on_hover and is_hover:
            self._set_visible(True)
            return
        if self.config.hide_on_no_hover and not is_hover:
            self._set_visible(False)
            return

    def _on_change(self, _value: Any) -> None:
        self._refresh()

    def _set_visible(self, value: bool) -> None:
        if value != self._visible:
            logger.debug("tooltip visible=%s", value)
        self._visible = value
        self._refresh()

    def _set_phase(self, phase: Phase) -> None:
        if phase != self._phase:
            logger.debug("tooltip phase %s -> %s", self._phase, phase)
        self._phase = phase

    def _place(self) -> Location:
        trigger_box = self._box.value
        content_size = self._size.value
        viewport_size = self._viewport.value
        margin = self.config.margin
        return self._origin_memo(
            lambda: compute_origin(trigger_box, content_size, viewport_size, margin),
            (trigger_box, content_size, viewport_size, margin),
        )

    def _refresh(self) -> None:
        content = self._content_memo(self._content_provider, (self._content_provider,))

        node: OverlayNode | None
        if not self._visible:
            self._set_phase("hidden")
            node = None
        else:
            if self._size.value.is_zero:
                self._set_phase("measuring")
                self._origin = OFF_SCREEN
            else:
                self._origin = self._place()
                self._set_phase("visible")
            origin = self._origin
            node = self._node_memo(
                lambda: OverlayNode(content=content, origin=origin, z_index=OVERLAY_Z_INDEX),
                (content, origin),
            )

        if node is self._node:
            return
        self._node = node
        self._layer.render(node, self._size)


def use_tooltip(
    content_provider: ContentProvider,
    config: TooltipConfig | None = None,
    **observers: Any,
) -> TooltipCoordinator:
    """Build a coordinator; unpack coordinator.snapshot() for (ref, node, set_visible, is_visible)."""
    return TooltipCoordinator(content_provider, config, **observers)
