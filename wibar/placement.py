"""
Placement Driver

Turns a wibar's edge, stretch flag and margins into a placement command for
the windowing collaborator, and re-attaches sibling bars when the layout of
a screen changes.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .margins import compute_margins
from .protocol import Edge, MaximizeAxis, PlacementOptions

if TYPE_CHECKING:
    from .bar import Wibar
    from .protocol import Placement
    from .registry import WibarRegistry

logger = logging.getLogger(__name__)


# edge -> (snap edge, axis maximized when stretched)
PLACEMENT_TABLE: Dict[Edge, Tuple[Edge, MaximizeAxis]] = {
    Edge.TOP: (Edge.TOP, MaximizeAxis.HORIZONTAL),
    Edge.BOTTOM: (Edge.BOTTOM, MaximizeAxis.HORIZONTAL),
    Edge.LEFT: (Edge.LEFT, MaximizeAxis.VERTICAL),
    Edge.RIGHT: (Edge.RIGHT, MaximizeAxis.VERTICAL),
}


class PlacementDriver:
    """Attaches wibars to their screen edge through the placement collaborator.

    Detach and attach are always direct calls. Nothing here publishes on the
    event bus, so a reattachment can never trigger another one.
    """

    def __init__(self, registry: "WibarRegistry", placement: "Placement"):
        """Initialize placement driver.

        Args:
            registry: Registry holding the stacking order
            placement: Windowing collaborator that applies geometry
        """
        self.registry = registry
        self.placement = placement

    def placement_options(self, bar: "Wibar") -> PlacementOptions:
        """Build the placement command for a bar on its current edge."""
        snap, axis = PLACEMENT_TABLE[bar.position]
        return PlacementOptions(
            edge=snap,
            margins=compute_margins(self.registry, bar),
            maximize=axis if bar.stretch else None,
            attach=True,
            update_workarea=True,
        )

    def attach(self, bar: "Wibar") -> bool:
        """Place a bar against its edge.

        Returns:
            True if the bar was placed, False if it has no screen or edge
        """
        if bar.screen is None or bar.position is None:
            logger.debug("Not attaching unplaced wibar %r", bar)
            return False

        # Never leave a previous attachment behind
        self.detach(bar)

        options = self.placement_options(bar)
        logger.debug("Attaching %r with %s", bar, options)
        bar.detach_callback = self.placement.place(bar, options)
        return True

    def detach(self, bar: "Wibar") -> bool:
        """Undo a bar's placement.

        Returns:
            True if a placement was undone, False if the bar was not attached
        """
        callback = bar.detach_callback
        if callback is None:
            return False

        # Clear first so the handle can only ever fire once
        bar.detach_callback = None
        callback()
        return True

    def reattach_screen(self, screen, exclude: Optional["Wibar"] = None):
        """Re-attach every bar on a screen so margins match the current layout.

        All bars are detached before any of them is attached again.
        """
        if screen is None:
            return

        siblings: List["Wibar"] = [
            bar for bar in self.registry.on_screen(screen) if bar is not exclude
        ]
        if not siblings:
            return

        logger.debug("Re-attaching %d wibar(s) on %r", len(siblings), screen)
        for sibling in siblings:
            self.detach(sibling)
        for sibling in siblings:
            self.attach(sibling)

    def reattach(self, bar: "Wibar"):
        """Re-attach every other bar sharing bar's screen."""
        self.reattach_screen(bar.screen, exclude=bar)
