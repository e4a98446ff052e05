"""
Wibar Margin Calculation

Margins are recomputed from the currently visible sibling bars every time a
bar is attached. Nothing is cached, so a margin can never go stale.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .protocol import Edge, Margins

if TYPE_CHECKING:
    from .bar import Wibar
    from .registry import WibarRegistry


def compute_margin(
    registry: "WibarRegistry", bar: "Wibar", edge, stop_at_self: bool = False
) -> int:
    """Space taken on one edge of bar's screen by other visible bars.

    Args:
        registry: Registry holding the stacking order
        bar: Bar the margin is computed for
        edge: Edge to sum up
        stop_at_self: Only count bars registered before ``bar``

    Returns:
        Sum of the extents of the matching bars
    """
    edge = Edge.parse(edge)
    total = 0

    for other in registry:
        if other is bar:
            # Bars registered after this one stack outward from it
            if stop_at_self:
                break
            continue

        if other.position is edge and other.screen == bar.screen and other.visible:
            total += getattr(other, edge.extent) or 0

    return total


def compute_margins(registry: "WibarRegistry", bar: "Wibar") -> Margins:
    """Full margin set for a bar on its current edge.

    Left and right bars are inset by every top and bottom bar. Top and bottom
    bars are never inset by left and right bars.
    """
    position = bar.position
    if position is None:
        raise ValueError("Cannot compute margins for a wibar without a position")

    margins = Margins()
    margins[position] = compute_margin(registry, bar, position, stop_at_self=True)

    # Avoid overlapping wibars
    if position.is_vertical:
        margins.top = compute_margin(registry, bar, Edge.TOP)
        margins.bottom = compute_margin(registry, bar, Edge.BOTTOM)

    return margins
