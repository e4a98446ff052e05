"""
Wibar Registry

Ordered collection of all live wibars. The order is the stacking order:
among bars on the same screen and edge, a later bar sits further from the
screen edge than an earlier one.
"""

from __future__ import annotations
import weakref
from typing import TYPE_CHECKING, Callable, Iterator, List

if TYPE_CHECKING:
    from .bar import Wibar


class WibarRegistry:
    """Weakly held, ordered set of wibars.

    A bar that is garbage collected silently drops out of the registry.
    Iteration always walks a snapshot, so the registry may be mutated while
    it is being iterated.
    """

    def __init__(self):
        self._refs: List[weakref.ref] = []

    def _prune(self):
        self._refs = [ref for ref in self._refs if ref() is not None]

    def snapshot(self) -> List["Wibar"]:
        """Live bars in stacking order."""
        bars = [ref() for ref in self._refs]
        if any(bar is None for bar in bars):
            self._prune()
        return [bar for bar in bars if bar is not None]

    def __iter__(self) -> Iterator["Wibar"]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self.snapshot())

    def __contains__(self, bar) -> bool:
        return any(ref() is bar for ref in self._refs)

    def add(self, bar: "Wibar"):
        """Append a bar. A bar already present keeps its place."""
        if bar not in self:
            self._refs.append(weakref.ref(bar))

    def remove(self, bar: "Wibar"):
        """Remove every occurrence of a bar."""
        self._refs = [ref for ref in self._refs if ref() is not bar]
        self._prune()

    def move_to_end(self, bar: "Wibar"):
        """Move a bar to the outermost stacking slot."""
        self.remove(bar)
        self._refs.append(weakref.ref(bar))

    def on_screen(self, screen) -> List["Wibar"]:
        """Bars on a screen in stacking order."""
        return [bar for bar in self.snapshot() if bar.screen == screen]

    def for_each_on_screen(self, screen, fn: Callable[["Wibar"], None]):
        """Call fn for every bar on a screen, in stacking order."""
        for bar in self.on_screen(screen):
            fn(bar)
