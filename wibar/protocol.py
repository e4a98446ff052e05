"""
Wibar Geometry Types and Collaborator Interfaces

This module provides the data types shared by the wibar core and the
interfaces it expects from the host: a placement collaborator that docks a
surface against a screen edge, and screens with a known geometry.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

from .errors import InvalidPositionError

if TYPE_CHECKING:
    from .bar import Wibar


DetachHandle = Callable[[], None]


class MaximizeAxis(Enum):
    """Axis along which a stretched bar is maximized."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Edge(str, Enum):
    """Screen edge a bar is docked against."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Any) -> "Edge":
        """Convert a string or Edge into an Edge.

        Raises:
            InvalidPositionError: if value is not one of the four edges
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidPositionError(value) from None

    @property
    def is_vertical(self) -> bool:
        """Whether bars on this edge run along the screen height."""
        return self in (Edge.LEFT, Edge.RIGHT)

    @property
    def extent(self) -> str:
        """Name of the dimension a bar on this edge occupies from the edge."""
        return "width" if self.is_vertical else "height"

    @property
    def perpendicular(self) -> str:
        """Name of the dimension a bar on this edge spans along the edge."""
        return "height" if self.is_vertical else "width"

    def __str__(self) -> str:
        return self.value


@dataclass
class Margins:
    """Space reserved by sibling bars around a bar's placement."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0

    def __getitem__(self, edge) -> int:
        return getattr(self, Edge.parse(edge).value)

    def __setitem__(self, edge, value: int):
        setattr(self, Edge.parse(edge).value, value)


@dataclass
class Dimensions:
    """Dimensions in logical coordinate space."""

    width: int = 0
    height: int = 0


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(eq=False)
class Screen:
    """A monitor bars can be docked to.

    Screens compare by identity, two monitors with the same geometry are
    still different screens.
    """

    name: str
    area: Area

    @property
    def geometry(self) -> Dimensions:
        return Dimensions(self.area.width, self.area.height)


@dataclass
class PlacementOptions:
    """A single placement command handed to the placement collaborator.

    The bar is snapped to ``edge`` and, when ``maximize`` is set, maximized
    along that axis. ``margins`` is the space taken by sibling bars.
    """

    edge: Edge
    margins: Margins
    maximize: Optional[MaximizeAxis] = None
    attach: bool = True
    update_workarea: bool = True


class Placement(Protocol):
    """Windowing collaborator that applies bar geometry.

    ``place`` returns a handle undoing the attachment and its workarea
    reservation, or None when nothing needs undoing.
    """

    def place(
        self, bar: "Wibar", options: PlacementOptions
    ) -> Optional[DetachHandle]: ...
