"""
Wibar

A bar docked against one edge of a screen. Bars are created through
WibarManager.create() and share the manager's registry and placement driver.

Lifecycle: unattached -> attached -> removed. A removed bar is inert: it
keeps its last size and edge but is never placed again.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from . import topics
from .protocol import Edge

if TYPE_CHECKING:
    from .fonts import FontDescription
    from .manager import WibarManager
    from .protocol import DetachHandle

logger = logging.getLogger(__name__)


class Wibar:
    """A screen-edge docked bar."""

    def __init__(
        self,
        manager: "WibarManager",
        screen,
        width: Optional[int],
        height: Optional[int],
        stretch: bool,
        visible: bool = True,
        font: Optional["FontDescription"] = None,
        options: Optional[Dict[str, Any]] = None,
    ):
        """Initialize wibar state. The bar is not registered or placed yet.

        Args:
            manager: Service owning the registry and placement driver
            screen: Screen the bar is docked to
            width: Resolved width
            height: Resolved height
            stretch: Fill the screen along the edge
            visible: Initial visibility
            font: Font the default thickness derives from
            options: Opaque options for the placement collaborator
        """
        self._manager = manager
        self._screen = screen
        self._position: Optional[Edge] = None
        self._width = width
        self._height = height
        self._stretch = stretch
        self._visible = visible
        self.font = font
        self.options: Dict[str, Any] = dict(options or {})
        self.detach_callback: Optional["DetachHandle"] = None

    def __repr__(self) -> str:
        screen = getattr(self._screen, "name", self._screen)
        return f"<Wibar {self._position} on {screen} at 0x{id(self):x}>"

    # Position

    def get_position(self) -> Edge:
        """The edge the bar is docked against, top when not set yet."""
        return self._position or Edge.TOP

    def set_position(self, position):
        """Move the bar to another edge.

        Raises:
            InvalidPositionError: if position is not a valid edge
        """
        edge = Edge.parse(position)
        manager = self._manager
        driver = manager.driver
        previous = self._position

        # Detach first to avoid any stale placement while moving
        driver.detach(self)

        if previous is not None:
            # Moved bars stack outermost so they never push existing siblings
            if self._screen is not None:
                manager.registry.move_to_end(self)

            # The extent axis changed, fall back to the default thickness
            if previous.is_vertical != edge.is_vertical:
                thickness = manager.default_thickness(self.font)
                if edge.is_vertical:
                    self._width = thickness
                else:
                    self._height = thickness

        self._position = edge

        # Siblings must see the bar at its new edge before it is placed
        driver.reattach(self)
        driver.attach(self)

        if previous is not None and previous is not edge:
            logger.debug("Moved %r from %s", self, previous)
            manager.publish(
                topics.WIBAR_POSITION_CHANGED,
                wibar=self,
                position=edge,
                previous=previous,
            )

    @property
    def position(self) -> Edge:
        return self.get_position()

    @position.setter
    def position(self, value):
        self.set_position(value)

    # Stretch

    def get_stretch(self) -> bool:
        return self._stretch

    def set_stretch(self, value: bool):
        """Fill (or stop filling) the screen along the bar's edge."""
        self._stretch = bool(value)

        # Stretching does not change the space taken from siblings
        self._manager.driver.attach(self)

    @property
    def stretch(self) -> bool:
        return self.get_stretch()

    @stretch.setter
    def stretch(self, value: bool):
        self.set_stretch(value)

    # Visibility

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool):
        value = bool(value)
        if value == self._visible:
            return

        self._visible = value

        # Hidden bars reserve no space
        self._manager.driver.reattach(self)
        self._manager.publish(
            topics.WIBAR_VISIBILITY_CHANGED, wibar=self, visible=value
        )

    # Size

    @property
    def width(self) -> Optional[int]:
        return self._width

    @width.setter
    def width(self, value):
        self._set_size("width", value)

    @property
    def height(self) -> Optional[int]:
        return self._height

    @height.setter
    def height(self, value):
        self._set_size("height", value)

    def _set_size(self, dimension: str, value):
        attr = "_" + dimension
        if value is not None:
            value = self._manager.resolve_size(self._screen, dimension, value)
        if value == getattr(self, attr):
            return

        setattr(self, attr, value)
        self._manager.driver.reattach(self)

    # Screen

    @property
    def screen(self):
        return self._screen

    @screen.setter
    def screen(self, screen):
        self.set_screen(screen)

    def set_screen(self, screen):
        """Dock the bar to another screen, keeping its edge."""
        if screen is None:
            raise ValueError("Use remove() to take a wibar off its screen")
        if self._screen is None:
            raise ValueError(f"Cannot move removed wibar {self!r}")

        old_screen = self._screen
        if screen == old_screen:
            return

        manager = self._manager
        driver = manager.driver

        driver.detach(self)
        self._screen = screen
        manager.registry.move_to_end(self)

        # Both screens lose or gain the bar's reserved space
        driver.reattach_screen(old_screen, exclude=self)
        driver.reattach(self)
        driver.attach(self)
        logger.debug("Moved %r from screen %r", self, old_screen)

    # Removal

    @property
    def removed(self) -> bool:
        return self._screen is None

    def remove(self):
        """Hide the bar, undo its placement and forget it. Safe to call twice."""
        was_live = self._screen is not None

        self.visible = False
        self._manager.driver.detach(self)
        self._manager.registry.remove(self)
        self._screen = None

        if was_live:
            logger.debug("Removed %r", self)
            self._manager.publish(topics.WIBAR_REMOVED, wibar=self)
