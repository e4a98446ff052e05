"""
Wibar Manager

Service object owning the wibar registry and placement driver. It creates
wibars, resolves their default sizes and removes them when their screen goes
away.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, List, Optional

from pubsub import pub

from . import topics
from .bar import Wibar
from .config import WibarConfig
from .errors import InvalidSizeError
from .fonts import FontDescription, cairo_font_height, default_thickness
from .placement import PlacementDriver
from .protocol import Dimensions, Edge, Placement
from .registry import WibarRegistry
from .sizing import parse_percentage, resolve_size

logger = logging.getLogger(__name__)


def _default_screen_geometry(screen) -> Dimensions:
    return screen.geometry


class WibarManager:
    """Creates and tracks wibars.

    This component subscribes to SCREEN_REMOVED and publishes wibar lifecycle
    notifications (WIBAR_CREATED, WIBAR_REMOVED, WIBAR_POSITION_CHANGED,
    WIBAR_VISIBILITY_CHANGED).

    Responsibilities:
    - Validate and default creation arguments
    - Own the registry (stacking order) and placement driver
    - Remove every wibar of a screen that is disconnected
    """

    def __init__(
        self,
        placement: Placement,
        bus=pub,
        config: Optional[WibarConfig] = None,
        primary_screen=None,
        get_screen_geometry_fn: Optional[Callable] = None,
        font_height_fn: Optional[Callable] = None,
    ):
        """Initialize wibar manager.

        Args:
            placement: Windowing collaborator that applies bar geometry
            bus: Event bus instance (Pypubsub)
            config: Defaults for new bars
            primary_screen: Screen used when create() gets no screen
            get_screen_geometry_fn: Function returning a screen's Dimensions
            font_height_fn: Function returning the pixel height of a font
        """
        self.bus = bus
        self.config = config or WibarConfig()
        self.primary_screen = primary_screen
        self._get_screen_geometry = get_screen_geometry_fn or _default_screen_geometry
        self._font_height = font_height_fn or cairo_font_height

        self.registry = WibarRegistry()
        self.driver = PlacementDriver(self.registry, placement)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events WibarManager cares about."""
        self.bus.subscribe(self._on_screen_removed, topics.SCREEN_REMOVED)

        if self.config.debug_events:
            self.bus.subscribe(self.debug_event_logger, self.bus.ALL_TOPICS)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        logger.debug("[%s] EVENT: %s | %s", timestamp, topic.getName(), data_str)

    def publish(self, topic: str, **kwargs):
        """Publish a notification on the event bus."""
        self.bus.sendMessage(topic, **kwargs)

    @property
    def placement(self) -> Placement:
        return self.driver.placement

    @property
    def bars(self) -> List[Wibar]:
        """Live wibars in stacking order."""
        return self.registry.snapshot()

    # Sizing

    def default_thickness(self, font=None) -> int:
        """Default bar thickness derived from the font height."""
        font = FontDescription.parse(font) if font is not None else self.config.font
        return default_thickness(self._font_height(font), self.config.size_factor)

    def screen_geometry(self, screen) -> Dimensions:
        return self._get_screen_geometry(screen)

    def resolve_size(self, screen, dimension: str, value) -> int:
        """Resolve a width or height, percentages relative to the screen."""
        if parse_percentage(value) is not None:
            if screen is None:
                raise InvalidSizeError(value, "percentages need a screen")
            length = getattr(self.screen_geometry(screen), dimension)
        else:
            length = 0
        return resolve_size(value, length)

    # Lifecycle

    def create(
        self,
        position=None,
        stretch: Optional[bool] = None,
        width=None,
        height=None,
        screen=None,
        visible: Optional[bool] = None,
        font=None,
        **options,
    ) -> Wibar:
        """Create a wibar and attach it to a screen edge.

        Args:
            position: "top", "bottom", "left" or "right" (default from config)
            stretch: Fill the screen along the edge. Defaults to True unless
                the size along the edge is given
            width: Width, absolute or a percentage such as "50%"
            height: Height, absolute or a percentage
            screen: Screen to dock to (default: primary screen)
            visible: Initial visibility (default True)
            font: Font the default thickness is derived from
            **options: Passed through to the placement collaborator

        Returns:
            The attached Wibar

        Raises:
            InvalidPositionError: if position is not a valid edge
            InvalidSizeError: if width or height cannot be resolved
            ValueError: if no screen is given and there is no primary screen
        """
        edge = Edge.parse(
            position if position is not None else self.config.default_position
        )

        if screen is None:
            screen = self.primary_screen
        if screen is None:
            raise ValueError("No screen given and no primary screen configured")

        font = FontDescription.parse(font) if font is not None else self.config.font

        if width is not None:
            width = self.resolve_size(screen, "width", width)
        if height is not None:
            height = self.resolve_size(screen, "height", height)

        # Set default size, an explicit size along the edge disables stretch
        thickness = None
        if edge.is_vertical:
            if width is None:
                thickness = width = self.default_thickness(font)
            has_to_stretch = height is None
        else:
            if height is None:
                thickness = height = self.default_thickness(font)
            has_to_stretch = width is None

        options.setdefault("type", self.config.bar_type)

        bar = Wibar(
            self,
            screen,
            width=width,
            height=height,
            stretch=has_to_stretch if stretch is None else bool(stretch),
            visible=True if visible is None else bool(visible),
            font=font,
            options=options,
        )
        logger.debug(
            "Creating wibar on %r at %s (default thickness: %s)", screen, edge, thickness
        )

        self.registry.add(bar)
        bar.set_position(edge)

        self.publish(topics.WIBAR_CREATED, wibar=bar)
        return bar

    def remove_screen_bars(self, screen):
        """Remove every wibar docked to a screen."""
        for bar in self.registry.on_screen(screen):
            bar.remove()

    def _on_screen_removed(self, screen):
        """Handle SCREEN_REMOVED event.

        Args:
            screen: The screen being removed
        """
        self.remove_screen_bars(screen)
