"""
Event Topics for wibar

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Screen (monitor) events, published by the host
SCREEN_REMOVED = "screen.removed"
"""Published when a screen is disconnected. Params: screen"""

# Wibar lifecycle notifications, published after the change is applied
WIBAR_CREATED = "wibar.created"
"""Published when a wibar has been created and attached. Params: wibar"""

WIBAR_REMOVED = "wibar.removed"
"""Published once when a wibar is removed. Params: wibar"""

WIBAR_POSITION_CHANGED = "wibar.position_changed"
"""Published when a wibar moves to another edge. Params: wibar, position, previous"""

WIBAR_VISIBILITY_CHANGED = "wibar.visibility_changed"
"""Published when a wibar is shown or hidden. Params: wibar, visible"""
