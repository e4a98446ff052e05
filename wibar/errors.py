"""
Wibar Exceptions
"""


class WibarError(Exception):
    """Base class for wibar errors."""


class InvalidPositionError(WibarError, ValueError):
    """Raised when a bar position is not top, bottom, left or right."""

    def __init__(self, position):
        self.position = position
        super().__init__(
            f"Invalid wibar position: {position!r}. "
            "You may only use 'top', 'bottom', 'left' and 'right'"
        )


class InvalidSizeError(WibarError, ValueError):
    """Raised when a bar size cannot be resolved to a length."""

    def __init__(self, size, reason: str = "expected a number or a percentage"):
        self.size = size
        super().__init__(f"Invalid wibar size {size!r}: {reason}")
