"""
Unit tests for the deprecated free functions.
"""

import warnings

import pytest
from wibar import deprecated
from wibar.protocol import Edge


@pytest.mark.unit
class TestDeprecated:
    """Deprecated functions warn and behave like the Wibar methods."""

    def test_get_position(self, manager):
        bar = manager.create(position="right")

        with pytest.warns(DeprecationWarning):
            assert deprecated.get_position(bar) is Edge.RIGHT

    def test_set_position(self, manager, placement, screen):
        bar = manager.create(position="top")

        with pytest.warns(DeprecationWarning):
            deprecated.set_position(bar, "bottom", screen)

        assert bar.position is Edge.BOTTOM
        assert placement.last(bar).edge is Edge.BOTTOM

    def test_attach_does_nothing(self, manager, placement):
        bar = manager.create(position="top")
        placement.reset()

        with pytest.warns(DeprecationWarning):
            deprecated.attach(bar, "left")

        assert bar.position is Edge.TOP
        assert placement.calls == []

    def test_align_forwards_to_placement(self, manager, placement):
        bar = manager.create()

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert deprecated.align(bar, "top_left") == "top_left"

        assert placement.aligned == [(bar, "top_left")]

    def test_align_center_is_renamed(self, manager, placement):
        bar = manager.create()

        with pytest.warns(DeprecationWarning):
            deprecated.align(bar, "center")

        assert placement.aligned == [(bar, "centered")]

    def test_align_screen_argument(self, manager, placement, screen):
        bar = manager.create()

        with pytest.warns(DeprecationWarning):
            deprecated.align(bar, "bottom", screen)

        assert placement.aligned == [(bar, "bottom")]

    def test_align_unknown(self, manager, placement):
        bar = manager.create()

        assert deprecated.align(bar, "diagonal") is None
        assert placement.aligned == []

    def test_align_without_placement_support(self, make_manager, null_placement):
        manager = make_manager(null_placement)
        bar = manager.create()

        assert deprecated.align(bar, "centered") is None
