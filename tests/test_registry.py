"""
Unit tests for the wibar registry.
"""

import gc

import pytest
from wibar.registry import WibarRegistry


class StubBar:
    def __init__(self, name, screen="s1"):
        self.name = name
        self.screen = screen


@pytest.mark.unit
class TestWibarRegistry:
    """Test stacking order bookkeeping."""

    def test_add_keeps_insertion_order(self):
        """Bars iterate in the order they were added."""
        registry = WibarRegistry()
        bars = [StubBar(i) for i in range(3)]

        for bar in bars:
            registry.add(bar)

        assert list(registry) == bars
        assert len(registry) == 3

    def test_add_twice_keeps_single_entry(self):
        """Adding a present bar does not duplicate it."""
        registry = WibarRegistry()
        a, b = StubBar("a"), StubBar("b")

        registry.add(a)
        registry.add(b)
        registry.add(a)

        assert list(registry) == [a, b]

    def test_move_to_end(self):
        """Moving a bar puts it last without duplicating it."""
        registry = WibarRegistry()
        a, b, c = StubBar("a"), StubBar("b"), StubBar("c")
        for bar in (a, b, c):
            registry.add(bar)

        registry.move_to_end(a)

        assert list(registry) == [b, c, a]

    def test_move_to_end_adds_missing_bar(self):
        registry = WibarRegistry()
        a = StubBar("a")

        registry.move_to_end(a)

        assert list(registry) == [a]

    def test_remove_strips_all_occurrences(self):
        """Removal copes with a bar registered more than once."""
        import weakref

        registry = WibarRegistry()
        a, b = StubBar("a"), StubBar("b")
        registry.add(a)
        registry.add(b)
        # Corrupt the registry on purpose
        registry._refs.append(weakref.ref(a))

        registry.remove(a)

        assert list(registry) == [b]
        assert a not in registry

    def test_remove_missing_bar_is_noop(self):
        registry = WibarRegistry()
        a = StubBar("a")
        registry.add(a)

        registry.remove(StubBar("other"))

        assert list(registry) == [a]

    def test_on_screen_filters_by_screen(self):
        registry = WibarRegistry()
        a, b, c = StubBar("a", "s1"), StubBar("b", "s2"), StubBar("c", "s1")
        for bar in (a, b, c):
            registry.add(bar)

        assert registry.on_screen("s1") == [a, c]
        assert registry.on_screen("s2") == [b]
        assert registry.on_screen("s3") == []

    def test_for_each_on_screen(self):
        """Callback runs in stacking order for matching bars only."""
        registry = WibarRegistry()
        a, b, c = StubBar("a", "s1"), StubBar("b", "s2"), StubBar("c", "s1")
        for bar in (a, b, c):
            registry.add(bar)
        seen = []

        registry.for_each_on_screen("s1", seen.append)

        assert seen == [a, c]

    def test_mutation_while_iterating(self):
        """Iteration walks a snapshot."""
        registry = WibarRegistry()
        a, b = StubBar("a"), StubBar("b")
        registry.add(a)
        registry.add(b)
        seen = []

        for bar in registry:
            seen.append(bar)
            registry.remove(bar)

        assert seen == [a, b]
        assert len(registry) == 0

    def test_collected_bar_drops_out(self):
        """Bars are weakly held."""
        registry = WibarRegistry()
        a, b = StubBar("a"), StubBar("b")
        registry.add(a)
        registry.add(b)

        del a
        gc.collect()

        assert list(registry) == [b]
        assert len(registry._refs) == 1
