"""Tests for loadable discovery and the default capability adapter."""

import pytest

from loadwatch.core.capabilities import DefaultCapabilityAdapter
from loadwatch.core.discovery import discover_loadables
from loadwatch.core.models import ProgressSnapshot
from loadwatch.core.tracker import ContainerLoadTracker
from loadwatch.shared.errors import CapabilityError, ErrorCode
from tests.helpers import AccessorLeaf, FormHost, Label, Leaf, Panel, Unnamed


@pytest.fixture
def adapter() -> DefaultCapabilityAdapter:
    return DefaultCapabilityAdapter()


class TestDiscoverLoadables:
    """Test cases for discover_loadables."""

    def test_flat_container(self, adapter, qtbot) -> None:
        root = Panel(Leaf("a"), Leaf("b"))

        found = discover_loadables(root, adapter)

        assert [item.name for item in found] == ["a", "b"]
        assert found[0].source is root.items[0].data_source

    def test_loadable_root_is_registered_alone(self, adapter, qtbot) -> None:
        # Arrange: a loadable root that also has loadable children
        root = Leaf("root")
        root.items = [Leaf("child")]

        # Act
        found = discover_loadables(root, adapter)

        # Assert
        assert [item.name for item in found] == ["root"]

    def test_nested_containers_are_flattened_in_pre_order(self, adapter, qtbot) -> None:
        root = Panel(
            Leaf("a"),
            Panel(Leaf("b"), Panel(Leaf("c")), Leaf("d")),
            Leaf("e"),
        )

        found = discover_loadables(root, adapter)

        assert [item.name for item in found] == ["a", "b", "c", "d", "e"]

    def test_container_child_is_expanded_not_registered(self, adapter, qtbot) -> None:
        # A child that has children wins over its own data source
        inner = Leaf("inner")
        inner.items = [Leaf("x")]
        root = Panel(inner)

        found = discover_loadables(root, adapter)

        assert [item.name for item in found] == ["x"]

    def test_items_without_capability_are_skipped(self, adapter, qtbot) -> None:
        root = Panel(Label("title"), Leaf("a"), Panel(), Label())

        found = discover_loadables(root, adapter)

        assert [item.name for item in found] == ["a"]

    def test_no_loadables(self, adapter) -> None:
        assert discover_loadables(Panel(Label(), Panel(Label())), adapter) == []
        assert discover_loadables(Panel(), adapter) == []

    def test_accessor_leaves(self, adapter, qtbot) -> None:
        leaf = AccessorLeaf("combo")

        found = discover_loadables(Panel(leaf), adapter)

        assert found[0].name == "combo"
        assert found[0].source is leaf.get_data_source()

    def test_form_host_resolves_to_form(self, adapter, qtbot) -> None:
        form = Panel(Leaf("a"), Leaf("b"))

        found = discover_loadables(FormHost(form), adapter)

        assert [item.name for item in found] == ["a", "b"]

    def test_cycles_terminate(self, adapter, qtbot) -> None:
        # Arrange: inner points back at root
        root = Panel(name="root")
        inner = Panel(Leaf("a"), name="inner")
        inner.items.append(root)
        root.items = [inner, Leaf("b")]

        # Act
        found = discover_loadables(root, adapter)

        # Assert
        assert [item.name for item in found] == ["a", "b"]

    def test_deep_nesting_does_not_recurse(self, adapter, qtbot) -> None:
        root = Panel(Leaf("deep"))
        for _ in range(5000):
            root = Panel(root)

        found = discover_loadables(root, adapter)

        assert [item.name for item in found] == ["deep"]


class TestDefaultCapabilityAdapter:
    """Test cases for DefaultCapabilityAdapter."""

    def test_child_items_accessor(self, adapter) -> None:
        class Node:
            def child_items(self):
                return ("x", "y")

        assert adapter.children(Node()) == ["x", "y"]

    def test_string_items_are_not_children(self, adapter) -> None:
        class Node:
            items = "abc"

        assert adapter.children(Node()) == []

    def test_data_source_on_plain_object_raises(self, adapter) -> None:
        with pytest.raises(CapabilityError) as exc_info:
            adapter.data_source(Label())

        assert exc_info.value.code is ErrorCode.CAPABILITY_MISSING

    def test_non_signal_data_source_is_not_loadable(self, adapter) -> None:
        class Node:
            data_source = {"rows": []}

        assert adapter.is_loadable(Node()) is False

    def test_unnamed_loadables_get_distinct_names(self, adapter, qtbot) -> None:
        # Arrange: two items with a data source but no name
        first, second = Unnamed(), Unnamed()

        # Act
        found = discover_loadables(Panel(first, second), adapter)

        # Assert
        names = [item.name for item in found]
        assert len(set(names)) == 2
        assert all(name.startswith("Unnamed@") for name in names)

    def test_unnamed_loadables_are_counted_separately(self, qtbot, settings, indicator) -> None:
        first, second = Unnamed(), Unnamed()
        tracker = ContainerLoadTracker(Panel(first, second), settings, indicator)
        tracker.on_container_ready()

        first.data_source.begin()
        second.data_source.begin()
        first.data_source.end()

        assert tracker.snapshot() == ProgressSnapshot(2, 1)
        assert tracker.notifier.end_pending is False

    def test_empty_name_falls_back_to_identity(self, adapter) -> None:
        leaf = AccessorLeaf("")

        assert adapter.name_of(leaf) == f"AccessorLeaf@{id(leaf):x}"
