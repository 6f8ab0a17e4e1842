"""Tests for XMLNode storage, lookup and path navigation."""

import pytest

from hyperxml.tree import PATH_SEPARATOR, XMLNode


def build_document() -> XMLNode:
    """Build <x><y><z>deep</z></y><a/><b/><a id="2"/></x> by hand."""
    root = XMLNode("x")
    y = XMLNode("y")
    y.append_child(XMLNode("z", value="deep"))
    root.append_child(y)
    root.append_child(XMLNode("a"))
    root.append_child(XMLNode("b"))
    second_a = XMLNode("a")
    second_a.add_attribute("id", "2")
    root.append_child(second_a)
    return root


class TestXMLNodeCreation:
    """Test node construction and read-only identity fields."""

    def test_create_with_name_only(self) -> None:
        """Test a name-only node starts empty."""
        node = XMLNode("root")

        assert node.name == "root"
        assert node.prefix is None
        assert node.value is None
        assert node.children == ()
        assert node.attributes == []

    def test_create_with_prefix_and_value(self) -> None:
        """Test prefix and value are stored."""
        node = XMLNode("item", prefix="ns", value="text")

        assert node.prefix == "ns"
        assert node.value == "text"
        assert node.qualified_name == "ns:item"

    def test_empty_name_raises_error(self) -> None:
        """Test that an empty name raises ValueError."""
        with pytest.raises(ValueError, match="Node name cannot be empty"):
            XMLNode("")

    def test_name_and_prefix_are_read_only(self) -> None:
        """Test name and prefix cannot be reassigned."""
        node = XMLNode("item", prefix="ns")

        with pytest.raises(AttributeError):
            node.name = "other"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            node.prefix = "other"  # type: ignore[misc]

    def test_value_is_mutable(self) -> None:
        """Test value can be set and cleared."""
        node = XMLNode("item")

        node.value = "new"
        assert node.value == "new"
        node.value = None
        assert node.value is None

    @pytest.mark.parametrize("prefix", [None, ""])
    def test_absent_and_empty_prefix_give_bare_name(self, prefix) -> None:
        """Test None and empty prefix both mean no prefix."""
        assert XMLNode("item", prefix=prefix).qualified_name == "item"


class TestXMLNodeChildren:
    """Test child storage and name lookup."""

    def test_append_child_preserves_order(self) -> None:
        """Test children keep insertion order."""
        parent = XMLNode("parent")
        first, second, third = XMLNode("a"), XMLNode("b"), XMLNode("a")

        parent.append_child(first)
        parent.append_child(second)
        parent.append_child(third)

        assert parent.children == (first, second, third)

    def test_first_child_returns_first_match(self) -> None:
        """Test first_child returns the first same-named sibling."""
        parent = XMLNode("parent")
        first, other, second = XMLNode("a"), XMLNode("b"), XMLNode("a")
        for child in (first, other, second):
            parent.append_child(child)

        assert parent.first_child("a") is first
        assert parent.first_child("b") is other

    def test_children_named_returns_group_in_order(self) -> None:
        """Test children_named returns every same-named child in order."""
        parent = XMLNode("parent")
        first, other, second = XMLNode("a"), XMLNode("b"), XMLNode("a")
        for child in (first, other, second):
            parent.append_child(child)

        assert parent.children_named("a") == [first, second]

    def test_missing_child_lookups(self) -> None:
        """Test lookups for absent names return None or an empty list."""
        parent = XMLNode("parent")
        parent.append_child(XMLNode("a"))

        assert parent.first_child("missing") is None
        assert parent.children_named("missing") == []

    def test_children_named_matches_local_name_regardless_of_prefix(self) -> None:
        """Test the name index groups by local name only."""
        parent = XMLNode("parent")
        plain = XMLNode("item")
        prefixed = XMLNode("item", prefix="ns")
        parent.append_child(plain)
        parent.append_child(prefixed)

        assert parent.children_named("item") == [plain, prefixed]

    def test_returned_collections_do_not_mutate_node(self) -> None:
        """Test mutating returned lists leaves the node unchanged."""
        parent = XMLNode("parent")
        child = XMLNode("a")
        parent.append_child(child)

        parent.children_named("a").append(XMLNode("a"))
        parent.attributes.append(("k", "v"))

        assert parent.children_named("a") == [child]
        assert parent.attributes == []
        assert isinstance(parent.children, tuple)

    def test_append_non_node_raises_error(self) -> None:
        """Test appending a non-node raises TypeError."""
        parent = XMLNode("parent")

        with pytest.raises(TypeError, match="Child must be an XMLNode instance"):
            parent.append_child("not_a_node")  # type: ignore[arg-type]


class TestXMLNodeAttributes:
    """Test attribute storage and first-write-wins semantics."""

    def test_add_and_get_attribute(self) -> None:
        """Test adding and reading an attribute."""
        node = XMLNode("item")

        assert node.add_attribute("id", "1") is True
        assert node.get_attribute("id") == "1"
        assert node.has_attribute("id")

    def test_duplicate_key_is_rejected(self) -> None:
        """Test the first value for a key wins."""
        node = XMLNode("item")

        assert node.add_attribute("k", "v1") is True
        assert node.add_attribute("k", "v2") is False
        assert node.get_attribute("k") == "v1"
        assert node.attributes == [("k", "v1")]

    def test_attributes_keep_insertion_order(self) -> None:
        """Test attribute pairs come back in insertion order."""
        node = XMLNode("item")
        node.add_attribute("z", "1")
        node.add_attribute("a", "2")
        node.add_attribute("m", "3")

        assert node.attributes == [("z", "1"), ("a", "2"), ("m", "3")]

    def test_missing_attribute_returns_none(self) -> None:
        """Test looking up an absent key returns None."""
        node = XMLNode("item")

        assert node.get_attribute("missing") is None
        assert not node.has_attribute("missing")


class TestXMLNodePaths:
    """Test path resolution and the operations built on it."""

    def test_resolve_nested_path(self) -> None:
        """Test a multi-segment path resolves to the deepest node."""
        root = build_document()

        node = root.resolve_at_path("y/z")

        assert node is not None
        assert node.value == "deep"

    def test_resolve_takes_first_match_per_segment(self) -> None:
        """Test only the first same-named child is followed."""
        root = build_document()

        node = root.resolve_at_path("a")

        assert node is root.children[1]
        assert node.get_attribute("id") is None

    @pytest.mark.parametrize("path", [None, "", "missing", "y/missing", "y//z", "/y"])
    def test_unresolvable_paths_return_none(self, path) -> None:
        """Test empty, missing and malformed paths fail."""
        root = build_document()

        assert root.resolve_at_path(path) is None

    def test_separator_is_slash(self) -> None:
        """Test the path separator constant."""
        assert PATH_SEPARATOR == "/"

    def test_missing_intermediate_segment(self) -> None:
        """Test a tree without y under x fails at y and is not mutated."""
        root = XMLNode("root")
        x = XMLNode("x")
        root.append_child(x)
        before = root.to_dict()

        assert root.resolve_at_path("x/y/z") is None
        assert root.add_node_at_path("x/y/z", XMLNode("n")) is False
        assert root.to_dict() == before

    def test_get_value_at_path(self) -> None:
        """Test reading a value by path."""
        root = build_document()

        assert root.get_value_at_path("y/z") == "deep"
        assert root.get_value_at_path("y") is None
        assert root.get_value_at_path("y/missing") is None

    def test_set_value_at_path(self) -> None:
        """Test writing a value by path."""
        root = build_document()

        assert root.set_value_at_path("y/z", "changed") is True
        assert root.get_value_at_path("y/z") == "changed"

    def test_set_value_at_missing_path_creates_nothing(self) -> None:
        """Test writing through a missing path returns False."""
        root = build_document()
        before = root.to_dict()

        assert root.set_value_at_path("y/new/leaf", "value") is False
        assert root.to_dict() == before

    def test_add_node_at_path(self) -> None:
        """Test attaching a node under the resolved parent."""
        root = build_document()
        new_node = XMLNode("leaf", value="1")

        assert root.add_node_at_path("y/z", new_node) is True
        assert root.resolve_at_path("y/z/leaf") is new_node

    def test_get_attribute_at_path(self) -> None:
        """Test reading an attribute by path."""
        root = build_document()
        root.resolve_at_path("y").add_attribute("kind", "inner")

        assert root.get_attribute_at_path("y", "kind") == "inner"
        assert root.get_attribute_at_path("y", "missing") is None
        assert root.get_attribute_at_path("missing", "kind") is None

    def test_add_attribute_at_path(self) -> None:
        """Test adding attributes by path reports the outcome."""
        root = build_document()

        assert root.add_attribute_at_path("y/z", "lang", "en") is True
        assert root.add_attribute_at_path("y/z", "lang", "fr") is False
        assert root.add_attribute_at_path("missing", "lang", "en") is False
        assert root.get_attribute_at_path("y/z", "lang") == "en"


class TestXMLNodeInspection:
    """Test iteration and snapshot helpers."""

    def test_iter_nodes_is_document_order(self) -> None:
        """Test pre-order traversal."""
        root = build_document()

        names = [node.name for node in root.iter_nodes()]

        assert names == ["x", "y", "z", "a", "b", "a"]

    def test_to_dict_snapshot(self) -> None:
        """Test the dictionary snapshot captures the whole subtree."""
        node = XMLNode("item", prefix="", value="v")
        node.add_attribute("id", "1")
        node.append_child(XMLNode("child", prefix="ns"))

        assert node.to_dict() == {
            "prefix": None,
            "name": "item",
            "value": "v",
            "attributes": [("id", "1")],
            "children": [
                {
                    "prefix": "ns",
                    "name": "child",
                    "value": None,
                    "attributes": [],
                    "children": [],
                }
            ],
        }

    def test_repr_names_node(self) -> None:
        """Test repr includes the qualified name."""
        assert "'ns:item'" in repr(XMLNode("item", prefix="ns"))
