"""Ordered, labeled XML element tree with path addressing.

An :class:`XMLNode` holds one element: an optional namespace prefix, a local
name, an optional text value, ordered attributes and ordered children. Children
and attributes are append-only. Alongside the child list each node keeps an
index from local name to the same-named children so that first-match lookups
and path navigation do not scan siblings.

Paths are local names joined by ``/``. Each segment selects the *first* child
with that name; there is no wildcard, predicate or sibling search.

Examples:
    >>> root = XMLNode("root")
    >>> root.append_child(XMLNode("item", value="A"))
    >>> root.get_value_at_path("item")
    'A'
    >>> root.set_value_at_path("missing/item", "B")
    False
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

PATH_SEPARATOR = "/"


class XMLNode:
    """A single XML element in the document tree.

    ``name`` and ``prefix`` are fixed at creation; ``value`` is a plain
    mutable attribute. Children and attributes are exposed read-only and can
    only grow through :meth:`append_child` and :meth:`add_attribute`, which
    keep the name index and attribute order in step.
    """

    __slots__ = (
        "_name",
        "_prefix",
        "value",
        "_children",
        "_children_by_name",
        "_attributes",
    )

    def __init__(
        self,
        name: str,
        prefix: Optional[str] = None,
        value: Optional[str] = None
    ) -> None:
        """Create a node with no children and no attributes.

        Args:
            name: Local element name, must be non-empty
            prefix: Optional namespace prefix; ``None`` and ``""`` both mean none
            value: Optional text content

        Raises:
            ValueError: If ``name`` is empty
        """
        if not name:
            raise ValueError("Node name cannot be empty")

        self._name = name
        self._prefix = prefix
        self.value = value
        self._children: List["XMLNode"] = []
        self._children_by_name: Dict[str, List["XMLNode"]] = {}
        # dicts keep insertion order, so this is both the ordered pair list
        # and the key index
        self._attributes: Dict[str, str] = {}

    @property
    def name(self) -> str:
        """Local element name."""
        return self._name

    @property
    def prefix(self) -> Optional[str]:
        """Namespace prefix, or None when the node was created without one."""
        return self._prefix

    @property
    def qualified_name(self) -> str:
        """``prefix:name``, or the bare name when the prefix is absent or empty."""
        if self._prefix:
            return f"{self._prefix}:{self._name}"
        return self._name

    @property
    def children(self) -> Tuple["XMLNode", ...]:
        """Children in document order."""
        return tuple(self._children)

    @property
    def attributes(self) -> List[Tuple[str, str]]:
        """Attribute ``(key, value)`` pairs in insertion order."""
        return list(self._attributes.items())

    # Children

    def first_child(self, name: str) -> Optional["XMLNode"]:
        """Return the first child with local name ``name``, or None."""
        group = self._children_by_name.get(name)
        if not group:
            return None
        return group[0]

    def children_named(self, name: str) -> List["XMLNode"]:
        """Return all children with local name ``name`` in document order."""
        return list(self._children_by_name.get(name, ()))

    def append_child(self, child: "XMLNode") -> None:
        """Add ``child`` as the last child.

        The caller must not append a node that is already part of a tree;
        no alias or cycle check is made.
        """
        if not isinstance(child, XMLNode):
            raise TypeError("Child must be an XMLNode instance")

        self._children.append(child)
        self._children_by_name.setdefault(child.name, []).append(child)

    # Attributes

    def get_attribute(self, key: str) -> Optional[str]:
        """Return the value stored for ``key``, or None."""
        return self._attributes.get(key)

    def has_attribute(self, key: str) -> bool:
        """Check if the node carries attribute ``key``."""
        return key in self._attributes

    def add_attribute(self, key: str, value: str) -> bool:
        """Add an attribute unless ``key`` is already present.

        Returns:
            True if the attribute was added, False if the key already existed
            (the existing value is kept)
        """
        if key in self._attributes:
            return False
        self._attributes[key] = value
        return True

    # Path addressing

    def resolve_at_path(self, path: Optional[str]) -> Optional["XMLNode"]:
        """Follow ``path`` from this node, taking the first match per segment.

        Returns:
            The node the path points at, or None if the path is empty or any
            segment has no matching child
        """
        if not path:
            return None

        current: Optional[XMLNode] = self
        for segment in path.split(PATH_SEPARATOR):
            current = current.first_child(segment)
            if current is None:
                return None
        return current

    def get_value_at_path(self, path: Optional[str]) -> Optional[str]:
        """Return the value of the node at ``path``, or None if it does not resolve."""
        node = self.resolve_at_path(path)
        if node is None:
            return None
        return node.value

    def set_value_at_path(self, path: Optional[str], value: Optional[str]) -> bool:
        """Set the value of the node at ``path``; False if it does not resolve."""
        node = self.resolve_at_path(path)
        if node is None:
            return False
        node.value = value
        return True

    def add_node_at_path(self, path: Optional[str], new_node: "XMLNode") -> bool:
        """Append ``new_node`` under the node at ``path``.

        Missing intermediate nodes are not created.
        """
        node = self.resolve_at_path(path)
        if node is None:
            return False
        node.append_child(new_node)
        return True

    def get_attribute_at_path(self, path: Optional[str], key: str) -> Optional[str]:
        """Return attribute ``key`` of the node at ``path``, or None."""
        node = self.resolve_at_path(path)
        if node is None:
            return None
        return node.get_attribute(key)

    def add_attribute_at_path(self, path: Optional[str], key: str, value: str) -> bool:
        """Add an attribute to the node at ``path``.

        Returns:
            False if the path does not resolve or the key is already present
        """
        node = self.resolve_at_path(path)
        if node is None:
            return False
        return node.add_attribute(key, value)

    # Inspection

    def iter_nodes(self) -> Iterator["XMLNode"]:
        """Iterate over this node and its descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree to a dictionary snapshot."""
        return {
            "prefix": self._prefix or None,
            "name": self._name,
            "value": self.value,
            "attributes": self.attributes,
            "children": [child.to_dict() for child in self._children],
        }

    def __repr__(self) -> str:
        return (
            f"<XMLNode {self.qualified_name!r} "
            f"children={len(self._children)} attributes={len(self._attributes)}>"
        )
