"""Tree to XML text serialization.

The output format is flat: one newline after every closing or self-closing
tag, a newline before every child, no indentation. Attribute values and text
are copied verbatim; characters such as ``<``, ``&`` or ``"`` are not escaped,
so a tree holding them produces text that will not parse back.
"""

from typing import List

from hyperxml.tree import XMLNode


def marshall(node: XMLNode) -> str:
    """Serialize ``node`` and its subtree to XML text.

    Examples:
        >>> marshall(XMLNode("empty"))
        '<empty/>\\n'
        >>> marshall(XMLNode("item", value="A"))
        '<item>A</item>\\n'
    """
    parts: List[str] = []
    _write_node(node, parts)
    return "".join(parts)


def _write_node(node: XMLNode, parts: List[str]) -> None:
    tag = node.qualified_name
    parts.append("<")
    parts.append(tag)
    for key, value in node.attributes:
        parts.append(f' {key}="{value}"')

    children = node.children
    if not children and not node.value:
        parts.append("/>\n")
        return

    parts.append(">")
    if node.value:
        parts.append(node.value)
    for child in children:
        parts.append("\n")
        _write_node(child, parts)
    parts.append(f"</{tag}>\n")
