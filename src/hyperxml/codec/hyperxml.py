"""Configured codec object.

:class:`HyperXML` bundles a :class:`~hyperxml.shared.CodecConfig` with the
marshal and unmarshal functions. Each instance is independent and builds its
own tokenizer per document, so callers can hold differently configured codecs
side by side.
"""

from typing import Optional, Union

from hyperxml.codec.marshaller import marshall
from hyperxml.codec.unmarshaller import XMLTreeUnmarshaller
from hyperxml.shared import CodecConfig, get_logger
from hyperxml.tree import XMLNode


class HyperXML:
    """Marshals :class:`XMLNode` trees to XML text and back.

    Examples:
        >>> codec = HyperXML()
        >>> root = codec.unmarshall('<root><item>A</item></root>')
        >>> codec.marshall(root)
        '<root>\\n<item>A</item>\\n</root>\\n'
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        self.config = config or CodecConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "hyperxml")

    def marshall(self, node: XMLNode) -> str:
        """Serialize ``node`` and its subtree to XML text."""
        output = marshall(node)
        self.logger.debug(
            "Marshall completed",
            extra={"root": node.qualified_name, "output_length": len(output)}
        )
        return output

    def unmarshall(self, text: Union[str, bytes]) -> XMLNode:
        """Parse ``text`` into a tree and return its root node.

        Raises:
            lxml.etree.XMLSyntaxError: If the document is not well-formed
        """
        return XMLTreeUnmarshaller(self.config).unmarshall(text)
