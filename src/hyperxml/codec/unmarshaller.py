"""XML text to tree deserialization.

The document is read in a single forward pass with lxml's pull parser, which
reports ``start-ns``, ``start`` and ``end`` events as the input is fed in
chunks. An explicit stack of in-progress nodes turns those events into an
:class:`~hyperxml.tree.XMLNode` tree.

Character data follows overwrite semantics: an element's text chunks are its
leading text and the text after each of its child elements, and the *last*
chunk that is not pure XML whitespace becomes the node's value. Earlier chunks are
dropped, never concatenated, so ``<a>x<b/>y</a>`` gives ``a`` the value ``y``.

Malformed input raises :class:`lxml.etree.XMLSyntaxError`; no partial tree is
returned.
"""

import time
from typing import Iterable, List, Optional, Tuple, Union

from lxml import etree

from hyperxml.shared import CodecConfig, get_logger
from hyperxml.tree import XMLNode

# Namespace declarations surface as attributes under this key prefix
XMLNS_PREFIX = "xmlns"
MS_PER_SECOND = 1000
# XML whitespace (S production); other Unicode spaces are content
XML_WHITESPACE = " \t\r\n"

TokenizerEvents = Iterable[Tuple[str, Union[etree._Element, Tuple[str, str]]]]


class XMLTreeUnmarshaller:
    """Builds an :class:`XMLNode` tree from a stream of tokenizer events.

    A new lxml parser is constructed for every document; instances hold no
    parser between calls and can be reused sequentially.
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize unmarshaller.

        Args:
            config: Codec configuration; defaults are used when omitted
        """
        self.config = config or CodecConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "unmarshaller")

        self._stack: List[XMLNode] = []
        self._pending_namespaces: List[Tuple[str, str]] = []
        self._last_popped: Optional[XMLNode] = None
        self._node_count = 0

    def unmarshall(self, text: Union[str, bytes]) -> XMLNode:
        """Parse ``text`` into a tree and return its root node.

        Args:
            text: XML document as ``str`` or ``bytes``. A str is handed to
                the tokenizer as UTF-8; bytes are decoded according to the
                document's own declaration

        Returns:
            The document's root element

        Raises:
            TypeError: If ``text`` is neither str nor bytes
            lxml.etree.XMLSyntaxError: If the document is not well-formed
        """
        if isinstance(text, str):
            data = text.encode("utf-8")
            encoding: Optional[str] = "utf-8"
        elif isinstance(text, bytes):
            data = text
            encoding = None
        else:
            raise TypeError(
                f"XML input must be str or bytes, not {type(text).__name__}"
            )

        start_time = time.time()
        self._reset()
        self.logger.debug(
            "Starting unmarshall",
            extra={"content_length": len(data), "chunk_size": self.config.chunk_size}
        )

        parser = self._create_parser(encoding)
        chunk_size = self.config.chunk_size
        try:
            for offset in range(0, len(data), chunk_size):
                parser.feed(data[offset:offset + chunk_size])
                self._process_events(parser.read_events())
            parser.close()
            self._process_events(parser.read_events())
        except etree.XMLSyntaxError as e:
            self.logger.warning(
                "Tokenizer rejected input",
                extra={
                    "error": str(e),
                    "position": getattr(e, "position", None),
                    "open_elements": len(self._stack),
                }
            )
            raise

        root = self._last_popped
        if root is None:
            # close() normally rejects documents without an element first
            raise etree.XMLSyntaxError(
                "Document contains no root element", None, 0, 0
            )

        self.logger.debug(
            "Unmarshall completed",
            extra={
                "root": root.qualified_name,
                "node_count": self._node_count,
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )
        return root

    def _reset(self) -> None:
        self._stack = []
        self._pending_namespaces = []
        self._last_popped = None
        self._node_count = 0

    def _create_parser(self, encoding: Optional[str]) -> etree.XMLPullParser:
        return etree.XMLPullParser(
            events=("start-ns", "start", "end"),
            encoding=encoding,
            no_network=self.config.no_network,
            resolve_entities=self.config.resolve_entities,
            huge_tree=self.config.huge_tree,
        )

    def _process_events(self, events: TokenizerEvents) -> None:
        for event, payload in events:
            if event == "start-ns":
                self._pending_namespaces.append(payload)
            elif event == "start":
                self._handle_start(payload)
            elif event == "end":
                self._handle_end(payload)

    def _handle_start(self, element: etree._Element) -> None:
        node = XMLNode(etree.QName(element).localname, prefix=element.prefix)

        for ns_prefix, uri in self._pending_namespaces:
            key = f"{XMLNS_PREFIX}:{ns_prefix}" if ns_prefix else XMLNS_PREFIX
            node.add_attribute(key, uri)
        self._pending_namespaces = []

        for key, value in element.attrib.items():
            node.add_attribute(etree.QName(key).localname, value)

        if self._stack:
            self._stack[-1].append_child(node)
        self._stack.append(node)
        self._node_count += 1

    def _handle_end(self, element: etree._Element) -> None:
        node = self._stack.pop()

        chunks = [element.text]
        chunks.extend(child.tail for child in element)
        for chunk in chunks:
            if chunk and chunk.strip(XML_WHITESPACE):
                if self.config.strip_text:
                    chunk = chunk.strip(XML_WHITESPACE)
                node.value = chunk

        # Children and their tails have been consumed; drop them so large
        # documents are not held twice
        element.clear(keep_tail=True)
        self._last_popped = node


def unmarshall(
    text: Union[str, bytes],
    config: Optional[CodecConfig] = None
) -> XMLNode:
    """Parse an XML document into an :class:`XMLNode` tree.

    Examples:
        >>> root = unmarshall('<root><item>A</item><item>B</item></root>')
        >>> [item.value for item in root.children_named('item')]
        ['A', 'B']
    """
    return XMLTreeUnmarshaller(config).unmarshall(text)
