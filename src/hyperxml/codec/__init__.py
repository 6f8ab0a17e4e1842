"""Conversion between :class:`~hyperxml.tree.XMLNode` trees and XML text.

Key Components:
    marshall: Tree to flat, unescaped XML text
    unmarshall: XML text to tree through lxml's streaming pull parser
    XMLTreeUnmarshaller: Stack-based tree builder behind ``unmarshall``
    HyperXML: Codec object carrying a CodecConfig
"""

from .hyperxml import HyperXML
from .marshaller import marshall
from .unmarshaller import XML_WHITESPACE, XMLNS_PREFIX, XMLTreeUnmarshaller, unmarshall

__all__ = [
    "HyperXML",
    "XMLNS_PREFIX",
    "XML_WHITESPACE",
    "XMLTreeUnmarshaller",
    "marshall",
    "unmarshall",
]
