"""In-memory XML element tree.

Key Components:
    XMLNode: One element with prefix, name, value, ordered attributes and
        ordered children, plus ``/``-separated path navigation
"""

from .node import PATH_SEPARATOR, XMLNode

__all__ = [
    "PATH_SEPARATOR",
    "XMLNode",
]
