"""HyperXML.

Read, mutate by path, and re-emit loosely structured XML without a schema.

Progressive API Disclosure:
- Level 1: Simple functions - marshall(), unmarshall()
- Level 2: Configured codec - HyperXML class with a CodecConfig
- Tree building and navigation - XMLNode
"""

__version__ = "0.1.0"
__author__ = "HyperXML Team"

# Level 1: simple functions
from .codec import HyperXML, marshall, unmarshall

# Level 2: configuration
from .shared.config import CodecConfig, ConfigError, ConfigValidationError

# Tree
from .tree import XMLNode

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: simple conversion functions
    "marshall",
    "unmarshall",

    # Level 2: configured codec
    "HyperXML",
    "CodecConfig",
    "ConfigError",
    "ConfigValidationError",

    # Tree
    "XMLNode",
]
