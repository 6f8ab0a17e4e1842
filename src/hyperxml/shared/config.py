"""Configuration for the HyperXML codec.

Configuration objects are plain dataclasses validated on construction. A
:class:`CodecConfig` is handed to each :class:`~hyperxml.codec.HyperXML`
instance or ``unmarshall`` call; there is no global configuration.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional

DEFAULT_CHUNK_SIZE = 8192


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class CodecConfig:
    """Settings for marshalling and unmarshalling.

    Attributes:
        chunk_size: Number of bytes handed to the streaming tokenizer per step
        resolve_entities: Expand entities declared in an internal DTD subset
        no_network: Forbid the tokenizer from fetching external resources
        huge_tree: Lift libxml2's safety limits on depth and text size. With
            the default, documents nested deeper than 255 elements are
            rejected by the tokenizer even though marshall emits them
        strip_text: Strip surrounding XML whitespace (space, tab, CR, LF)
            from stored element values
        correlation_id: Optional correlation ID attached to log records
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    resolve_entities: bool = False
    no_network: bool = True
    huge_tree: bool = False
    strip_text: bool = True
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate codec configuration."""
        if not isinstance(self.chunk_size, int) or isinstance(self.chunk_size, bool):
            raise ValueError("chunk_size must be an integer")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")

    def override(self, **kwargs: Any) -> "CodecConfig":
        """Create a new configuration with specific overrides.

        Raises:
            ConfigValidationError: If a keyword names no field or a value is invalid
        """
        known = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in known:
                raise ConfigValidationError(
                    f"Unknown configuration field: {key}",
                    field_name=key,
                    suggestions=sorted(known),
                )
        try:
            return replace(self, **kwargs)
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        try:
            return cls(**{key: value for key, value in data.items() if key in known})
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e
