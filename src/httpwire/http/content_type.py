"""
=============================================================================
CONTENT-TYPE PARSER
=============================================================================

Splits a Content-Type value into its media type and attributes:

    text/html; charset=UTF-8; boundary = x
    ────┬────  ──────┬──────  ──────┬─────
        │            │              │
    media type   attribute      attribute (both sides trimmed)

Rules:
    - A "/" is mandatory.
    - No ";" after the "/" → the whole value is the media type.
    - Every ";"-separated segment after the media type needs an "=".
      Split at the first "=", trim both sides.

Unlike the header parser, attribute names and values ARE trimmed. The
media type is returned verbatim.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Optional

from .errors import MissingSeparatorError
from .headers import HeaderField, HeaderList


@dataclass(frozen=True)
class ContentType:
    """Parsed Content-Type: media type plus ordered attributes."""

    media_type: str
    attributes: HeaderList = field(default_factory=HeaderList)

    @classmethod
    def parse(cls, value: str) -> "ContentType":
        """
        Parse a Content-Type header value.

        Raises:
            MissingSeparatorError: If "/" is missing, or an attribute
                                   segment has no "=".
        """
        slash = value.find("/")
        if slash < 0:
            raise MissingSeparatorError(value, "/")

        semicolon = value.find(";", slash + 1)
        if semicolon < 0:
            return cls(value)

        attributes = []
        for segment in value[semicolon + 1:].split(";"):
            name, separator, attribute = segment.partition("=")
            if not separator:
                raise MissingSeparatorError(segment, "=")
            attributes.append(HeaderField(name.strip(), attribute.strip()))

        return cls(value[:semicolon], HeaderList(attributes))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """First attribute value named `name` (case-sensitive)."""
        return self.attributes.get(name, default)

    @property
    def charset(self) -> Optional[str]:
        return self.get("charset")
