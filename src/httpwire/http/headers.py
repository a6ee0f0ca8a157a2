"""
=============================================================================
HTTP HEADER FIELDS
=============================================================================

Ordered, immutable header containers with exact-match lookup.

=============================================================================
HEADER BLOCK ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        HEADER BLOCK                                 │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │    Content-Type: text/html; charset=UTF-8\r\n                       │
    │    ─────┬──────┬┬───────────┬────────────                           │
    │         │      ││           │                                        │
    │       name   ": "         value (verbatim, not trimmed)             │
    │                                                                      │
    │    Content-Length: 1234\r\n                                          │
    │    Set-Cookie: a=1\r\n                                               │
    │    Set-Cookie: b=2\r\n          ← duplicates are kept, in order      │
    │    \r\n                         ← empty line ends the block          │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
LOOKUP RULES
=============================================================================

1. ORDER IS KEPT:
   Fields are stored exactly as received. Serializing a parsed list
   reproduces the same lines in the same order.

2. FIRST MATCH WINS:
   A list may contain the same name several times. Name-based lookup
   only ever observes the FIRST occurrence; later ones are reachable by
   iterating the list.

3. NAMES ARE CASE-SENSITIVE:
   find("content-length") does NOT match "Content-Length". The parser
   never normalizes names, so lookups compare exactly what was sent.

4. SEPARATOR IS EXACTLY ": ":
   "Name:value" (no space) is malformed here. Splitting happens at the
   first ": ", so "X-Time: 12: 30" has value "12: 30".

=============================================================================
"""

import logging
import re
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Optional, Tuple, Union

from .errors import (
    InvalidHeaderValueError,
    MalformedHeaderError,
    MissingHeaderError,
)
from .stream import encode_text, read_line


logger = logging.getLogger(__name__)


SEPARATOR = ": "
CRLF = "\r\n"

# Optional sign and ASCII digits, surrounding ASCII whitespace tolerated
INTEGER_PATTERN = re.compile(r"[ \t\r\n\v\f]*[+-]?[0-9]+[ \t\r\n\v\f]*")


@dataclass(frozen=True)
class HeaderField:
    """
    One header name/value pair.

    Frozen: equality and hashing compare both name and value.
    """

    name: str
    value: str

    def to_line(self) -> str:
        """Render as a wire line: "name: value\\r\\n"."""
        return f"{self.name}{SEPARATOR}{self.value}{CRLF}"

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


FieldLike = Union[HeaderField, Tuple[str, str]]


class HeaderList:
    """
    Immutable ordered sequence of HeaderField.

    =========================================================================
    USAGE
    =========================================================================

        headers = HeaderList([
            ("Host", "example.com:80"),
            ("Accept-Encoding", "gzip, deflate, br"),
        ])

        headers.get("Host")                  # "example.com:80"
        headers.get("X-Missing")             # None
        headers.require("X-Missing")         # raises MissingHeaderError
        headers.require_int("Content-Length")

        headers.serialize(stream)            # write the header block
        HeaderList.parse(stream)             # read a header block

    =========================================================================
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[FieldLike] = ()):
        self._fields: Tuple[HeaderField, ...] = tuple(
            item if isinstance(item, HeaderField) else HeaderField(*item)
            for item in fields
        )

    # =========================================================================
    # PARSING
    # =========================================================================

    @classmethod
    def parse(cls, stream: BinaryIO) -> "HeaderList":
        """
        Read a header block from the stream.

        Consumes lines up to and including the empty line that ends the
        block, leaving the stream positioned at the first body byte.

        Raises:
            TruncatedStreamError: If the stream ends before the empty line.
            MalformedHeaderError: If a line has no ": " separator.
        """
        fields = []
        while True:
            line = read_line(stream)
            if not line:
                break
            fields.append(cls.parse_field(line))

        logger.debug(f"Parsed header block with {len(fields)} fields")
        return cls(fields)

    @staticmethod
    def parse_field(line: str) -> HeaderField:
        """Split one header line at its first ": " (no trimming)."""
        name, separator, value = line.partition(SEPARATOR)
        if not separator:
            raise MalformedHeaderError(line)
        return HeaderField(name, value)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def find(self, name: str) -> Optional[HeaderField]:
        """Return the first field whose name equals `name` exactly."""
        for item in self._fields:
            if item.name == name:
                return item
        return None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first field named `name`, or `default`."""
        item = self.find(name)
        return default if item is None else item.value

    def require(self, name: str) -> str:
        """
        Return the value of the first field named `name`.

        Raises:
            MissingHeaderError: If no such field exists.
        """
        item = self.find(name)
        if item is None:
            raise MissingHeaderError(name)
        return item.value

    def require_int(self, name: str) -> int:
        """
        Return the first field named `name` parsed as a decimal integer.

        Raises:
            MissingHeaderError: If no such field exists.
            InvalidHeaderValueError: If the value is not an integer.
        """
        value = self.require(name)
        if not INTEGER_PATTERN.fullmatch(value):
            raise InvalidHeaderValueError(name, value)
        return int(value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_bytes(self) -> bytes:
        """
        Render the header block as wire bytes.

            Host: example.com\\r\\n
            Accept-Encoding: gzip\\r\\n
            \\r\\n                      ← block terminator

        Raises:
            UnencodableTextError: If any name or value has characters
                                  outside the single-byte range.
        """
        return b"".join(encode_text(item.to_line()) for item in self._fields) + b"\r\n"

    def serialize(self, stream: BinaryIO) -> None:
        """Write the header block (fields then blank line) to the stream."""
        stream.write(self.to_bytes())

    # =========================================================================
    # SEQUENCE PROTOCOL
    # =========================================================================

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return HeaderList(self._fields[index])
        return self._fields[index]

    def __iter__(self) -> Iterator[HeaderField]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderList):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._fields) + "]"

    def __repr__(self) -> str:
        return f"HeaderList({list((item.name, item.value) for item in self._fields)!r})"
