"""
=============================================================================
MESSAGE BODY
=============================================================================

The decoded payload of a response: bytes after transfer decoding
(chunked/identity) AND content decoding (gzip/deflate/br) are done.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                           Body                                       │
    ├─────────────────────────────────────────────────────────────────────┤
    │   body[0]        → 72             (one byte, as int)                │
    │   body[1:3]      → b"el"          (slice, as bytes)                 │
    │   len(body)      → 5                                                 │
    │   bytes(body)    → b"Hello"                                          │
    │   body.open()    → fresh io.BytesIO reader, independent per call    │
    │   body.hexdump() → "0000 : 48 65 6C 6C 6F ... - H e l l o ..."       │
    └─────────────────────────────────────────────────────────────────────┘

The bytes never change after construction; there is no shared cursor.

=============================================================================
"""

import io
from typing import Iterator, Union


ROW_WIDTH = 16


class Body:
    """Immutable decoded body bytes with read-only access."""

    __slots__ = ("_data",)

    def __init__(self, data: Union[bytes, bytearray, memoryview] = b""):
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    def open(self) -> io.BytesIO:
        """Return a new reader positioned at the first byte."""
        return io.BytesIO(self._data)

    def hexdump(self) -> str:
        """
        Render the bytes as a hex/ASCII table, 16 bytes per row.

        =====================================================================
        ROW FORMAT
        =====================================================================

            0010 : 48 65 6C 6C 6F 00 ...       - H e l l o . ...
            ──┬─   ───────────┬───────────       ────────┬────────
              │               │                          │
         offset (hex)   16 cells "XX"            16 cells: printable
                        "  " past the end        ASCII or ".", " " past
                                                 the end

        =====================================================================
        """
        rows = []
        for offset in range(0, len(self._data), ROW_WIDTH):
            row = self._data[offset:offset + ROW_WIDTH]
            hex_cells = [f"{byte:02X}" for byte in row]
            hex_cells += ["  "] * (ROW_WIDTH - len(row))
            text_cells = [chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in row]
            text_cells += [" "] * (ROW_WIDTH - len(row))
            rows.append(f"{offset:04X} : {' '.join(hex_cells)} - {' '.join(text_cells)}")
        return "\n".join(rows)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Body):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray)):
            return self._data == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Body({self._data!r})"
