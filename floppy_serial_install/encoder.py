"""
Apple II monitor command rendering.

A fill command stores bytes starting at an address:

    <pad>2000:00 01 02 03 04 05 06 07<CR>

and an execute command jumps to an address:

    <pad>C00G<CR>
"""

from typing import TextIO

from .constants import (
    ADDRESS_SEPARATOR,
    EXECUTE_COMMAND,
    LINE_START_PAD_LENGTH,
    LINE_TERMINATOR,
)
from .exceptions import TruncatedImageError
from .logging_config import get_logger

log = get_logger(__name__)

LINE_START_PAD = ' ' * LINE_START_PAD_LENGTH


def format_address(address: int) -> str:
    """Render a target address as uppercase hex; a negative address renders empty."""
    if address < 0:
        return ''
    return f"{address:02X}"


def format_hex_bytes(data: bytes | bytearray | memoryview) -> str:
    """Render bytes as space separated uppercase hex pairs."""
    return ' '.join(f"{b:02X}" for b in data)


def clamp_segment(source_length: int, start: int, count: int) -> int:
    """Number of bytes actually available for a segment."""
    end = min(start + count, source_length)
    return max(end - start, 0)


def encode_segment(
    source: bytes | bytearray | memoryview,
    start: int,
    count: int,
    address: int,
    pad: str = LINE_START_PAD
) -> str:
    """
    Render one fill command for `count` bytes of `source` from `start`.

    A segment running past the end of `source` is cut short without error.
    """
    available = clamp_segment(len(source), start, count)
    data = source[start:start + available]
    return f"{pad}{format_address(address)}{ADDRESS_SEPARATOR}{format_hex_bytes(data)}{LINE_TERMINATOR}"


def format_execute(address: int, pad: str = LINE_START_PAD) -> str:
    """Render the command that starts execution at `address`."""
    return f"{pad}{format_address(address)}{EXECUTE_COMMAND}{LINE_TERMINATOR}"


class MemorySegmentEncoder:
    """Writes monitor commands to a text stream and keeps count of them."""

    def __init__(self, stream: TextIO, pad: str = LINE_START_PAD, strict: bool = False):
        self.stream = stream
        self.pad = pad
        self.strict = strict
        self.commands = 0
        self.data_bytes = 0
        self.characters = 0
        self.clamped: list[int] = []

    def _emit(self, line: str) -> None:
        self.stream.write(line)
        self.commands += 1
        self.characters += len(line)

    def fill(self, source: bytes | bytearray | memoryview, start: int, count: int, address: int) -> int:
        """
        Emit a fill command and return the number of bytes it carries.

        Raises:
            TruncatedImageError: in strict mode, if the source is too short
        """
        available = clamp_segment(len(source), start, count)
        if available < count:
            if self.strict:
                raise TruncatedImageError(
                    f"Segment at ${format_address(address) or '----'} needs {count} bytes "
                    f"from offset 0x{start:05X}, only {available} available"
                )
            log.debug("segment at offset 0x%05X clamped from %d to %d bytes", start, count, available)
            self.clamped.append(address)

        self._emit(encode_segment(source, start, count, address, self.pad))
        self.data_bytes += available
        return available

    def execute(self, address: int) -> None:
        """Emit an execute command."""
        self._emit(format_execute(address, self.pad))
