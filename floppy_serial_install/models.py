"""
Data model classes shared by the reorder pass and the script generators.
"""

from dataclasses import dataclass, field
from typing import Iterator

from .constants import (
    DEFAULT_RAMP_LENGTH,
    DEFAULT_SEGMENT_SIZE,
    FIRST_SECTOR,
    FIRST_TRACK,
    LAST_SECTOR,
    LAST_TRACK,
    LINE_START_PAD_LENGTH,
    MONITOR_LINE_LIMIT,
    SECTORS_PER_TRACK,
    TRACK_COUNT,
)
from .exceptions import LinkConfigError, MappingError, TrackParseError, TrackRangeError


class TrackNumber(int):
    """A track index validated against the 35 track range [0, 34]."""

    def __new__(cls, value: int) -> 'TrackNumber':
        if isinstance(value, bool) or not isinstance(value, int):
            raise TrackRangeError(f"illegal track number encountered: {value!r}")
        if value < FIRST_TRACK or value > LAST_TRACK:
            raise TrackRangeError(f"illegal track number encountered: {value}")
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, text: str) -> 'TrackNumber':
        """Parse a decimal track argument."""
        if not isinstance(text, str) or not (text.isascii() and text.isdigit()):
            raise TrackParseError(f"invalid track number: {text!r}")
        return cls(int(text, 10))

    @classmethod
    def all(cls) -> Iterator['TrackNumber']:
        """Iterate over every track of the disk."""
        for track in range(TRACK_COUNT):
            yield cls(track)

    def __repr__(self) -> str:
        return f"TrackNumber({int(self)})"


@dataclass(frozen=True)
class SectorOrderMapping:
    """
    Sector permutation within a track, expressed as disjoint swap pairs.

    Sectors not named in any pair are fixed points.
    """
    name: str
    swap_pairs: tuple[tuple[int, int], ...]

    def __post_init__(self):
        seen: set[int] = set()
        for pair in self.swap_pairs:
            if len(pair) != 2:
                raise MappingError(f"Swap pair must name two sectors: {pair}")
            for sector in pair:
                if sector < FIRST_SECTOR or sector > LAST_SECTOR:
                    raise MappingError(f"Sector {sector} out of range in mapping '{self.name}'")
                if sector in seen:
                    raise MappingError(f"Sector {sector} appears twice in mapping '{self.name}'")
                seen.add(sector)

    @property
    def fixed_points(self) -> tuple[int, ...]:
        """Sectors left in place by the mapping."""
        moved = {sector for pair in self.swap_pairs for sector in pair}
        return tuple(s for s in range(SECTORS_PER_TRACK) if s not in moved)

    def target_of(self, sector: int) -> int:
        """Return the sector position the given sector's data ends up in."""
        for a, b in self.swap_pairs:
            if sector == a:
                return b
            if sector == b:
                return a
        return sector

    def physical_order(self) -> tuple[int, ...]:
        """Source sector written to each physical sector 0..15."""
        return tuple(self.target_of(s) for s in range(SECTORS_PER_TRACK))


# Found by trial against a nibble editor: .PO tracks must be written in the
# physical order 0x00,0x0E,0x0D,...,0x02,0x01,0x0F. This differs from the
# published ProDOS/DOS 3.3 skew tables and is kept as found.
PRODOS_TO_DOS33_MAPPING = SectorOrderMapping(
    name='prodos-to-dos33',
    swap_pairs=(
        (0x01, 0x0E),
        (0x02, 0x0D),
        (0x03, 0x0C),
        (0x04, 0x0B),
        (0x05, 0x0A),
        (0x06, 0x09),
        (0x07, 0x08),
    ),
)


@dataclass
class LinkConfig:
    """
    Serial link tuning for the generated command stream.

    Defaults were found by trial at 2400 baud, 7 data bits, 1 stop bit.
    """
    segment_size: int = DEFAULT_SEGMENT_SIZE
    ramp_length: int = DEFAULT_RAMP_LENGTH
    pad_length: int = LINE_START_PAD_LENGTH
    strict: bool = False

    def __post_init__(self):
        if self.segment_size < 1:
            raise LinkConfigError(f"Segment size must be at least 1: {self.segment_size}")
        if self.ramp_length < 0:
            raise LinkConfigError(f"Ramp length cannot be negative: {self.ramp_length}")
        if self.ramp_length > self.segment_size:
            raise LinkConfigError(
                f"Ramp length {self.ramp_length} exceeds segment size {self.segment_size}"
            )
        if self.pad_length < 0:
            raise LinkConfigError(f"Pad length cannot be negative: {self.pad_length}")
        if self.max_line_length > MONITOR_LINE_LIMIT:
            raise LinkConfigError(
                f"Segment size {self.segment_size} with pad {self.pad_length} gives "
                f"{self.max_line_length} character lines (monitor limit {MONITOR_LINE_LIMIT})"
            )

    @property
    def pad(self) -> str:
        return ' ' * self.pad_length

    @property
    def max_line_length(self) -> int:
        """Longest fill line before the terminator: pad, 4 digit address, colon, bytes."""
        return self.pad_length + 4 + 1 + 3 * self.segment_size - 1

    def ramp_counts(self) -> list[int]:
        """Byte counts of the ramp commands, shortest first, ending at a full segment."""
        start = self.segment_size - self.ramp_length
        return list(range(start, self.segment_size + 1))


@dataclass
class ScriptSummary:
    """Statistics for one generated script."""
    track: int
    segment_size: int
    reordered: bool = False
    ramp_commands: int = 0
    track_commands: int = 0
    client_commands: int = 0
    execute_commands: int = 0
    data_bytes: int = 0
    characters: int = 0
    clamped_segments: list[int] = field(default_factory=list)

    @property
    def total_commands(self) -> int:
        return self.ramp_commands + self.track_commands + self.client_commands + self.execute_commands

    def to_dict(self) -> dict:
        return {
            "track": self.track,
            "segment_size": self.segment_size,
            "reordered": self.reordered,
            "ramp_commands": self.ramp_commands,
            "track_commands": self.track_commands,
            "client_commands": self.client_commands,
            "execute_commands": self.execute_commands,
            "total_commands": self.total_commands,
            "data_bytes": self.data_bytes,
            "characters": self.characters,
            "clamped_segments": list(self.clamped_segments),
        }
