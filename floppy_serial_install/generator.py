"""
Monitor script generation: track loader, client program loader and executor.

The script for one track is, in order:

1. ramp: the first track segment repeated with growing byte counts,
2. the 4096 byte track, one segment per line, into $2000-$2FFF,
3. the RWTS client routine into $0C00,
4. C00G.

The ramp exists because the monitor drops a variable number of characters
at the start of each line while it processes the previous one. Starting
with short lines settles that loss to 12 or 13 pad characters per line at
2400 baud, 7 data bits, 1 stop bit.
"""

from typing import TextIO

from .client_program import CLIENT_PROGRAM_SIZE, build_client_program
from .constants import CLIENT_PROGRAM_ADDRESS, TRACK_BUFFER_ADDRESS, TRACK_SIZE
from .encoder import MemorySegmentEncoder
from .image import DiskImage, reorder_sectors, track_sector_offset
from .logging_config import get_logger
from .models import LinkConfig, PRODOS_TO_DOS33_MAPPING, ScriptSummary, SectorOrderMapping, TrackNumber

log = get_logger(__name__)


class ScriptGenerator:
    """Emits the monitor commands for one track to a text stream."""

    def __init__(self, stream: TextIO, config: LinkConfig | None = None):
        self.config = config or LinkConfig()
        self.encoder = MemorySegmentEncoder(stream, pad=self.config.pad, strict=self.config.strict)

    def load_track(self, image: DiskImage, track: int) -> tuple[int, int]:
        """
        Emit the ramp and the commands filling $2000-$2FFF with one track.

        Returns:
            (ramp command count, main command count)

        Raises:
            TrackRangeError: if track is outside [0, 34]
        """
        track = TrackNumber(track)
        segment_size = self.config.segment_size
        source = image.data
        source_start = track_sector_offset(track, 0)

        ramp = self.config.ramp_counts()
        for count in ramp:
            self.encoder.fill(source, source_start, count, TRACK_BUFFER_ADDRESS)

        main = 0
        written = 0
        address = TRACK_BUFFER_ADDRESS
        while written < TRACK_SIZE:
            count = min(segment_size, TRACK_SIZE - written)
            self.encoder.fill(source, source_start + written, count, address)
            address += segment_size
            written += segment_size
            main += 1

        log.debug("track %d: %d ramp and %d fill commands", track, len(ramp), main)
        return len(ramp), main

    def load_client_program(self, track: int) -> int:
        """
        Emit the commands loading the RWTS client routine at $0C00.

        Returns:
            Number of commands emitted
        """
        program = build_client_program(track)
        segment_size = self.config.segment_size

        commands = 0
        offset = 0
        address = CLIENT_PROGRAM_ADDRESS
        while offset < CLIENT_PROGRAM_SIZE:
            count = min(segment_size, CLIENT_PROGRAM_SIZE - offset)
            self.encoder.fill(program, offset, count, address)
            address += segment_size
            offset += segment_size
            commands += 1

        log.debug("client program: %d bytes in %d commands", CLIENT_PROGRAM_SIZE, commands)
        return commands

    def execute(self, track: int) -> None:
        """Emit the command that runs the client routine."""
        log.info("executing binary client program to write track %d", track)
        self.encoder.execute(CLIENT_PROGRAM_ADDRESS)


def generate_script(
    image: DiskImage,
    track: int,
    stream: TextIO,
    config: LinkConfig | None = None,
    reorder: bool = True,
    mapping: SectorOrderMapping = PRODOS_TO_DOS33_MAPPING
) -> ScriptSummary:
    """
    Write the full monitor script for one track.

    Args:
        image: Loaded disk image, reordered in place unless `reorder` is False
        track: Track to write, 0-34
        stream: Text stream receiving the commands
        config: Serial link tuning (defaults to 8 byte segments, 8 step ramp)
        reorder: Apply the ProDOS to DOS 3.3 sector reorder first
        mapping: Sector order mapping used by the reorder

    Returns:
        ScriptSummary describing what was emitted
    """
    track = TrackNumber(track)
    generator = ScriptGenerator(stream, config)

    if reorder:
        reorder_sectors(image, mapping)

    summary = ScriptSummary(
        track=int(track),
        segment_size=generator.config.segment_size,
        reordered=image.reordered,
    )
    summary.ramp_commands, summary.track_commands = generator.load_track(image, track)
    summary.client_commands = generator.load_client_program(track)
    generator.execute(track)
    summary.execute_commands = 1

    summary.data_bytes = generator.encoder.data_bytes
    summary.characters = generator.encoder.characters
    summary.clamped_segments = list(generator.encoder.clamped)
    if summary.clamped_segments:
        log.warning(
            "%d command(s) were cut short because the image ends early",
            len(summary.clamped_segments)
        )
    return summary
