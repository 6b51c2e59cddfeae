"""
Apple II Floppy Serial Install

Turns a ProDOS-ordered Apple II disk image into a script of system monitor
commands which, sent over a serial link, writes one track of a Disk II
floppy through the DOS 3.3 RWTS routine already in memory.
"""

from .constants import (
    CLIENT_PROGRAM_ADDRESS,
    DEFAULT_RAMP_LENGTH,
    DEFAULT_SEGMENT_SIZE,
    IMAGE_SIZE,
    LINE_START_PAD_LENGTH,
    LINE_TERMINATOR,
    SECTOR_SIZE,
    SECTORS_PER_TRACK,
    TRACK_BUFFER_ADDRESS,
    TRACK_COUNT,
    TRACK_SIZE,
)
from .exceptions import (
    DiskImageError,
    ImageBoundsError,
    LinkConfigError,
    MappingError,
    SerialInstallError,
    TrackParseError,
    TrackRangeError,
    TruncatedImageError,
)
from .models import (
    LinkConfig,
    PRODOS_TO_DOS33_MAPPING,
    ScriptSummary,
    SectorOrderMapping,
    TrackNumber,
)
from .image import DiskImage, reorder_sectors, track_sector_offset
from .encoder import (
    MemorySegmentEncoder,
    encode_segment,
    format_address,
    format_execute,
    format_hex_bytes,
)
from .client_program import (
    CLIENT_PROGRAM_SIZE,
    CLIENT_PROGRAM_TEMPLATE,
    TRACK_PARAMETER_OFFSET,
    build_client_program,
)
from .generator import ScriptGenerator, generate_script
from .formatter import OutputFormatter
from .commands import cmd_generate

__version__ = "1.0.0"

__all__ = [
    # Image and reorder
    "DiskImage",
    "reorder_sectors",
    "track_sector_offset",
    # Data models
    "LinkConfig",
    "PRODOS_TO_DOS33_MAPPING",
    "ScriptSummary",
    "SectorOrderMapping",
    "TrackNumber",
    # Encoding
    "MemorySegmentEncoder",
    "encode_segment",
    "format_address",
    "format_execute",
    "format_hex_bytes",
    # Client program
    "CLIENT_PROGRAM_SIZE",
    "CLIENT_PROGRAM_TEMPLATE",
    "TRACK_PARAMETER_OFFSET",
    "build_client_program",
    # Generation
    "ScriptGenerator",
    "generate_script",
    "cmd_generate",
    # Output
    "OutputFormatter",
    # Exceptions
    "SerialInstallError",
    "DiskImageError",
    "ImageBoundsError",
    "TruncatedImageError",
    "TrackRangeError",
    "TrackParseError",
    "LinkConfigError",
    "MappingError",
    # Constants
    "CLIENT_PROGRAM_ADDRESS",
    "DEFAULT_RAMP_LENGTH",
    "DEFAULT_SEGMENT_SIZE",
    "IMAGE_SIZE",
    "LINE_START_PAD_LENGTH",
    "LINE_TERMINATOR",
    "SECTOR_SIZE",
    "SECTORS_PER_TRACK",
    "TRACK_BUFFER_ADDRESS",
    "TRACK_COUNT",
    "TRACK_SIZE",
]
