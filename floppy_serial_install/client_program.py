"""
6502 RWTS client routine loaded at $0C00.

The routine calls the resident DOS 3.3 RWTS (through the $03D9 entry) once
per sector, following the example in "The DOS Manual" (Apple Computer, 1981,
pages 94-98). After each successful write it bumps the IOB sector and
buffer page, and returns after sector $0F.

Layout relative to $0C00:

    $00-$1B  code
    $1C-$2F  I/O control block (IOB)
    $30-$33  device characteristics table (DCT)
"""

from .constants import (
    CLIENT_PROGRAM_ADDRESS,
    FIRST_SECTOR,
    LAST_SECTOR,
    TRACK_BUFFER_ADDRESS,
    TRACK_COUNT,
)
from .models import TrackNumber

IOB_OFFSET = 0x1C
IOB_TRACK_OFFSET = IOB_OFFSET + 0x04
IOB_SECTOR_OFFSET = IOB_OFFSET + 0x05
IOB_BUFFER_PAGE_OFFSET = IOB_OFFSET + 0x09
IOB_COMMAND_OFFSET = IOB_OFFSET + 0x0C
DCT_OFFSET = 0x30

# Byte patched with the track being written
TRACK_PARAMETER_OFFSET = IOB_TRACK_OFFSET

RWTS_COMMAND_WRITE = 0x02
RWTS_ENTRY = 0x03D9

CLIENT_PROGRAM_TEMPLATE = bytes([
    0xA9, 0x0C,              # $00 LDA #>IOB
    0xA0, 0x1C,              # $02 LDY #<IOB
    0x20, 0xD9, 0x03,        # $04 JSR RWTS
    0xB0, 0x12,              # $07 BCS brk (error)
    0xA9, 0x0F,              # $09 LDA #$0F
    0xCD, 0x21, 0x0C,        # $0B CMP IOB sector
    0xF0, 0x0A,              # $0E BEQ rts (last sector written)
    0xEE, 0x21, 0x0C,        # $10 INC IOB sector
    0xEE, 0x25, 0x0C,        # $13 INC IOB buffer page
    0xF0, 0xE8,              # $16 BEQ $00
    0xD0, 0xE6,              # $18 BNE $00
    0x60,                    # $1A RTS
    0x00,                    # $1B BRK
    # IOB
    0x01,                    # $1C table type
    0x60,                    # $1D slot * 16
    0x01,                    # $1E drive
    0x00,                    # $1F volume (any)
    0x00,                    # $20 track (patched)
    0x00,                    # $21 sector
    0x30, 0x0C,              # $22 DCT address
    0x00, 0x20,              # $24 buffer address
    0x00, 0x00,              # $26 unused
    RWTS_COMMAND_WRITE,      # $28 command
    0x00,                    # $29 return code
    0x00,                    # $2A actual volume
    0x60,                    # $2B previous slot * 16
    0x01,                    # $2C previous drive
    0x00, 0x00, 0x00,        # $2D unused
    # DCT
    0x00, 0x01, 0xEF, 0xD8,  # $30 device type, phases/track, motor count
])

CLIENT_PROGRAM_SIZE = len(CLIENT_PROGRAM_TEMPLATE)

# Encoded IOB value for each track
TRACK_BYTE_VALUES = bytes(range(TRACK_COUNT))


def _word(offset: int) -> int:
    """Little-endian 16 bit operand stored at `offset` in the template."""
    return int.from_bytes(CLIENT_PROGRAM_TEMPLATE[offset:offset + 2], 'little')


def _check_template() -> None:
    template = CLIENT_PROGRAM_TEMPLATE
    iob_address = CLIENT_PROGRAM_ADDRESS + IOB_OFFSET
    sector_address = CLIENT_PROGRAM_ADDRESS + IOB_SECTOR_OFFSET
    buffer_page_address = CLIENT_PROGRAM_ADDRESS + IOB_BUFFER_PAGE_OFFSET

    if (template[0x01], template[0x03]) != (iob_address >> 8, iob_address & 0xFF):
        raise ValueError("Client program does not pass its IOB to RWTS")
    if _word(0x05) != RWTS_ENTRY:
        raise ValueError("Client program does not call the RWTS entry")
    if template[0x0A] != LAST_SECTOR or _word(0x0C) != sector_address:
        raise ValueError("Client program does not stop after the last sector")
    if _word(0x11) != sector_address or _word(0x14) != buffer_page_address:
        raise ValueError("Client program does not advance the IOB sector and buffer page")
    if template[TRACK_PARAMETER_OFFSET] != 0x00 or template[IOB_SECTOR_OFFSET] != FIRST_SECTOR:
        raise ValueError("Client program must start at track parameter 0, sector 0")
    if template[IOB_COMMAND_OFFSET] != RWTS_COMMAND_WRITE:
        raise ValueError("Client program IOB command is not a write")
    if _word(IOB_OFFSET + 0x06) != CLIENT_PROGRAM_ADDRESS + DCT_OFFSET:
        raise ValueError("Client program IOB does not point at its DCT")
    if _word(IOB_BUFFER_PAGE_OFFSET - 1) != TRACK_BUFFER_ADDRESS:
        raise ValueError("Client program IOB does not point at the track buffer")


_check_template()


def track_parameter_byte(track: int) -> int:
    """Look up the IOB byte for a track."""
    return TRACK_BYTE_VALUES[TrackNumber(track)]


def build_client_program(track: int) -> bytes:
    """Return the client routine with the IOB track byte patched in."""
    program = bytearray(CLIENT_PROGRAM_TEMPLATE)
    program[TRACK_PARAMETER_OFFSET] = track_parameter_byte(track)
    return bytes(program)
