"""
Constants for the Apple II floppy serial install generator.
"""

# Disk geometry (DOS 3.3 / ProDOS 5.25" disk)
TRACK_COUNT = 35
SECTORS_PER_TRACK = 16
SECTOR_SIZE = 256
TRACK_SIZE = SECTOR_SIZE * SECTORS_PER_TRACK  # 4096 bytes per track
IMAGE_SIZE = TRACK_SIZE * TRACK_COUNT          # 143360 bytes per image

FIRST_TRACK = 0
LAST_TRACK = TRACK_COUNT - 1
FIRST_SECTOR = 0x00
LAST_SECTOR = SECTORS_PER_TRACK - 1

# Target memory layout
TRACK_BUFFER_ADDRESS = 0x2000    # 16 pages, $2000-$2FFF
CLIENT_PROGRAM_ADDRESS = 0x0C00  # RWTS client routine and its IOB

# Monitor command line format
LINE_START_PAD_LENGTH = 16   # Spaces absorbing bytes lost while the monitor parses
LINE_TERMINATOR = '\r'       # Monitor accepts CR only
ADDRESS_SEPARATOR = ':'
EXECUTE_COMMAND = 'G'
MONITOR_LINE_LIMIT = 255     # GETLN input buffer, longer lines are cancelled

# Serial link defaults (2400 baud, 7 data bits, 1 stop bit)
DEFAULT_SEGMENT_SIZE = 8
DEFAULT_RAMP_LENGTH = 8
