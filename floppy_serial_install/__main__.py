"""
Entry point for the floppy serial install generator.

Allows running as: python -m floppy_serial_install
"""

import argparse
import sys

from . import __version__
from .commands import cmd_generate
from .constants import DEFAULT_RAMP_LENGTH, DEFAULT_SEGMENT_SIZE, LINE_START_PAD_LENGTH
from .formatter import OutputFormatter
from .logging_config import setup_logging, QUIET, NORMAL, VERBOSE


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog='floppy_serial_install',
        description='Generate Apple II monitor commands that write one track of a '
                    'ProDOS-ordered (.po) disk image through the resident DOS 3.3 RWTS.',
        epilog='Send the output to the Apple II over the serial link after booting DOS 3.3. '
               'Lines end with a carriage return only.'
    )

    parser.add_argument('image', help='Disk image file in ProDOS sector order (e.g. disk.po)')
    parser.add_argument('track', help='Track to write (0-34)')

    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show detailed output')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress non-essential output')
    parser.add_argument('-o', '--output', metavar='FILE',
                        help='Write the script to FILE instead of stdout')
    parser.add_argument('--segment-size', type=int, default=DEFAULT_SEGMENT_SIZE, metavar='N',
                        help=f'Bytes per fill command (default {DEFAULT_SEGMENT_SIZE})')
    parser.add_argument('--ramp-length', type=int, default=DEFAULT_RAMP_LENGTH, metavar='N',
                        help=f'Ramp steps before the track transfer (default {DEFAULT_RAMP_LENGTH})')
    parser.add_argument('--pad-length', type=int, default=LINE_START_PAD_LENGTH, metavar='N',
                        help=f'Spaces at the start of each line (default {LINE_START_PAD_LENGTH})')
    parser.add_argument('--no-reorder', action='store_true',
                        help='Image is already in DOS 3.3 sector order; do not reorder')
    parser.add_argument('--strict', action='store_true',
                        help='Fail instead of emitting short commands when the image is truncated')
    parser.add_argument('--summary', action='store_true',
                        help='Report command counts on stderr when done')
    parser.add_argument('--json', action='store_true',
                        help='Report status as JSON on stderr')

    args = parser.parse_args(argv)

    if args.quiet:
        setup_logging(level=QUIET)
    elif args.verbose:
        setup_logging(level=VERBOSE)
    else:
        setup_logging(level=NORMAL)

    formatter = OutputFormatter(json_mode=args.json)
    return cmd_generate(args, formatter)


if __name__ == '__main__':
    sys.exit(main())
