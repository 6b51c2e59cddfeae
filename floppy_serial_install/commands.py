"""
Command handler for the floppy serial install generator.
"""

import io
import sys

from .exceptions import SerialInstallError
from .formatter import OutputFormatter
from .generator import generate_script
from .image import DiskImage
from .logging_config import get_logger
from .models import LinkConfig, TrackNumber

log = get_logger(__name__)


def cmd_generate(args, formatter: OutputFormatter) -> int:
    """Write the monitor script that installs one track of a disk image."""
    try:
        track = TrackNumber.parse(str(args.track))
        config = LinkConfig(
            segment_size=getattr(args, 'segment_size', LinkConfig.segment_size),
            ramp_length=getattr(args, 'ramp_length', LinkConfig.ramp_length),
            pad_length=getattr(args, 'pad_length', LinkConfig.pad_length),
            strict=getattr(args, 'strict', False),
        )
        reorder = not getattr(args, 'no_reorder', False)
        output = getattr(args, 'output', None)

        image = DiskImage.from_file(args.image)

        # Nothing reaches the destination unless the whole script was generated
        buffer = io.StringIO(newline='')
        summary = generate_script(image, track, buffer, config, reorder=reorder)
        script = buffer.getvalue()

        if output and output != '-':
            try:
                # newline='' keeps the CR terminators exactly as written
                with open(output, 'w', encoding='ascii', newline='') as stream:
                    stream.write(script)
            except OSError as e:
                raise SerialInstallError(f"Cannot write script: {e}") from e
            destination = output
        else:
            sys.stdout.write(script)
            sys.stdout.flush()
            destination = '<stdout>'

        if getattr(args, 'summary', False) or formatter.json_mode:
            formatter.script_summary(summary, destination)
        return 0

    except SerialInstallError as e:
        formatter.error(str(e))
        return 1
    except Exception as e:
        log.debug("unexpected failure", exc_info=True)
        formatter.error(f"Unexpected error: {e}")
        return 1
