"""
Status output for the floppy serial install generator.

Standard output carries the monitor script, so status and errors are
written to stderr.
"""

import json
import sys
from typing import TextIO

from .models import ScriptSummary


class OutputFormatter:
    """Handle status output (text or JSON)."""

    def __init__(self, json_mode: bool = False, stream: TextIO | None = None):
        self.json_mode = json_mode
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so redirected stderr (tests, pipes) is honoured
        return self._stream if self._stream is not None else sys.stderr

    def error(self, message: str) -> None:
        """Output error message."""
        if self.json_mode:
            output = {"status": "error", "message": message}
            print(json.dumps(output), file=self.stream)
        else:
            print(f"Error: {message}", file=self.stream)

    def script_summary(self, summary: ScriptSummary, destination: str) -> None:
        """Output what was generated for a track."""
        if self.json_mode:
            output = {"status": "success", "output": destination, **summary.to_dict()}
            print(json.dumps(output), file=self.stream)
            return

        print(f"Track {summary.track} -> {destination}", file=self.stream)
        print(f"  Sector order:    {'reordered ProDOS -> DOS 3.3' if summary.reordered else 'as read'}",
              file=self.stream)
        print(f"  Segment size:    {summary.segment_size}", file=self.stream)
        print(f"  Ramp commands:   {summary.ramp_commands}", file=self.stream)
        print(f"  Track commands:  {summary.track_commands}", file=self.stream)
        print(f"  Client commands: {summary.client_commands}", file=self.stream)
        print(f"  Total commands:  {summary.total_commands}", file=self.stream)
        print(f"  Characters:      {summary.characters:,}", file=self.stream)
        if summary.clamped_segments:
            print(f"  Short commands:  {len(summary.clamped_segments)}", file=self.stream)
