"""
In-memory Apple II disk image and the ProDOS to DOS 3.3 sector reorder pass.

The image is read once, reordered once in place, and only read afterwards
by the script generators.
"""

from pathlib import Path

from .constants import (
    IMAGE_SIZE,
    SECTOR_SIZE,
    SECTORS_PER_TRACK,
    TRACK_COUNT,
    TRACK_SIZE,
)
from .exceptions import DiskImageError, ImageBoundsError
from .logging_config import get_logger
from .models import PRODOS_TO_DOS33_MAPPING, SectorOrderMapping, TrackNumber

log = get_logger(__name__)


def track_sector_offset(track: int, sector: int) -> int:
    """Linear offset of a track/sector in a raw image (0x000TTSBB)."""
    return TRACK_SIZE * track + SECTOR_SIZE * sector


class DiskImage:
    """
    Owned, bounds-checked byte container for a 35 track disk image.

    Sector level access raises ImageBoundsError instead of reading past the
    data that was loaded. Fill commands read through `data` and are
    clamped by the encoder.
    """

    def __init__(self, data: bytes | bytearray = b''):
        self._data = bytearray(data)
        self.reordered = False

    @classmethod
    def from_file(cls, image_path: str | Path) -> 'DiskImage':
        """Read a whole disk image file into memory."""
        try:
            data = Path(image_path).read_bytes()
        except OSError as e:
            raise DiskImageError(f"Cannot read disk image: {e}") from e

        log.info("read %d bytes from file %s", len(data), image_path)
        if len(data) != IMAGE_SIZE:
            log.debug("image size %d differs from nominal %d bytes", len(data), IMAGE_SIZE)
        return cls(data)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> 'DiskImage':
        return cls(data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    @property
    def data(self) -> memoryview:
        """Read-only view of the image bytes."""
        return memoryview(self._data).toreadonly()

    @property
    def is_complete(self) -> bool:
        """True if the image covers all 35 tracks."""
        return len(self._data) >= IMAGE_SIZE

    def _check_sector(self, track: int, sector: int) -> int:
        if sector < 0 or sector >= SECTORS_PER_TRACK:
            raise ImageBoundsError(f"Sector {sector} out of range on track {track}")
        offset = track_sector_offset(track, sector)
        if track < 0 or offset + SECTOR_SIZE > len(self._data):
            raise ImageBoundsError(
                f"Track {track} sector {sector} (offset 0x{offset:05X}) is beyond "
                f"the end of the {len(self._data)} byte image"
            )
        return offset

    def read_sector(self, track: int, sector: int) -> bytes:
        """Return a copy of one 256 byte sector."""
        offset = self._check_sector(track, sector)
        return bytes(self._data[offset:offset + SECTOR_SIZE])

    def write_sector(self, track: int, sector: int, data: bytes | bytearray) -> None:
        """Overwrite one sector with exactly 256 bytes."""
        if len(data) != SECTOR_SIZE:
            raise DiskImageError(f"Invalid sector size: {len(data)}")
        offset = self._check_sector(track, sector)
        self._data[offset:offset + SECTOR_SIZE] = data

    def copy_sector(self, track: int, source_sector: int, destination_sector: int) -> None:
        """Copy one sector over another within the same track."""
        src = self._check_sector(track, source_sector)
        dst = self._check_sector(track, destination_sector)
        self._data[dst:dst + SECTOR_SIZE] = self._data[src:src + SECTOR_SIZE]

    def read_track(self, track: int) -> bytes:
        """Return the 4096 bytes of a track, sector 0 first."""
        start = self._check_sector(track, 0)
        self._check_sector(track, SECTORS_PER_TRACK - 1)
        return bytes(self._data[start:start + TRACK_SIZE])


def reorder_sectors(image: DiskImage, mapping: SectorOrderMapping = PRODOS_TO_DOS33_MAPPING) -> None:
    """
    Reorder every track of the image in place.

    Each pair is exchanged through a single sector sized scratch buffer:
    source into scratch, destination over source, scratch over destination.
    Sectors that are fixed points of the mapping are not touched.

    Raises:
        DiskImageError: if the image was already reordered
        ImageBoundsError: if the image does not hold every sector of every track
    """
    if image.reordered:
        raise DiskImageError("Disk image has already been reordered")
    if not image.is_complete:
        raise ImageBoundsError(
            f"Disk image holds {len(image)} bytes, reordering needs {IMAGE_SIZE}"
        )

    for track in TrackNumber.all():
        for source_sector, destination_sector in mapping.swap_pairs:
            scratch = image.read_sector(track, source_sector)
            image.copy_sector(track, destination_sector, source_sector)
            image.write_sector(track, destination_sector, scratch)

    image.reordered = True
    log.debug("reordered %d tracks using mapping %s", TRACK_COUNT, mapping.name)
