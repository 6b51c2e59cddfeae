"""
Custom exceptions for the Apple II floppy serial install generator.
"""


class SerialInstallError(Exception):
    """Base exception for all serial install errors."""
    pass


class DiskImageError(SerialInstallError):
    """Error reading or manipulating a disk image."""
    pass


class ImageBoundsError(DiskImageError):
    """Access outside the data held by a disk image."""
    pass


class TruncatedImageError(DiskImageError):
    """Segment runs past the end of the image (strict mode only)."""
    pass


class TrackRangeError(SerialInstallError):
    """Track number outside the range of a 35 track disk."""
    pass


class TrackParseError(TrackRangeError):
    """Track argument is not a decimal number."""
    pass


class LinkConfigError(SerialInstallError):
    """Segment size, ramp length or pad length cannot be used."""
    pass


class MappingError(SerialInstallError):
    """Sector order mapping is not a valid set of swap pairs."""
    pass
