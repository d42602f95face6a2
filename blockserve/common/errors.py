class DataBlockError(Exception):
    """Base class for data block conversion failures."""


class EncodeError(DataBlockError):
    """The gzip writer failed to compress a payload."""


class DecodeError(DataBlockError):
    """Stored bytes are not a valid gzip stream."""
