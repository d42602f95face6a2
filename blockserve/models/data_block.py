from typing import Tuple

import structlog

from blockserve.common.errors import DecodeError
from blockserve.utils.compress import compress as gzip_compress
from blockserve.utils.compress import decompress as gzip_decompress

logger = structlog.get_logger()


class DataBlock:
    """
    A block of data that may be held gzip-compressed or uncompressed.
    - compression_speed: prefer fast compression over the best ratio
    - length is the length of the data in its current state, not the original length
    """

    __slots__ = ("_data", "_compressed", "_length", "_compression_speed")

    def __init__(self, data: bytes = b"", compression_speed: bool = True):
        self._data = bytes(data)
        self._compressed = False
        self._length = len(self._data)
        self._compression_speed = compression_speed

    @classmethod
    def specified(cls, data: bytes, compressed: bool, compression_speed: bool = True) -> "DataBlock":
        """Create a block whose data may already be gzip compressed."""
        block = cls(data, compression_speed)
        block._compressed = compressed
        return block

    @property
    def data(self) -> bytes:
        """Raw bytes in the current state."""
        return self._data

    @property
    def length(self) -> int:
        return self._length

    @property
    def compression_speed(self) -> bool:
        return self._compression_speed

    def uncompressed_data(self) -> Tuple[bytes, int]:
        """Return the original data and its length, decompressing a copy if needed."""
        if self._compressed:
            data = gzip_decompress(self._data)
            return data, len(data)
        return self._data, self._length

    def must_data(self) -> bytes:
        """Return the uncompressed data, or empty bytes if it can not be decompressed."""
        try:
            data, _ = self.uncompressed_data()
        except DecodeError as e:
            logger.error("data_block_decompress_failed", error=str(e), length=self._length)
            return b""
        return data

    def gzipped(self) -> Tuple[bytes, int]:
        """Return the compressed data and its length, compressing a copy if needed."""
        if not self._compressed:
            data = gzip_compress(self._data, self._compression_speed)
            return data, len(data)
        return self._data, self._length

    def compress(self) -> None:
        if self._compressed:
            return
        data = gzip_compress(self._data, self._compression_speed)
        self._data, self._compressed, self._length = data, True, len(data)

    def decompress(self) -> None:
        if not self._compressed:
            return
        data = gzip_decompress(self._data)
        self._data, self._compressed, self._length = data, False, len(data)

    def is_compressed(self) -> bool:
        return self._compressed

    def string_length(self) -> str:
        return str(self._length)

    def has_data(self) -> bool:
        return self._length != 0

    def __len__(self):
        return self._length

    def __bool__(self):
        return self.has_data()

    def __str__(self):
        return self.must_data().decode("utf-8", errors="replace")

    def __repr__(self):
        return (f"<{type(self).__name__} length={self._length} "
                f"compressed={self._compressed} speed={self._compression_speed}>")


class FrozenDataBlock(DataBlock):
    """
    Read-only data block. Conversions are still available as views.
    compress/decompress are no-ops when they would not change the block, otherwise they raise TypeError.
    """

    __slots__ = ()

    def compress(self) -> None:
        if self._compressed or not self._data:
            return
        raise TypeError("FrozenDataBlock can not be compressed in place")

    def decompress(self) -> None:
        if not self._compressed:
            return
        raise TypeError("FrozenDataBlock can not be decompressed in place")


# Shared placeholder, never mutated
EMPTY_DATA_BLOCK = FrozenDataBlock(b"", compression_speed=True)
