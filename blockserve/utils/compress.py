import gzip
import zlib

from blockserve.common.errors import DecodeError, EncodeError

BEST_SPEED = 1
BEST_COMPRESSION = 9


def gzip_level(speed: bool) -> int:
    return BEST_SPEED if speed else BEST_COMPRESSION


def compress(data: bytes, speed: bool = True) -> bytes:
    """Gzip the whole payload in one shot. Empty input gives empty output."""
    if not data:
        return b""
    try:
        # mtime=0 keeps the output stable for identical payloads
        return gzip.compress(bytes(data), compresslevel=gzip_level(speed), mtime=0)
    except (MemoryError, OSError, zlib.error) as e:
        raise EncodeError(f"gzip compression failed: {e}") from e


def decompress(blob: bytes) -> bytes:
    """Gunzip a whole payload. Empty input gives empty output."""
    if not blob:
        return b""
    try:
        return gzip.decompress(bytes(blob))
    except (EOFError, OSError, zlib.error) as e:
        raise DecodeError(f"invalid gzip data: {e}") from e
