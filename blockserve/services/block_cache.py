# services/block_cache.py
import os
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Optional

import structlog

from blockserve.models.data_block import DataBlock
from blockserve.utils.files import must_read

logger = structlog.get_logger()


@dataclass
class CacheEntry:
    block: DataBlock
    mtime: float
    # held by whoever converts or serves the block
    lock: threading.Lock = field(default_factory=threading.Lock)


class BlockCache:
    """
    In-memory cache of data blocks keyed by filename and modification time.
    - A block is reused (in whatever representation it was left) while the file's mtime is unchanged
    - Least recently used entries are evicted beyond max_entries
    """

    def __init__(self, max_entries: int = 512, compression_speed: bool = True):
        self.max_entries = max_entries
        self.compression_speed = compression_speed
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, path: str) -> Optional[CacheEntry]:
        """Return the cache entry for path, reading the file if needed. None if it is not a file."""
        try:
            stat = os.stat(path)
        except OSError:
            return None
        if not os.path.isfile(path):
            return None

        with self._lock:
            entry = self._entries.get(path)
            if entry is not None and entry.mtime == stat.st_mtime:
                self._entries.move_to_end(path)
                self._hits += 1
                return entry
            self._misses += 1

        block = DataBlock(must_read(path), self.compression_speed)
        entry = CacheEntry(block=block, mtime=stat.st_mtime)
        with self._lock:
            self._entries[path] = entry
            self._entries.move_to_end(path)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("block_cache_evicted", path=evicted)
        logger.debug("block_cache_loaded", path=path, length=block.length)
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> Dict:
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "stored_bytes": sum(e.block.length for e in self._entries.values()),
                "compressed_entries": sum(1 for e in self._entries.values() if e.block.is_compressed()),
            }
