import os

from flask import Blueprint, current_app, request
from werkzeug.security import safe_join

from blockserve.common.response import success, fail
from blockserve.models.data_block import DataBlock
from blockserve.services.block_cache import CacheEntry
from blockserve.services.negotiator import ContentNegotiator
from blockserve.utils.files import must_read

content_bp = Blueprint('content', __name__)


def _load_entry(filename):
    cache = current_app.extensions.get("block_cache")
    if cache is not None:
        return cache.get(filename)
    # 未启用缓存：每个请求读取一次文件
    if not os.path.isfile(filename):
        return None
    block = DataBlock(must_read(filename), current_app.config["COMPRESSION_SPEED"])
    return CacheEntry(block=block, mtime=os.path.getmtime(filename))


@content_bp.route('/_cache/stats', methods=['GET'])
def cache_stats():
    cache = current_app.extensions.get("block_cache")
    if cache is None:
        return fail("缓存未启用")
    return success(cache.stats())


@content_bp.route('/', defaults={'path': 'index.html'}, methods=['GET'])
@content_bp.route('/<path:path>', methods=['GET'])
def serve_content(path):
    filename = safe_join(current_app.config["CONTENT_ROOT"], path)
    if filename is None:
        return fail("非法路径", code=404, status=404)
    entry = _load_entry(filename)
    if entry is None:
        return fail("文件不存在", code=404, status=404)

    can_gzip = ContentNegotiator.client_accepts_gzip(request)
    # one request at a time may convert the cached block
    with entry.lock:
        return ContentNegotiator.serve(
            entry.block,
            can_gzip,
            current_app.config["GZIP_THRESHOLD"],
            os.path.basename(filename),
        )
