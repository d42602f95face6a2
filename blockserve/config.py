import os


def _env_bool(name, default):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    # 静态内容根目录
    CONTENT_ROOT = os.getenv('CONTENT_ROOT', './public')

    # 超过该字节数才对支持 gzip 的客户端压缩
    GZIP_THRESHOLD = int(os.getenv('GZIP_THRESHOLD', '4096'))
    # true: 最快压缩, false: 最高压缩比
    COMPRESSION_SPEED = _env_bool('COMPRESSION_SPEED', 'true')

    # 按文件名 + mtime 缓存数据块
    ENABLE_CACHE = _env_bool('ENABLE_CACHE', 'true')
    CACHE_MAX_ENTRIES = int(os.getenv('CACHE_MAX_ENTRIES', '512'))
