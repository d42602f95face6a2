import pytest

from blockserve.app import create_app

GZIP_THRESHOLD = 64
SMALL_CONTENT = b"tiny"
LARGE_CONTENT = b"the quick brown fox jumps over the lazy dog\n" * 200
INDEX_CONTENT = b"<html><body><h1>hello</h1></body></html>"


@pytest.fixture(scope="module")
def content_root(tmp_path_factory):
    """临时静态内容目录（整个模块共享）"""
    root = tmp_path_factory.mktemp("public")
    (root / "index.html").write_bytes(INDEX_CONTENT)
    (root / "small.txt").write_bytes(SMALL_CONTENT)
    (root / "large.txt").write_bytes(LARGE_CONTENT)
    (root / "docs").mkdir()
    return root


@pytest.fixture
def test_app(content_root):
    app = create_app({
        "TESTING": True,
        "CONTENT_ROOT": str(content_root),
        "GZIP_THRESHOLD": GZIP_THRESHOLD,
        "COMPRESSION_SPEED": True,
        "ENABLE_CACHE": True,
    })
    with app.app_context():
        yield app


@pytest.fixture
def client(test_app):
    return test_app.test_client()
