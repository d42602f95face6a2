from blockserve.utils.files import must_read, must_string


def test_must_read(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01\x02")
    assert must_read(path) == b"\x00\x01\x02"


def test_must_read_missing(tmp_path):
    assert must_read(tmp_path / "missing.bin") == b""
    assert must_read(tmp_path) == b""


def test_must_string(tmp_path):
    path = tmp_path / "text.txt"
    path.write_text("你好", encoding="utf-8")
    assert must_string(path) == "你好"


def test_must_string_errors(tmp_path):
    assert must_string(tmp_path / "missing.txt") == ""
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    assert must_string(path) == ""


def test_must_string_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"line one\r\nline two\r\n")
    assert must_string(path) == "line one\r\nline two\r\n"
