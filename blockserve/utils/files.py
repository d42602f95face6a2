def must_read(filename) -> bytes:
    """Read the whole file. Returns empty bytes if it can not be read."""
    try:
        with open(filename, "rb") as f:
            return f.read()
    except OSError:
        return b""


def must_string(filename) -> str:
    """Contents of the file as a string, or an empty string if there were errors."""
    try:
        return must_read(filename).decode("utf-8")
    except UnicodeDecodeError:
        return ""
