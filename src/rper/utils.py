from rper import consts


def format_mode(mode: int) -> str:
    """Format permission bits as plain octal digits, e.g. 0o644 -> "644"."""
    return f"{mode & consts.PERMISSION_MASK:o}"


def os_error_reason(exc: OSError) -> str:
    """Short reason for an OS error, like C's strerror(errno)."""
    return exc.strerror if exc.strerror else str(exc)
