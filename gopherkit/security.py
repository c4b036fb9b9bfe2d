"""Path validation and file-permission hardening helpers."""

from __future__ import annotations

import os
import stat
from typing import BinaryIO

ERR_CODE_PATH_TRAVERSAL = "PATH_TRAVERSAL"
ERR_CODE_INVALID_PATH = "INVALID_PATH"
ERR_CODE_UNSAFE_PATH = "UNSAFE_PATH"

_SUSPICIOUS_PATTERNS = ("../", "..\\", "~", "$", "`", "|", "&", ";", "(", ")", "<", ">")
_SUSPICIOUS_CHARS = ("$", "`", "|", "&", ";", "(", ")", "<", ">")


class SecurityError(Exception):
    """A security-related failure, identified by a code."""

    def __init__(self, code: str, message: str, details: str = "") -> None:
        self.code = code
        self.message = message
        self.details = details
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


def _path_traversal(path: str) -> SecurityError:
    return SecurityError(ERR_CODE_PATH_TRAVERSAL, "path traversal detected", path)


def _invalid_path(path: str) -> SecurityError:
    return SecurityError(ERR_CODE_INVALID_PATH, "invalid path", path)


def _unsafe_path(path: str) -> SecurityError:
    return SecurityError(ERR_CODE_UNSAFE_PATH, "unsafe path detected", path)


def _clean(path: str) -> str:
    """Lexically simplify a path: drop '.', resolve '..', collapse separators."""
    if os.sep != "/":
        return os.path.normpath(path) if path else "."
    if not path:
        return "."
    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)
    result = "/".join(parts)
    if rooted:
        result = "/" + result
    return result or "."


def validate_path(path: str) -> None:
    """Raise SecurityError if the path is empty, traverses upwards or looks unsafe."""
    if not path:
        raise _invalid_path("empty path")

    clean_path = _clean(path)
    if ".." in clean_path:
        raise _path_traversal(path)

    if os.path.isabs(clean_path):
        return

    if any(pattern in path for pattern in _SUSPICIOUS_PATTERNS):
        raise _unsafe_path(path)


def sanitize_path(path: str) -> str:
    """Return the path with dangerous components and characters removed."""
    sanitized = path.replace("..", "").replace("~", "")
    for char in _SUSPICIOUS_CHARS:
        sanitized = sanitized.replace(char, "")

    clean_path = _clean(sanitized)
    if not os.path.isabs(path):
        clean_path = clean_path.removeprefix("/") if hasattr(str, "removeprefix") else clean_path
        clean_path = clean_path.removeprefix("\\")
    return clean_path


def validate_directory_path(path: str) -> None:
    """Raise SecurityError if the directory path is unsafe."""
    validate_path(path)


def is_safe_path(path: str) -> bool:
    """Tell whether the path passes validation."""
    try:
        validate_path(path)
    except SecurityError:
        return False
    return True


def get_safe_path(path: str) -> str:
    """Validate the path and return its cleaned form."""
    validate_path(path)
    return _clean(path)


def validate_file_permissions(file_path: str | os.PathLike, expected_mode: int) -> None:
    """Raise SecurityError if the file's permissions are too loose or differ from expected."""
    file_path = os.fspath(file_path)
    try:
        mode = os.stat(file_path).st_mode
    except OSError:
        raise _invalid_path(file_path) from None

    if mode & 0o002:
        raise _unsafe_path(f"{file_path} (world writable)")
    if mode & 0o020 and not mode & 0o004:
        raise _unsafe_path(f"{file_path} (group writable but not readable)")
    if expected_mode and stat.S_IMODE(mode) & 0o777 != expected_mode & 0o777:
        raise _unsafe_path(f"{file_path} (permissions mismatch)")


def set_secure_file_permissions(file_path: str | os.PathLike, mode: int) -> None:
    """Apply the mode with world write removed and group write kept readable."""
    secure_mode = mode & ~0o002
    if secure_mode & 0o020 and not secure_mode & 0o004:
        secure_mode |= 0o004
    os.chmod(file_path, secure_mode)


def create_secure_file(file_path: str | os.PathLike, mode: int) -> BinaryIO:
    """Create (or truncate) a file with secure permissions and return it open for writing."""
    file_path = os.fspath(file_path)
    validate_path(file_path)

    handle = open(file_path, "wb")
    try:
        set_secure_file_permissions(file_path, mode)
    except OSError:
        handle.close()
        try:
            os.remove(file_path)
        except OSError:
            pass
        raise
    return handle


def create_secure_directory(dir_path: str | os.PathLike, mode: int) -> None:
    """Create a directory tree and apply secure permissions to the leaf."""
    dir_path = os.fspath(dir_path)
    validate_directory_path(dir_path)
    os.makedirs(dir_path, mode=mode, exist_ok=True)
    set_secure_file_permissions(dir_path, mode)