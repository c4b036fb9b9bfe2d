"""Data types describing Go versions, aliases and system installations."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone

_OS_PREFIXES = (
    ("linux", "linux"),
    ("darwin", "darwin"),
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("freebsd", "freebsd"),
    ("openbsd", "openbsd"),
    ("netbsd", "netbsd"),
    ("sunos", "solaris"),
    ("aix", "aix"),
)

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
    "arm": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "mips64": "mips64",
    "loongarch64": "loong64",
}


def host_os() -> str:
    """Return the current operating system using Go's naming."""
    for prefix, name in _OS_PREFIXES:
        if sys.platform.startswith(prefix):
            return name
    return sys.platform


def host_arch() -> str:
    """Return the current CPU architecture using Go's naming."""
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Version:
    """A Go version together with platform and status information."""

    version: str
    os: str = field(default_factory=host_os)
    arch: str = field(default_factory=host_arch)
    installed_at: datetime = field(default_factory=_now)
    is_active: bool = False
    is_system: bool = False
    path: str = ""

    def full_string(self) -> str:
        """Version with OS and architecture, marked when it is the system Go."""
        text = f"{self.version} ({self.os}/{self.arch})"
        if self.is_system:
            text += " [system]"
        return text

    def __str__(self) -> str:
        return self.full_string()

    def display_string(self) -> str:
        """Listing line with an arrow and tag for the active version."""
        base = self.full_string()
        if self.is_active:
            return f"→ {base} [active]"
        return f"  {base}"

    def is_compatible(self) -> bool:
        """Tell whether the version runs on this platform."""
        if self.is_system:
            return True
        return self.os == host_os() and self.arch == host_arch()


@dataclass
class VersionMetadata:
    """Metadata recorded for an installed version."""

    version: str
    os: str
    arch: str
    installed_at: datetime
    install_dir: str


@dataclass
class SystemGoInfo:
    """Details of a system-installed Go toolchain."""

    version: str
    goroot: str
    gopath: str
    executable: str
    is_valid: bool = True


@dataclass
class Alias:
    """A memorable name pointing at a Go version."""

    name: str
    version: str
    created: datetime = field(default_factory=_now)
    updated: datetime = field(default_factory=_now)
    tags: list[str] = field(default_factory=list)
    group: str = ""