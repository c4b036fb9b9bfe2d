"""Detection of a system-installed Go toolchain and version string helpers."""

from __future__ import annotations

import os
import shutil
import subprocess
from datetime import datetime, timezone

from gopherkit.versions import SystemGoInfo, Version, host_arch, host_os

_SYSTEM_BINARIES = (
    "/usr/bin/go",
    "/usr/local/bin/go",
    "/opt/go/bin/go",
    "/usr/local/go/bin/go",
    "C:\\Program Files\\Go\\bin\\go.exe",
    "C:\\Go\\bin\\go.exe",
)

_SYSTEM_DIRS = (
    "/usr/bin",
    "/usr/local/bin",
    "/opt/go/bin",
    "/usr/local/go/bin",
    "/opt/homebrew/opt/go/libexec/bin",
    "/usr/local/opt/go/libexec/bin",
    "C:\\Program Files\\Go\\bin",
    "C:\\Go\\bin",
)

_HOMEBREW_MARKERS = ("/opt/homebrew/", "/usr/local/opt/")


class SystemGoError(Exception):
    """Raised when the system Go toolchain cannot be found or queried."""


def _clean(path: str) -> str:
    if not path:
        return "."
    cleaned = os.path.normpath(path)
    if os.sep == "/" and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _dir(path: str) -> str:
    return _clean(os.path.dirname(path) or ".")


class SystemDetector:
    """Finds and inspects the Go toolchain available on PATH."""

    def get_system_go_path(self) -> str:
        """Return the path of the go binary found on PATH."""
        go_path = shutil.which("go")
        if go_path is None:
            raise SystemGoError("go not found in PATH")
        return go_path

    def is_system_go_available(self) -> bool:
        """Tell whether a go binary is on PATH."""
        return shutil.which("go") is not None

    def _run(self, go_path: str, *args: str, what: str) -> str:
        try:
            result = subprocess.run(
                [go_path, *args], capture_output=True, text=True, check=True
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise SystemGoError(f"failed to get {what}: {exc}") from exc
        return result.stdout.strip()

    def parse_go_version(self, output: str) -> str:
        """Extract the version token from the output of 'go version'."""
        parts = output.split()
        if len(parts) < 3:
            raise SystemGoError(f"unexpected go version output format: {output}")

        if parts[2] == "devel":
            if len(parts) < 4:
                raise SystemGoError(f"unexpected devel version format: {output}")
            return f"{parts[2]} {parts[3]}"

        version_part = parts[2]
        if not version_part.startswith("go"):
            raise SystemGoError(f"unexpected version format: {version_part}")
        return version_part

    def is_system_installation(self, go_path: str) -> bool:
        """Tell whether the binary lives in a well-known system location."""
        cleaned = _clean(go_path)
        if any(cleaned == _clean(p) for p in _SYSTEM_BINARIES):
            return True

        directory = _dir(go_path)
        if any(directory == _clean(d) for d in _SYSTEM_DIRS):
            return True

        return any(marker in go_path for marker in _HOMEBREW_MARKERS)

    def detect_system_go(self) -> Version:
        """Describe the go binary on PATH as an active Version."""
        go_path = self.get_system_go_path()
        output = self._run(go_path, "version", what="go version")
        try:
            version = self.parse_go_version(output)
        except SystemGoError as exc:
            raise SystemGoError(f"failed to parse go version: {exc}") from exc

        try:
            installed_at = datetime.fromtimestamp(
                os.stat(go_path).st_mtime, tz=timezone.utc
            )
        except OSError:
            installed_at = datetime.now(timezone.utc)

        return Version(
            version=version,
            os=host_os(),
            arch=host_arch(),
            installed_at=installed_at,
            is_active=True,
            is_system=self.is_system_installation(go_path),
            path=go_path,
        )

    def get_system_go_info(self) -> SystemGoInfo:
        """Collect version, GOROOT and GOPATH of the go binary on PATH."""
        go_path = self.get_system_go_path()
        version = self._run(go_path, "version", what="go version")
        goroot = self._run(go_path, "env", "GOROOT", what="GOROOT")
        gopath = self._run(go_path, "env", "GOPATH", what="GOPATH")
        try:
            os.stat(go_path)
        except OSError as exc:
            raise SystemGoError(f"failed to get file info: {exc}") from exc

        return SystemGoInfo(
            version=version,
            goroot=goroot,
            gopath=gopath,
            executable=go_path,
            is_valid=True,
        )


def normalize_version(version: str) -> str:
    """Return the version with a 'go' prefix."""
    if not version:
        return "go"
    if version.startswith("go"):
        return version
    return "go" + version


def compare_versions(v1: str, v2: str) -> int:
    """Compare two versions part by part as text; return -1, 0 or 1."""
    parts1 = normalize_version(v1).removeprefix("go").split(".")
    parts2 = normalize_version(v2).removeprefix("go").split(".")

    for a, b in zip(parts1[:3], parts2[:3]):
        if a != b:
            return -1 if a < b else 1
    return 0