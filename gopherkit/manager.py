"""Management of the directories and links owned by the version manager."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path

from gopherkit.system import SystemDetector, SystemGoError
from gopherkit.versions import SystemGoInfo, host_os

_VERSION_PREFIXES = ("go1.", "go2.")


class Manager:
    """Owns the install and download directories and the links into them."""

    def __init__(
        self,
        install_dir: str | os.PathLike,
        download_dir: str | os.PathLike,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.install_dir = os.fspath(install_dir)
        self.download_dir = os.fspath(download_dir)
        self.env: Mapping[str, str] = os.environ if env is None else env

    def extract_version_from_path(self, path: str) -> str | None:
        """Return the first 'go1.x'/'go2.x' component of a path, or None."""
        entries = path.split(os.pathsep) if path else []
        for entry in entries:
            base = os.path.basename(entry.rstrip(os.sep)) if entry else "."
            if base.startswith(_VERSION_PREFIXES):
                return base

        for part in path.split(os.sep):
            if part.startswith(_VERSION_PREFIXES):
                return part
        return None

    def clean(self) -> int:
        """Empty the download cache and return the number of bytes freed."""
        root = Path(self.download_dir)
        if not root.exists():
            return 0

        total = 0
        for current, dirs, files in os.walk(root, onerror=_raise):
            for name in files + [d for d in dirs if os.path.islink(os.path.join(current, d))]:
                total += os.lstat(os.path.join(current, name)).st_size

        if total == 0:
            return 0

        for entry in root.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        return total

    def purge(self) -> None:
        """Remove every file the manager owns: versions, downloads, state and links."""
        gopher_dir = Path(self.install_dir).parent
        if not gopher_dir.exists():
            return

        self.remove_symlinks()

        if gopher_dir.is_symlink() or not gopher_dir.is_dir():
            gopher_dir.unlink()
        else:
            shutil.rmtree(gopher_dir)

    def _candidate_links(self) -> list[str]:
        if host_os() == "windows":
            local_app_data = self.env.get("LOCALAPPDATA", "")
            if not local_app_data:
                return []
            return [os.path.join(local_app_data, "gopher", "bin", "go.exe")]

        home = self.env.get("HOME", "")
        return [
            "/usr/local/bin/go",
            os.path.join(home, ".local", "bin", "go"),
            os.path.join(home, "bin", "go"),
        ]

    def remove_symlinks(self) -> None:
        """Remove links to managed versions from the usual locations, best effort."""
        for link in self._candidate_links():
            if not os.path.islink(link):
                continue
            try:
                target = os.readlink(link)
            except OSError:
                continue
            if ".gopher" in target:
                try:
                    os.remove(link)
                except OSError:
                    pass

    def get_system_info(self) -> SystemGoInfo:
        """Describe the system Go toolchain; raise SystemGoError if there is none."""
        detector = SystemDetector()
        if not detector.is_system_go_available():
            raise SystemGoError("system Go not available")
        return detector.get_system_go_info()


def _raise(error: OSError) -> None:
    raise error