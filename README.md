# gopherkit

`gopherkit` is a small library of helpers for working with Go toolchain
installations from Python. It can:

- find the `go` binary on `PATH`, read its version, collect its `GOROOT` and
  `GOPATH`, and tell whether it sits in a system-wide location
  (`gopherkit.system.SystemDetector`);
- add the `go` prefix to version strings and compare them
  (`normalize_version`, `compare_versions`);
- describe versions and installations with plain data classes
  (`gopherkit.versions.Version`, `SystemGoInfo`, `VersionMetadata`, `Alias`),
  and report the host platform in Go's naming (`host_os`, `host_arch`);
- empty a download cache, remove a whole data directory, and remove the `go`
  symlinks that point into it (`gopherkit.manager.Manager`);
- check paths and file permissions before use (`gopherkit.security`).

## Installation

```
pip install gopherkit
```

It needs Python 3.10 or later and has no third-party dependencies.

## Usage

### Detecting system Go

```python
from gopherkit.system import SystemDetector, SystemGoError

detector = SystemDetector()
if detector.is_system_go_available():
    version = detector.detect_system_go()
    print(version.full_string())        # e.g. "go1.21.0 (linux/amd64) [system]"
    info = detector.get_system_go_info()
    print(info.goroot, info.gopath)

detector.parse_go_version("go version go1.21.0 darwin/arm64")          # "go1.21.0"
detector.parse_go_version("go version devel go1.22-abc123 linux/amd64")  # "devel go1.22-abc123"
detector.is_system_installation("/usr/local/go/bin/go")                 # True
```

`get_system_go_path`, `detect_system_go`, `get_system_go_info` and
`parse_go_version` raise `SystemGoError` when there is no `go` on `PATH`, when
running it fails, or when its output cannot be parsed.

### Version strings

```python
from gopherkit.system import normalize_version, compare_versions

normalize_version("1.21.0")                 # "go1.21.0"
compare_versions("go1.20.0", "1.21.0")      # -1
```

`compare_versions` compares the first three dot-separated parts as text and
returns -1, 0 or 1.

### Version records

```python
from gopherkit.versions import Version

v = Version("go1.21.0", os="darwin", arch="arm64", is_active=True)
v.full_string()      # "go1.21.0 (darwin/arm64)"
v.display_string()   # "→ go1.21.0 (darwin/arm64) [active]"
v.is_compatible()    # True only on darwin/arm64 (always True for system Go)
```

### Cleaning up the data directory

```python
from gopherkit.manager import Manager

manager = Manager(install_dir="/home/me/.gopher/versions",
                  download_dir="/home/me/.gopher/downloads")

freed = manager.clean()   # bytes removed from the download directory
manager.purge()           # removes /home/me/.gopher and go symlinks into it
manager.extract_version_from_path("/x/go1.21.0/bin/go")   # "go1.21.0"
manager.extract_version_from_path("/x/other/bin/go")      # None
```

`Manager` takes an optional `env` mapping (defaults to `os.environ`); it reads
`HOME`, or `LOCALAPPDATA` on Windows, to find the links that `remove_symlinks`
and `purge` look at. Only links whose target contains `.gopher` are removed.
`get_system_info()` returns the `SystemGoInfo` of the `go` on `PATH`, or
raises `SystemGoError` if there is none.

### Path and permission checks

```python
from gopherkit.security import (
    SecurityError, validate_path, sanitize_path, get_safe_path, is_safe_path,
)

sanitize_path("$HOME/go1.21.0")   # "HOME/go1.21.0"
get_safe_path("./go1.21.0")       # "go1.21.0"
is_safe_path("go1.21.0|rm")       # False

try:
    validate_path("../etc/passwd")
except SecurityError as exc:
    print(exc.code)               # "PATH_TRAVERSAL"
```

`validate_file_permissions` rejects world-writable files, files that are group
writable but not readable, and files whose mode differs from the one expected.
`set_secure_file_permissions`, `create_secure_file` and
`create_secure_directory` apply a mode with the world-write bit cleared.

## What it does not do

`gopherkit` does not download, install, uninstall or switch Go versions, does
not create the `go` symlinks or edit shell profiles, and does not store
aliases: `Alias` is only a data class. There is no command-line program; it is
used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```