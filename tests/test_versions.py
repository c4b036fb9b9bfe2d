import pytest

from gopherkit import versions
from gopherkit.versions import Alias, SystemGoInfo, Version, host_arch, host_os


def _other_arch():
    return "arm64" if host_arch() == "amd64" else "amd64"


def test_version_string():
    v = Version(version="1.21.0", os=host_os(), arch=host_arch())
    assert str(v) == f"1.21.0 ({host_os()}/{host_arch()})"


def test_version_string_system():
    v = Version(version="1.21.0", os=host_os(), arch=host_arch(), is_system=True)
    assert str(v) == f"1.21.0 ({host_os()}/{host_arch()}) [system]"


def test_version_full_string():
    v = Version(version="1.21.0", os=host_os(), arch=host_arch())
    assert v.full_string() == f"1.21.0 ({host_os()}/{host_arch()})"


def test_version_full_string_system():
    v = Version(version="1.21.0", os=host_os(), arch=host_arch(), is_system=True)
    assert v.full_string() == f"1.21.0 ({host_os()}/{host_arch()}) [system]"


def test_system_version_fixed_platform():
    v = Version(version="go1.21.0", os="darwin", arch="arm64", is_system=True, is_active=True)
    assert str(v) == "go1.21.0 (darwin/arm64) [system]"
    assert v.full_string().endswith("[system]")


def test_display_string_active():
    v = Version(version="go1.21.0", os="darwin", arch="arm64", is_active=True)
    assert v.display_string() == "→ go1.21.0 (darwin/arm64) [active]"


def test_display_string_inactive():
    v = Version(version="go1.21.0", os="linux", arch="amd64")
    assert v.display_string() == "  go1.21.0 (linux/amd64)"


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({"os": None, "arch": None, "is_system": False}, True),
        ({"os": "windows-other", "arch": None, "is_system": False}, False),
        ({"os": None, "arch": "other", "is_system": False}, False),
        ({"os": "any", "arch": "any", "is_system": True}, True),
    ],
)
def test_is_compatible(kwargs, expected):
    os_name = kwargs["os"] or host_os()
    arch = kwargs["arch"]
    if arch is None:
        arch = host_arch()
    elif arch == "other":
        arch = _other_arch()
    v = Version(version="go1.21.0", os=os_name, arch=arch, is_system=kwargs["is_system"])
    assert v.is_compatible() is expected


def test_version_defaults_to_host_platform():
    v = Version(version="go1.22.0")
    assert (v.os, v.arch) == (host_os(), host_arch())
    assert v.is_active is False and v.is_system is False and v.path == ""


@pytest.mark.parametrize(
    "platform_name, expected",
    [("linux", "linux"), ("darwin", "darwin"), ("win32", "windows"), ("freebsd13", "freebsd")],
)
def test_host_os(monkeypatch, platform_name, expected):
    monkeypatch.setattr(versions.sys, "platform", platform_name)
    assert host_os() == expected


@pytest.mark.parametrize(
    "machine, expected",
    [("x86_64", "amd64"), ("AMD64", "amd64"), ("aarch64", "arm64"), ("i686", "386"), ("armv7l", "arm")],
)
def test_host_arch(monkeypatch, machine, expected):
    monkeypatch.setattr(versions.platform, "machine", lambda: machine)
    assert host_arch() == expected


def test_alias_defaults_are_independent():
    first = Alias(name="stable", version="go1.21.0")
    second = Alias(name="dev", version="go1.22.0")
    first.tags.append("production")
    assert second.tags == []
    assert first.group == ""


def test_system_go_info_fields():
    info = SystemGoInfo(
        version="go version go1.21.0 darwin/arm64",
        goroot="/usr/local/go",
        gopath="/home/user/go",
        executable="/usr/bin/go",
    )
    assert info.executable == "/usr/bin/go"
    assert info.is_valid is True