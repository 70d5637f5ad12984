"""Platform detection, home-relative paths and running shell commands."""

from __future__ import annotations

import os
import subprocess
import sys
from enum import Enum
from typing import Callable

from . import strutil


class Platform(Enum):
    """Operating-system families the tool distinguishes."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    BSD = "bsd"

    @property
    def devnull(self) -> str:
        """Name of the null device on this platform."""
        return "nul" if self is Platform.WINDOWS else "/dev/null"


def current_platform() -> Platform:
    """Detect the platform the interpreter runs on."""
    name = sys.platform
    if name.startswith(("win32", "cygwin")):
        return Platform.WINDOWS
    if name == "darwin":
        return Platform.MACOS
    if name.startswith(("freebsd", "openbsd", "netbsd")):
        return Platform.BSD
    return Platform.LINUX


def _resolve(platform: Platform | None) -> Platform:
    return platform if platform is not None else current_platform()


def home_dir(platform: Platform | None = None) -> str | None:
    """The user's home directory from the environment, or None if unset."""
    if _resolve(platform) is Platform.WINDOWS:
        return os.environ.get("USERPROFILE")
    return os.environ.get("HOME")


def _require_home(platform: Platform | None) -> str:
    home = home_dir(platform)
    if home is None:
        raise OSError("home directory is not set in the environment")
    return home


def powershell_profile(platform: Platform | None = None) -> str:
    """Path of the PowerShell 7 user profile script."""
    return _require_home(platform) + "\\Documents\\PowerShell\\Microsoft.PowerShell_profile.ps1"


def powershell_v5_profile(platform: Platform | None = None) -> str:
    """Path of the Windows PowerShell 5 user profile script."""
    return (
        _require_home(platform)
        + "\\Documents\\WindowsPowerShell\\Microsoft.PowerShell_profile.ps1"
    )


def run_lines(
    command: str, n: int = 0, on_line: Callable[[str], None] | None = None
) -> str | None:
    """Run ``command`` through the shell and return one line of its output.

    ``n`` of 0 selects the last line, ``n`` > 0 the n-th line. ``on_line`` is
    called, in order, for every line read before the selected one (for the
    last line, on every line). Lines are passed and returned without their
    trailing newline. Returns None when the command prints nothing.
    """
    try:
        proc = subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise OSError(f"failed to run command: {command}") from exc

    result = None
    with proc:
        assert proc.stdout is not None
        for count, line in enumerate(proc.stdout, start=1):
            result = line.removesuffix("\n")
            if count == n:
                break
            if on_line is not None:
                on_line(result)
    return result


def run(command: str, n: int = 0) -> str | None:
    """Run ``command`` and return its n-th line of output (0 for the last)."""
    return run_lines(command, n)


def _expand_home(path: str, platform: Platform | None) -> str:
    if path.startswith("~"):
        return _require_home(platform) + path[1:]
    return path


def file_exists(path: str, platform: Platform | None = None) -> bool:
    """Whether ``path`` exists; a leading ``~`` means the home directory."""
    return os.access(_expand_home(path, platform), os.F_OK)


def dir_exists(path: str, platform: Platform | None = None) -> bool:
    """Whether ``path`` is a directory; a leading ``~`` means the home directory."""
    return os.path.isdir(_expand_home(path, platform))


def normalize_path(path: str, platform: Platform | None = None) -> str:
    """Strip surrounding whitespace, expand ``~/`` and use native separators."""
    platform = _resolve(platform)
    result = strutil.strip(path)
    if platform is Platform.WINDOWS:
        if result.startswith("~/"):
            result = _require_home(platform) + "\\" + strutil.delete_prefix(result, "~/")
        return strutil.gsub(result, "/", "\\")
    if result.startswith("~/"):
        result = _require_home(platform) + "/" + strutil.delete_prefix(result, "~/")
    return result


def parent_dir(path: str, platform: Platform | None = None) -> str:
    """Directory containing ``path`` after normalisation, or ``.`` if none."""
    platform = _resolve(platform)
    normalized = normalize_path(path, platform)
    sep = "\\" if platform is Platform.WINDOWS else "/"
    head, found, _ = normalized.rpartition(sep)
    return head if found else "."