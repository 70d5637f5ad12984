"""Small string helpers used when composing shell commands and config text."""

from __future__ import annotations

_WHITESPACE = "\n\r\v\t\f "


def gsub(text: str, pattern: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    return text.replace(pattern, replacement)


def starts_with(text: str | None, prefix: str | None) -> bool:
    """True if ``text`` begins with ``prefix``; False when either is None."""
    if text is None or prefix is None:
        return False
    return text.startswith(prefix)


def ends_with(text: str | None, suffix: str | None) -> bool:
    """True if ``text`` ends with ``suffix``; False when either is None."""
    if text is None or suffix is None:
        return False
    return text.endswith(suffix)


def delete_prefix(text: str, prefix: str) -> str:
    """Return ``text`` without ``prefix`` if it starts with it."""
    if starts_with(text, prefix):
        return text[len(prefix):]
    return text


def delete_suffix(text: str, suffix: str) -> str:
    """Return ``text`` without ``suffix`` if it ends with it."""
    if suffix and ends_with(text, suffix):
        return text[: -len(suffix)]
    return text


def strip(text: str) -> str:
    """Remove leading and trailing whitespace (newlines, tabs, spaces...)."""
    return text.strip(_WHITESPACE)


def streql(a: str | None, b: str | None) -> bool:
    """Compare two strings for equality; None never equals anything."""
    if a is None or b is None:
        return False
    return a == b


def quiet_command(command: str, windows: bool = False) -> str:
    """Return ``command`` with its output redirected to the null device."""
    if windows:
        return command + " >nul 2>nul "
    return command + " 1>/dev/null 2>&1 "