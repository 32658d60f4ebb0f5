"""String helpers for reading parameter files: trimming, splitting and conversion."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def string_to_bool(s: str) -> bool:
    """Interpret yes/true/1 (or anything starting with 'y') and no/false/0 (or 'n')."""
    lower = s.lower()
    if lower in ("yes", "true", "1") or lower.startswith("y"):
        return True
    if lower in ("no", "false", "0") or lower.startswith("n"):
        return False
    raise ValueError(
        f"unable to interpret '{s}' as true/yes/1 or false/no/0: check your input."
    )


def get_file_extension(filename: str) -> str:
    """Everything after the last period, or an empty string if there is none."""
    _, dot, extension = filename.rpartition(".")
    return extension if dot else ""


def trim_whitespace(s: str, whitespace: str = " \t") -> str:
    """Remove leading and trailing characters found in ``whitespace``."""
    return s.strip(whitespace)


def remove_trailing_comment(s: str, comment_chars: str = "#") -> tuple[str, str]:
    """Split ``s`` at the first comment character into ``(text, comment)``.

    The character just before the comment marker (normally a separating
    space) is dropped from the text, and ``len(comment_chars)`` characters
    are skipped at the start of the comment.
    """
    positions = [pos for pos in (s.find(c) for c in comment_chars) if pos >= 0]
    if not positions:
        return s, ""
    pos = min(positions)
    text = s[: pos - 1] if pos > 0 else ""
    return text, s[pos + len(comment_chars):]


def is_number(s: str) -> bool:
    """True if the string starts (after whitespace) with a parsable number."""
    return _FLOAT_PREFIX.match(s) is not None


def string_to_value(s: str, type_: type = str) -> Any:
    """Convert a string to ``type_``; numbers are read from the leading part."""
    if type_ is str:
        return s
    if type_ is bool:
        return string_to_bool(s)
    if type_ is int:
        match = _INT_PREFIX.match(s)
        if match is None:
            raise ValueError(f"unable to convert '{s}' to the desired type")
        return int(match.group(1))
    if type_ is float:
        match = _FLOAT_PREFIX.match(s)
        if match is None:
            raise ValueError(f"unable to convert '{s}' to the desired type")
        return float(match.group(1))
    try:
        return type_(s.strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"unable to convert '{s}' to the desired type") from exc


def strings_to_array(strings: Sequence[str], type_: type, dim: int) -> tuple:
    """Convert exactly ``dim`` strings to a tuple of ``type_``."""
    if len(strings) != dim:
        raise ValueError(f"size mismatch: expected {dim} values, got {len(strings)}")
    return tuple(string_to_value(s, type_) for s in strings)


def strings_to_vector(strings: Iterable[str], type_: type = str) -> list:
    return [string_to_value(s, type_) for s in strings]


def split(s: str, delim: str | None = None, type_: type = str) -> list:
    """Split on whitespace, or on ``delim``, converting each token to ``type_``.

    Whitespace splitting stops at the first token that cannot be converted.
    Delimited splitting drops a single trailing empty field.
    """
    if delim is None:
        tokens = []
        for token in s.split():
            try:
                tokens.append(string_to_value(token, type_))
            except ValueError:
                break
        return tokens
    parts = s.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return [string_to_value(part, type_) for part in parts]


def _extract(token: str, type_: type) -> Any:
    if type_ is str:
        words = token.split()
        return words[0] if words else ""
    return string_to_value(token, type_)


def string_to_vector(s: str, type_: type = str) -> list:
    """Parse the compact form ``[x,y,z]`` into a list of ``type_``."""
    start = s.find("[") + 1
    end = s.rfind("]")
    body = s[start:end] if end >= start else s[start:]
    parts = body.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return [_extract(part, type_) for part in parts]


def fixed_width(value: Any, width: int = -1, align: str = "right") -> str:
    """Render ``value`` in exactly ``width`` characters, truncating or padding.

    ``align="left"`` keeps the leading characters and pads on the right;
    ``align="right"`` keeps the trailing characters and pads on the left.
    A negative width leaves the text unchanged.
    """
    if align not in ("left", "right"):
        if align == "internal":
            raise ValueError("unsupported alignment: internal")
        raise ValueError(f"unrecognized alignment: {align}")
    text = str(value)
    if width < 0:
        return text
    if len(text) > width:
        return text[:width] if align == "left" else text[len(text) - width:]
    return text.ljust(width) if align == "left" else text.rjust(width)