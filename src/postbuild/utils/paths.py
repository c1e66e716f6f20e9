from __future__ import annotations
"""Path helpers shared by the resolver and the tag generator."""

import posixpath


def join_posix(directory: str, name: str) -> str:
    """Join with '/' separators and normalise, as emitted in HTML."""
    return posixpath.normpath(posixpath.join(directory, name))


def strip_prefix(path: str, prefix: str | None) -> str:
    """Drop ``len(prefix)`` leading characters from *path*.

    The slice is blind: it does not check that *path* really starts with
    *prefix*. Callers that care use :func:`has_prefix` first.
    """
    if prefix is None:
        return path
    return path[len(prefix):]


def has_prefix(path: str, prefix: str | None) -> bool:
    return prefix is None or path.startswith(prefix)


def unquote(pattern: str) -> str:
    """Remove one layer of surrounding single/double quotes."""
    if len(pattern) > 2 and pattern[0] in ('"', "'") and pattern[-1] in ('"', "'"):
        return pattern[1:-1]
    return pattern
