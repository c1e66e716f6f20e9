from __future__ import annotations
"""Content digests for cache-busting query strings."""

from hashlib import sha1
from pathlib import Path

_CHUNK = 64 * 1024


def sha1_hexdigest(path: str | Path) -> str:
    """Return the SHA-1 hex digest of the bytes stored at *path*."""
    digest = sha1()
    with open(path, 'rb') as fh:
        for block in iter(lambda: fh.read(_CHUNK), b''):
            digest.update(block)
    return digest.hexdigest()
