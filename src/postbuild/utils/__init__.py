"""
postbuild.utils – Small shared utilities (paths, digests).
"""
from .digest import sha1_hexdigest
from .paths import has_prefix, join_posix, strip_prefix, unquote

__all__ = ["sha1_hexdigest", "has_prefix", "join_posix", "strip_prefix", "unquote"]
