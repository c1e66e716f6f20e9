from __future__ import annotations

"""Project-wide constants used across modules.

The marker grammar recognised inside HTML templates lives here so that the
pipeline, the tests and any caller share one definition.
"""

INJECT_JS_START: str = '<!-- inject:js -->'
INJECT_CSS_START: str = '<!-- inject:css -->'
INJECT_END: str = '<!-- endinject -->'
GIT_HASH_MARKER: str = '<!-- inject:git-hash -->'
REMOVE_START_TEMPLATE: str = '<!-- remove:{condition} -->'
REMOVE_END: str = '<!-- endremove -->'

CSS_EXTENSION: str = '.css'
JS_EXTENSION: str = '.js'

ETAG_QUERY: str = '?etag='
