from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the output marker scheme so the walker, renderer and
tests agree on a single definition.
"""

# Block markers. Note the asymmetric '<<<' / '>>' pair; consumers rely on it.
START_MARKER: str = '<<<START_FILE:{path}>>'
END_MARKER: str = '<<<END_FILE:{path}>>'

# Prefix line for non-UTF-8 payloads written as base64.
BINARY_PREFIX: str = '[Binary data encoded as base64]:'

GITIGNORE_NAME: str = '.gitignore'

DEFAULT_ROOT: str = '.'
