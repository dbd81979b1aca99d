# topmark:header:start
#
#   project      : MimeGlob
#   file         : __init__.py
#   file_relpath : src/mimeglob/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob package.

MimeGlob resolves the MIME type(s) of a file name by matching it against a
registry of shared-mime-info glob patterns (``globs`` / ``globs2`` files). It
exposes both a CLI and a small typed API (see `mimeglob.api`).
"""

from __future__ import annotations
