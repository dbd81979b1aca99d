# topmark:header:start
#
#   project      : MimeGlob
#   file         : __init__.py
#   file_relpath : src/mimeglob/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core helpers shared by the glob engine, the config layer and the CLI."""

from __future__ import annotations
