# topmark:header:start
#
#   project      : MimeGlob
#   file         : __init__.py
#   file_relpath : src/mimeglob/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob CLI subcommands."""

from __future__ import annotations
