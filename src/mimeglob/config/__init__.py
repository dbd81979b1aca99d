# topmark:header:start
#
#   project      : MimeGlob
#   file         : __init__.py
#   file_relpath : src/mimeglob/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for MimeGlob: TOML model, loaders and logging setup.

Submodules are imported explicitly (``mimeglob.config.model``,
``mimeglob.config.logging``); this package does not re-export them because the
glob engine imports the logging helpers from here.
"""

from __future__ import annotations
