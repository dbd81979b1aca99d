# topmark:header:start
#
#   project      : MimeGlob
#   file         : __main__.py
#   file_relpath : src/mimeglob/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m mimeglob``."""

from mimeglob.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="mimeglob")
