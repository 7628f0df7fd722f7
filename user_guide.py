"""Compatibility wrapper for invoking docguide via python user_guide.py."""

from __future__ import annotations

import sys

from docguide.cli import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
