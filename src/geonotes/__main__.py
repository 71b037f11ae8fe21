"""Module entry point: python -m geonotes ..."""

from __future__ import annotations

from geonotes.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
