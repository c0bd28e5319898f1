"""Module entry point for ``python -m cli``; mirrors the ``docstore`` script."""

from __future__ import annotations

from cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
