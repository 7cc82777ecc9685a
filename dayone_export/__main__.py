"""Module entrypoint for running dayone-export as ``python -m dayone_export``."""

from __future__ import annotations

from dayone_export.cli import main


if __name__ == "__main__":
    main()
