"""Module entrypoint for running Typograph as ``python -m typograph``."""

from __future__ import annotations

from typograph.cli import main


if __name__ == "__main__":
    main()
