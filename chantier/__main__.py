"""Module entrypoint for running Chantier as ``python -m chantier``."""

from __future__ import annotations

from chantier.cli import main


if __name__ == "__main__":
    main()
