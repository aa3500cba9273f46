"""Application entrypoint for running the tool from a source checkout."""

from __future__ import annotations

from weathercli.cli import main

if __name__ == "__main__":
    main()
