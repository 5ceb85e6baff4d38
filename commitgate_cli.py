#!/usr/bin/env python
"""
Thin wrapper script to invoke the commitgate CLI.

Running ``python commitgate_cli.py`` is equivalent to running the
``commitgate`` console script installed via ``pyproject.toml``.
"""

from commitgate.cli import main


if __name__ == "__main__":
    main(prog_name="commitgate")
