"""Run script.

Lets `python -m main` start the CLI from `src/` during development, next to
the `redfish-inventory` console script.
"""

from __future__ import annotations

import sys

# Windows terminals may default to cp1252; Rich tables need utf-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
