from __future__ import annotations
import sys
from docio.app import run_app


def main() -> int:
    """Module entrypoint for `python -m docio.main` or `python -m docio`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
