"""Entry point for running as ``python -m krabby``."""

from krabby.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
