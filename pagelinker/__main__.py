"""Entry point for ``python -m pagelinker``."""

from pagelinker.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
