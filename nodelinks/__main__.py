"""Entry point for ``python -m nodelinks``."""

from nodelinks.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
