"""Module entrypoint for ``python -m bffclient.cli``."""

from bffclient.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
