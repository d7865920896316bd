"""Allow ``python -m lstracker``."""

from lstracker.interfaces.cli.app import run

if __name__ == "__main__":
    run()
