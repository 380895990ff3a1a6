"""Entry point for ``python -m cricket_cli``."""

from cricket_cli.cli.main import app

if __name__ == '__main__':
    app()
