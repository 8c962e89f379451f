"""Allow ``python -m vibedetector``."""

from vibedetector.cli.main import cli

if __name__ == "__main__":
    cli()
