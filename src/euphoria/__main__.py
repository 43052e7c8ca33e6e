"""Allow `python -m euphoria` as an alias for `euphoria-config`."""

from euphoria.cli import cli

if __name__ == "__main__":
    cli()
