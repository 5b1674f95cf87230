"""Main entry point for tempsync."""

from tempsync.cli.main import cli

if __name__ == "__main__":
    cli()
