"""Main entry point for the trivia CLI."""

from trivia_client.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
