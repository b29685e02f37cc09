"""Main entry point for the scriptpad CLI when run as a module."""

from scriptpad.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
