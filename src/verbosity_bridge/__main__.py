"""Command-line entry point for the verbosity-bridge package."""

from .cli import main

if __name__ == "__main__":
    main()
