"""Main entry point for the NexLink CLI.

Usage:
    python -m nexlink --help
    nexlink --help  # If installed via pip
"""

from nexlink.cli import main

if __name__ == "__main__":
    main()
